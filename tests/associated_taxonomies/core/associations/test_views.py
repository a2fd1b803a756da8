"""
Tests term associations rest api views
"""
from __future__ import annotations

import ddt  # type: ignore[import]
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase

from associated_taxonomies.core.associations import api

from ..terms.test_models import TestTermsMixin

User = get_user_model()

TERM_ASSOCIATIONS_URL = "/associations/rest_api/v1/terms/{term_id}/associations/"
RELATED_TERMS_URL = "/associations/rest_api/v1/render/related_terms/"
POSTS_BY_RELATED_TERMS_URL = "/associations/rest_api/v1/render/posts_by_related_terms/"


class TestAssociationsViewMixin(TestTermsMixin, APITestCase):
    """
    Mixin for term associations views. Adds users.
    """

    def setUp(self):
        super().setUp()
        self.user = User.objects.create(
            username="user",
            email="user@example.com",
        )
        self.staff = User.objects.create(
            username="staff",
            email="staff@example.com",
            is_staff=True,
        )


@ddt.ddt
class TestTermAssociationsView(TestAssociationsViewMixin):
    """
    Test retrieving and replacing the associations of a term.
    """

    def test_retrieve(self):
        api.set_associated_term_ids(self.news.id, [56, 34, 99])
        response = self.client.get(TERM_ASSOCIATIONS_URL.format(term_id=self.news.id))
        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            "term_id": 12,
            "taxonomy": "category",
            "associated_term_ids": [34, 56, 99],
            "associated_terms": [
                {"id": 34, "name": "Sports", "url": "http://testserver/terms/category/sports/"},
                {"id": 56, "name": "Politics", "url": "http://testserver/terms/category/politics/"},
            ],
        }

    def test_retrieve_empty(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.get(TERM_ASSOCIATIONS_URL.format(term_id=self.weather.id))
        assert response.status_code == status.HTTP_200_OK
        assert response.data["associated_term_ids"] == []
        assert response.data["associated_terms"] == []

    @ddt.data("999", "abc", "99999999999999999999")
    def test_retrieve_not_found(self, term_id):
        response = self.client.get(TERM_ASSOCIATIONS_URL.format(term_id=term_id))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @ddt.data(
        (None, status.HTTP_401_UNAUTHORIZED),
        ("user", status.HTTP_403_FORBIDDEN),
        ("staff", status.HTTP_200_OK),
    )
    @ddt.unpack
    def test_retrieve_non_public(self, user_attr, expected_status):
        if user_attr:
            self.client.force_authenticate(user=getattr(self, user_attr))
        response = self.client.get(TERM_ASSOCIATIONS_URL.format(term_id=self.draft_ideas.id))
        assert response.status_code == expected_status

    @ddt.data(
        (None, status.HTTP_401_UNAUTHORIZED),
        ("user", status.HTTP_403_FORBIDDEN),
        ("staff", status.HTTP_200_OK),
    )
    @ddt.unpack
    def test_update_permissions(self, user_attr, expected_status):
        if user_attr:
            self.client.force_authenticate(user=getattr(self, user_attr))
        response = self.client.put(
            TERM_ASSOCIATIONS_URL.format(term_id=self.news.id),
            {"associated_term_ids": [34]},
            format="json",
        )
        assert response.status_code == expected_status
        expected_ids = {34} if expected_status == status.HTTP_200_OK else set()
        assert api.get_associated_term_ids(self.news.id) == expected_ids

    def test_update_replaces(self):
        api.set_associated_term_ids(self.news.id, [56])
        self.client.force_authenticate(user=self.staff)
        response = self.client.put(
            TERM_ASSOCIATIONS_URL.format(term_id=self.news.id),
            {"associated_term_ids": [5, 34]},
            format="json",
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["associated_term_ids"] == [5, 34]
        assert [term["name"] for term in response.data["associated_terms"]] == ["Science", "Sports"]
        assert api.get_associated_term_ids(self.news.id) == {5, 34}

    def test_update_empty_clears(self):
        api.set_associated_term_ids(self.news.id, [56])
        self.client.force_authenticate(user=self.staff)
        response = self.client.put(
            TERM_ASSOCIATIONS_URL.format(term_id=self.news.id),
            {"associated_term_ids": []},
            format="json",
        )
        assert response.status_code == status.HTTP_200_OK
        assert api.get_associated_term_ids(self.news.id) == set()

    @ddt.data(
        {"associated_term_ids": [12]},
        {"associated_term_ids": ["abc"]},
        {"associated_term_ids": "34"},
        {"associated_term_ids": [99999999999999999999]},
        {"associated_term_ids": [0]},
        {},
    )
    def test_update_invalid(self, body):
        api.set_associated_term_ids(self.news.id, [56])
        self.client.force_authenticate(user=self.staff)
        response = self.client.put(
            TERM_ASSOCIATIONS_URL.format(term_id=self.news.id),
            body,
            format="json",
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert api.get_associated_term_ids(self.news.id) == {56}

    def test_update_non_covered_taxonomy(self):
        self.client.force_authenticate(user=self.staff)
        response = self.client.put(
            TERM_ASSOCIATIONS_URL.format(term_id=self.draft_ideas.id),
            {"associated_term_ids": [30]},
            format="json",
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestFragmentViews(TestAssociationsViewMixin):
    """
    Test the HTML fragment views.
    """

    def test_related_terms(self):
        api.set_associated_term_ids(self.news.id, [34])
        response = self.client.get(RELATED_TERMS_URL, {"id": "12", "taxonomy": "category"})
        assert response.status_code == status.HTTP_200_OK
        assert response["Content-Type"] == "text/html; charset=utf-8"
        self.assertInHTML('<a href="/terms/category/sports/">Sports</a>', response.content.decode())

    def test_related_terms_invalid(self):
        response = self.client.get(RELATED_TERMS_URL, {"id": "42", "taxonomy": "category"})
        assert response.status_code == status.HTTP_200_OK
        assert response.content.decode() == "<p>Invalid term ID or taxonomy.</p>"

    def test_related_terms_no_params(self):
        response = self.client.get(RELATED_TERMS_URL)
        assert response.content.decode() == "<p>Invalid term ID or taxonomy.</p>"

    def test_posts_by_related_terms(self):
        response = self.client.get(
            POSTS_BY_RELATED_TERMS_URL,
            {"parent": "12", "child": "34,56", "taxonomy": "category"},
        )
        assert response.status_code == status.HTTP_200_OK
        content = response.content.decode()
        self.assertInHTML('<a href="/posts/election-night/">Election night</a>', content)
        self.assertInHTML('<a href="/posts/match-report/">Match report</a>', content)
        assert "Headlines" not in content

    def test_posts_by_related_terms_none_found(self):
        response = self.client.get(
            POSTS_BY_RELATED_TERMS_URL,
            {"parent": "12", "child": "7", "taxonomy": "category"},
        )
        assert response.content.decode() == "<p>No posts found for the specified terms.</p>"

    def test_posts_by_related_terms_oversized_ids(self):
        response = self.client.get(
            POSTS_BY_RELATED_TERMS_URL,
            {"parent": "99999999999999999999", "child": "34,99999999999999999999", "taxonomy": "category"},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.content.decode() == "<p>No posts found for the specified terms.</p>"

    def test_related_terms_oversized_id(self):
        response = self.client.get(RELATED_TERMS_URL, {"id": "99999999999999999999", "taxonomy": "category"})
        assert response.status_code == status.HTTP_200_OK
        assert response.content.decode() == "<p>Invalid term ID or taxonomy.</p>"
