"""
Test the terms APIs
"""
from __future__ import annotations

import ddt  # type: ignore[import]
from django.core.exceptions import ValidationError
from django.test import TestCase

from associated_taxonomies.core.terms import api
from associated_taxonomies.core.terms.models import Post, TermMeta

from .test_models import TestTermsMixin


@ddt.ddt
class TestCoerceInt(TestCase):
    """
    Test the loose integer conversion used for IDs coming from user input.
    """

    @ddt.data(
        (12, 12),
        ("12", 12),
        (" 7 ", 7),
        ("12abc", 12),
        ("1.9", 1),
        ("-3", -3),
        ("+4", 4),
        (5.9, 5),
        (True, 1),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        (None, 0),
        ([], 0),
        ("99999999999999999999", api.MAX_INT),
        ("-99999999999999999999", api.MIN_INT),
        (10 ** 20, api.MAX_INT),
        (-(10 ** 20), api.MIN_INT),
        (1e30, api.MAX_INT),
        (float("inf"), 0),
        (float("nan"), 0),
        ("\u0661\u0662", 0),
    )
    @ddt.unpack
    def test_coerce_int(self, value, expected):
        assert api.coerce_int(value) == expected


@ddt.ddt
class TestApiTerms(TestTermsMixin, TestCase):
    """
    Test the terms API methods.
    """

    def test_create_taxonomy(self) -> None:
        taxonomy = api.create_taxonomy("genre", description="Kinds of writing")
        assert taxonomy.name == "genre"
        assert taxonomy.label == "genre"
        assert taxonomy.description == "Kinds of writing"
        assert taxonomy.public

    def test_create_taxonomy_duplicate(self) -> None:
        with self.assertRaises(ValidationError):
            api.create_taxonomy("category")

    def test_get_taxonomy(self) -> None:
        assert api.get_taxonomy("category") == self.category
        assert api.get_taxonomy("nope") is None
        assert api.get_taxonomy("") is None

    @ddt.data(
        ("category", True),
        ("internal", True),
        ("nope", False),
        ("", False),
    )
    @ddt.unpack
    def test_taxonomy_exists(self, name, expected) -> None:
        assert api.taxonomy_exists(name) is expected

    def test_get_taxonomies(self) -> None:
        assert list(api.get_taxonomies()) == [self.category, self.post_tag]
        assert list(api.get_taxonomies(public=False)) == [self.internal]
        assert list(api.get_taxonomies(public=None)) == [self.category, self.internal, self.post_tag]

    def test_create_term(self) -> None:
        term = api.create_term(self.category, "Arts & Culture", description="Galleries")
        assert term.slug == "arts-culture"
        assert term.taxonomy == self.category
        assert term.description == "Galleries"

    def test_create_term_duplicate_slug(self) -> None:
        with self.assertRaises(ValidationError):
            api.create_term(self.category, "News")

    def test_get_terms(self) -> None:
        assert [term.name for term in api.get_terms(self.category)] == [
            "Local News", "News", "Politics", "Science", "Sports", "Weather",
        ]
        assert [term.name for term in api.get_terms("post_tag")] == ["Football"]

    def test_get_terms_hide_empty(self) -> None:
        assert [term.name for term in api.get_terms(self.category, hide_empty=True)] == [
            "Local News", "News", "Politics", "Sports",
        ]

    def test_get_terms_exclude(self) -> None:
        terms = api.get_terms(self.category, exclude=[self.news.id, self.weather.id])
        assert [term.name for term in terms] == ["Local News", "Politics", "Science", "Sports"]

    @ddt.data(
        (12, "category", "News"),
        ("12", "category", "News"),
        (20, "category", None),
        (20, "post_tag", "Football"),
        (99, "category", None),
        (0, "category", None),
        ("abc", "category", None),
        (12, "nope", None),
        ("99999999999999999999", "category", None),
        (10 ** 20, "category", None),
    )
    @ddt.unpack
    def test_get_term(self, term_id, taxonomy, expected) -> None:
        term = api.get_term(term_id, taxonomy)
        assert (term.name if term else None) == expected
        assert api.term_exists(term_id, taxonomy) is (expected is not None)

    def test_get_term_with_taxonomy_instance(self) -> None:
        assert api.get_term(12, self.category) == self.news
        assert api.get_term(12, self.post_tag) is None

    def test_get_term_link(self) -> None:
        assert api.get_term_link(self.news) == "/terms/category/news/"
        assert api.get_term_link(self.football) == "/terms/post_tag/football/"

    def test_term_meta(self) -> None:
        assert api.get_term_meta(self.news.id, "color") is None
        assert api.get_term_meta(self.news.id, "color", default="none") == "none"

        api.update_term_meta(self.news.id, "color", ["red", "blue"])
        assert api.get_term_meta(self.news.id, "color") == ["red", "blue"]

        api.update_term_meta(self.news.id, "color", ["green"])
        assert api.get_term_meta(self.news.id, "color") == ["green"]
        assert TermMeta.objects.filter(term=self.news, key="color").count() == 1

        assert api.delete_term_meta(self.news.id, "color")
        assert not api.delete_term_meta(self.news.id, "color")
        assert api.get_term_meta(self.news.id, "color") is None

    def test_create_post(self) -> None:
        post = api.create_post("Rain again", terms=[self.weather, self.news])
        assert post.slug == "rain-again"
        assert post.status == Post.STATUS_PUBLISH
        assert set(post.terms.all()) == {self.weather, self.news}

    def test_query_posts_parent_and_any_child(self) -> None:
        posts = api.query_posts("category", all_of=[12], any_of=[34, 56])
        assert list(posts) == [self.election_night, self.match_report]

    def test_query_posts_parent_only(self) -> None:
        posts = api.query_posts(self.category, all_of=[12])
        assert [post.slug for post in posts] == [
            "football-weekly", "election-night", "headlines", "match-report",
        ]

    def test_query_posts_no_hierarchy_expansion(self) -> None:
        # "Local derby" carries Local News (a child of News) and Sports
        posts = api.query_posts("category", all_of=[12], any_of=[34])
        assert list(posts) == [self.match_report]

    def test_query_posts_scoped_to_taxonomy(self) -> None:
        # "Football weekly" carries News and the Football tag, but Football isn't a category
        assert not api.query_posts("category", all_of=[12], any_of=[20]).exists()

    def test_query_posts_other_post_type(self) -> None:
        posts = api.query_posts("category", all_of=[12], any_of=[34], post_type="page")
        assert [post.slug for post in posts] == ["about-us"]

    def test_query_posts_are_distinct(self) -> None:
        posts = api.query_posts("category", all_of=[12], any_of=[12, 34, 56])
        # Match report carries both News and Sports, but is only listed once
        assert [post.slug for post in posts] == [
            "football-weekly", "election-night", "headlines", "match-report",
        ]

    def test_get_permalink(self) -> None:
        assert api.get_permalink(self.match_report) == "/posts/match-report/"
