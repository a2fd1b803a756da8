"""
Term associations API Views
"""
from __future__ import annotations

from django.http import Http404, HttpResponse
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ....terms.api import coerce_int
from ....terms.models import Term
from ... import api
from ...rendering import render_associated_terms, render_posts_by_related_terms
from ..utils import view_auth_classes
from .permissions import TermAssociationsPermissions
from .serializers import (
    PostsByRelatedTermsQueryParamsSerializer,
    RelatedTermsQueryParamsSerializer,
    TermAssociationsSerializer,
    TermAssociationsUpdateBodySerializer,
)


@view_auth_classes
class TermAssociationsView(APIView):
    """
    View to retrieve or replace the associated terms of a term.

    **Retrieve Parameters**
        * term_id (required): - The ID of the term

    **Retrieve Example Requests**
        GET associations/rest_api/v1/terms/:term_id/associations/

    **Retrieve Query Returns**
        * 200 - Success
        * 404 - Term not found or User does not have permission to access it

    **Update Request Body**
        * associated_term_ids (required): - The IDs of the terms to associate.
          Replaces the whole set; an empty list removes every association.

    **Update Example Requests**
        PUT associations/rest_api/v1/terms/:term_id/associations/
        {
            "associated_term_ids": [34, 56]
        }

    **Update Query Returns**
        * 200 - Success
        * 400 - Invalid body, e.g. the term itself is in the list
        * 403 - Permission denied
        * 404 - Term not found
    """
    permission_classes = [TermAssociationsPermissions]

    def get_term(self, term_id) -> Term:
        """
        Return the requested term, checking that the user can access it.
        """
        term = Term.objects.select_related("taxonomy").filter(id=coerce_int(term_id)).first()
        if term is None:
            raise Http404("Term not found")
        self.check_object_permissions(self.request, term)
        return term

    def _response(self, request: Request, term: Term) -> Response:
        data = {
            "term": term,
            "associated_term_ids": sorted(api.get_associated_term_ids(term.id)),
            "associated_terms": api.get_associated_terms(term),
        }
        serializer = TermAssociationsSerializer(data, context={"request": request})
        return Response(serializer.data)

    def get(self, request: Request, term_id: str) -> Response:
        """
        Returns the associations of the given term.
        """
        return self._response(request, self.get_term(term_id))

    def put(self, request: Request, term_id: str) -> Response:
        """
        Replaces the associations of the given term.
        """
        term = self.get_term(term_id)
        body = TermAssociationsUpdateBodySerializer(data=request.data, context={"term": term})
        body.is_valid(raise_exception=True)
        api.set_associated_term_ids(term.id, body.validated_data["associated_term_ids"])
        return self._response(request, term)


class RelatedTermsFragmentView(APIView):
    """
    The HTML fragment for a term and its associated terms.

    **Example Requests**
        GET associations/rest_api/v1/render/related_terms/?id=123&taxonomy=category
    """
    permission_classes = [AllowAny]

    def get(self, request: Request) -> HttpResponse:
        """
        Render the fragment. Invalid parameters give an inline message, not an error.
        """
        params = RelatedTermsQueryParamsSerializer(data=request.query_params.dict())
        params.is_valid(raise_exception=True)
        html = render_associated_terms(params.validated_data["id"], params.validated_data["taxonomy"])
        return HttpResponse(html, content_type="text/html; charset=utf-8")


class PostsByRelatedTermsFragmentView(APIView):
    """
    The HTML fragment listing the posts of a parent term and any of its child terms.

    **Example Requests**
        GET associations/rest_api/v1/render/posts_by_related_terms/?parent=12&child=34,56&taxonomy=category
    """
    permission_classes = [AllowAny]

    def get(self, request: Request) -> HttpResponse:
        """
        Render the fragment. Invalid parameters give an inline message, not an error.
        """
        params = PostsByRelatedTermsQueryParamsSerializer(data=request.query_params.dict())
        params.is_valid(raise_exception=True)
        html = render_posts_by_related_terms(
            params.validated_data["parent"],
            params.validated_data["child"],
            params.validated_data["taxonomy"],
        )
        return HttpResponse(html, content_type="text/html; charset=utf-8")
