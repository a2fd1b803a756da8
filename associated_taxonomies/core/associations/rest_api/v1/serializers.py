"""
API Serializers for term associations
"""
from __future__ import annotations

from rest_framework import serializers

from ....terms import api as terms_api
from ....terms.models import Term


class AssociatedTermSerializer(serializers.ModelSerializer):
    """
    Serializer for a term listed among another term's associations.
    """
    url = serializers.SerializerMethodField()

    class Meta:
        model = Term
        fields = ["id", "name", "url"]

    def get_url(self, obj) -> str:
        """
        Canonical URL of the associated term.
        """
        request = self.context.get("request")
        url = terms_api.get_term_link(obj)
        return request.build_absolute_uri(url) if request else url


class TermAssociationsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the associations of a single term.

    ``associated_term_ids`` is the stored set, as is. ``associated_terms`` only
    lists the IDs that still resolve to a term of the same taxonomy.
    """
    term_id = serializers.IntegerField(source="term.id")
    taxonomy = serializers.CharField(source="term.taxonomy.name")
    associated_term_ids = serializers.ListField(child=serializers.IntegerField())
    associated_terms = AssociatedTermSerializer(many=True)


class TermAssociationsUpdateBodySerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer of the body for the term associations PUT request
    """
    associated_term_ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1, max_value=terms_api.MAX_INT),
        allow_empty=True,
    )

    def validate_associated_term_ids(self, value):
        """
        A term can't be associated with itself.
        """
        term = self.context["term"]
        if term.id in value:
            raise serializers.ValidationError("A term cannot be associated with itself.")
        return value


class RelatedTermsQueryParamsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the query params of the related terms fragment.

    Values are passed to the renderer as-is; it reports bad values itself.
    """
    id = serializers.CharField(required=False, allow_blank=True, default="0")
    taxonomy = serializers.CharField(required=False, allow_blank=True, default="")


class PostsByRelatedTermsQueryParamsSerializer(serializers.Serializer):  # pylint: disable=abstract-method
    """
    Serializer for the query params of the posts by related terms fragment.
    """
    parent = serializers.CharField(required=False, allow_blank=True, default="")
    child = serializers.CharField(required=False, allow_blank=True, default="")
    taxonomy = serializers.CharField(required=False, allow_blank=True, default="")
