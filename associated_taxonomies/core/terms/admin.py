"""
Terms app admin
"""
from __future__ import annotations

from django.contrib import admin
from django.http import QueryDict

from .api import coerce_int
from .models import Post, Taxonomy, Term
from .signals import TERM_CREATED, TERM_EDITED


@admin.register(Taxonomy)
class TaxonomyAdmin(admin.ModelAdmin):
    """
    Admin definition for Taxonomy model
    """
    list_display = ["name", "label", "public"]
    search_fields = ["name", "label"]


@admin.register(Term)
class TermAdmin(admin.ModelAdmin):
    """
    Admin definition for Term model

    This is the term editing UI: saving a term here sends TERM_CREATED or
    TERM_EDITED with the submitted data, so other apps can store their own
    fields for the term.
    """
    autocomplete_fields = ["parent"]
    search_fields = ["name", "slug"]
    list_display = ["__str__", "taxonomy", "slug"]
    list_filter = ["taxonomy"]
    prepopulated_fields = {"slug": ["name"]}

    def get_form_taxonomy(self, request, obj=None) -> Taxonomy | None:
        """
        Which taxonomy is the form being rendered for?

        A submitted taxonomy comes first, so a term being moved to another
        taxonomy is edited against its new one. Otherwise the change form uses
        the term's own taxonomy, and the add form uses ``?taxonomy=<id>`` or the
        taxonomy the changelist was filtered by when "Add term" was clicked.
        """
        submitted_id = coerce_int(request.POST.get("taxonomy"))
        if submitted_id:
            taxonomy = Taxonomy.objects.filter(id=submitted_id).first()
            if taxonomy is not None:
                return taxonomy
        if obj is not None:
            return obj.taxonomy
        taxonomy_id = coerce_int(request.GET.get("taxonomy")) or self.get_changelist_taxonomy_id(request)
        if not taxonomy_id:
            return None
        return Taxonomy.objects.filter(id=taxonomy_id).first()

    def get_changelist_taxonomy_id(self, request) -> int:
        """
        The taxonomy ID the changelist was filtered by, as preserved in
        ``_changelist_filters`` on the add and change pages. 0 if none.
        """
        filters = QueryDict(request.GET.get("_changelist_filters", ""))
        return coerce_int(filters.get("taxonomy__id__exact"))

    def get_changeform_initial_data(self, request):
        """
        Preselect the taxonomy the changelist was filtered by.
        """
        initial = super().get_changeform_initial_data(request)
        if "taxonomy" not in initial:
            taxonomy_id = self.get_changelist_taxonomy_id(request)
            if taxonomy_id:
                initial["taxonomy"] = taxonomy_id
        return initial

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)
        signal = TERM_EDITED if change else TERM_CREATED
        signal.send(sender=Term, term=obj, data=request.POST)


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """
    Admin definition for Post model
    """
    autocomplete_fields = ["terms"]
    search_fields = ["title", "slug"]
    list_display = ["title", "post_type", "status", "published_at"]
    list_filter = ["post_type", "status"]
    prepopulated_fields = {"slug": ["title"]}
