"""
The associated terms editor: a searchable multi-select of the other terms in
a taxonomy, shown on the term creation and edit forms.
"""
from __future__ import annotations

from django import forms
from django.template.loader import render_to_string
from django.utils.safestring import SafeString
from django.utils.translation import gettext_lazy as _

from ..terms.models import Taxonomy, Term
from . import api


class AssociatedTermsSelect(forms.SelectMultiple):
    """
    Multi-select enhanced with the select2 control bundled with the Django admin.
    """

    def __init__(self, attrs=None, choices=()):
        default_attrs = {
            "class": "associated-taxonomies-select2",
            "data-placeholder": _("Select associated terms..."),
            "data-allow-clear": "true",
        }
        default_attrs.update(attrs or {})
        super().__init__(attrs=default_attrs, choices=choices)

    class Media:
        js = [
            "admin/js/vendor/jquery/jquery.js",
            "admin/js/vendor/select2/select2.full.js",
            "admin/js/jquery.init.js",
            "associated_taxonomies/js/associated-terms.js",
        ]
        css = {
            "screen": [
                "admin/css/vendor/select2/select2.css",
            ],
        }


class AssociatedTermsField(forms.TypedMultipleChoiceField):
    """
    Lets the user pick associated terms of ``term`` among the terms of ``taxonomy``.

    For a new term (``term=None``) every term of the taxonomy is offered and
    nothing is selected. For an existing term, the term itself is left out and
    its current associations are selected.
    """

    widget = AssociatedTermsSelect

    def __init__(self, taxonomy: Taxonomy, term: Term | None = None, **kwargs):
        kwargs.setdefault("label", _("Associated Terms"))
        kwargs.setdefault("help_text", _("Select terms to associate with this one."))
        kwargs.setdefault("required", False)
        super().__init__(
            coerce=int,
            empty_value=[],
            choices=api.get_association_choices(taxonomy, term),
            **kwargs,
        )
        if term is not None and term.id:
            self.initial = sorted(api.get_associated_term_ids(term.id))


class AssociatedTermsForm(forms.Form):
    """
    Standalone form holding just the associated terms field.
    """

    def __init__(self, taxonomy: Taxonomy, term: Term | None = None, **kwargs):
        kwargs.setdefault("auto_id", "%s")
        super().__init__(**kwargs)
        self.taxonomy = taxonomy
        self.term = term
        self.fields[api.ASSOCIATED_TERMS_META_KEY] = AssociatedTermsField(taxonomy, term=term)

    def save(self) -> set[int]:
        """
        Store the selection for ``self.term``. The form must be valid.
        """
        selected = self.cleaned_data[api.ASSOCIATED_TERMS_META_KEY]
        return api.save_associated_terms(self.term.id, list(selected))


def render_creation_field(taxonomy: Taxonomy) -> SafeString:
    """
    HTML for the associated terms field on the "add term" form of ``taxonomy``.
    """
    form = AssociatedTermsForm(taxonomy)
    return render_to_string(
        "associated_taxonomies/creation_field.html",
        {"field": form[api.ASSOCIATED_TERMS_META_KEY], "media": form.media},
    )


def render_edit_field(term: Term) -> SafeString:
    """
    HTML for the associated terms field on the "edit term" form of ``term``.
    """
    form = AssociatedTermsForm(term.taxonomy, term=term)
    return render_to_string(
        "associated_taxonomies/edit_field.html",
        {"field": form[api.ASSOCIATED_TERMS_META_KEY], "media": form.media},
    )
