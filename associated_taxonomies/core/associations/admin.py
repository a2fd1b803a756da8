"""
Adds the associated terms editor to the term admin.
"""
from __future__ import annotations

from django.contrib import admin

from ..terms.admin import TermAdmin
from ..terms.models import Term
from .api import ASSOCIATED_TERMS_META_KEY
from .integrations import get_integration


class AssociatedTermAdmin(TermAdmin):
    """
    Term admin with an "Associated Terms" multi-select for covered taxonomies.

    The selection itself is saved by the TERM_CREATED / TERM_EDITED handlers.
    """

    def get_form(self, request, obj=None, change=False, **kwargs):
        integration = get_integration(self.get_form_taxonomy(request, obj))
        if integration is not None:
            base_form = kwargs.get("form", self.form)
            kwargs["form"] = type(
                base_form.__name__,
                (base_form,),
                {ASSOCIATED_TERMS_META_KEY: integration.form_field(term=obj)},
            )
        return super().get_form(request, obj, change=change, **kwargs)


admin.site.unregister(Term)
admin.site.register(Term, AssociatedTermAdmin)
