"""
Which taxonomies get the associated terms editor, and what it does for them.

Coverage is configured through the ``ASSOCIATED_TAXONOMIES`` setting::

    ASSOCIATED_TAXONOMIES = {
        # None (the default): every public taxonomy.
        # A list of taxonomy names: only those (if they are public).
        # A callable, or the dotted path to one, taking a Taxonomy and
        # returning a bool: the public taxonomies it accepts.
        "TAXONOMIES": None,
    }

Taxonomies are database rows, so the registration table can't be built at
import time. ``register_integrations()`` builds it on demand.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from attrs import define
from django.conf import settings
from django.utils.module_loading import import_string
from django.utils.safestring import SafeString

from ..terms import api as terms_api
from ..terms.models import Taxonomy, Term
from . import api

log = logging.getLogger(__name__)


def get_taxonomy_filter() -> Callable[[Taxonomy], bool]:
    """
    Returns the predicate deciding whether a public taxonomy is covered.
    """
    config = getattr(settings, "ASSOCIATED_TAXONOMIES", {}).get("TAXONOMIES")
    if config is None:
        return lambda taxonomy: True
    if isinstance(config, str):
        config = import_string(config)
    if callable(config):
        return config
    names = {str(name).lower() for name in config}
    return lambda taxonomy: taxonomy.name.lower() in names


def get_covered_taxonomies() -> list[Taxonomy]:
    """
    Returns the public taxonomies that get the associated terms editor.
    """
    accept = get_taxonomy_filter()
    return [taxonomy for taxonomy in terms_api.get_taxonomies(public=True) if accept(taxonomy)]


@define
class TaxonomyIntegration:
    """
    The associated terms editor, as applied to one taxonomy.
    """

    taxonomy: Taxonomy

    def form_field(self, term: Term | None = None):
        """
        The form field to add to the term creation form (``term=None``) or the
        edit form of ``term``.
        """
        from .forms import AssociatedTermsField  # pylint: disable=import-outside-toplevel

        return AssociatedTermsField(self.taxonomy, term=term)

    def on_field_render_create(self) -> SafeString:
        """
        HTML for the associated terms field of the term creation form.
        """
        from .forms import render_creation_field  # pylint: disable=import-outside-toplevel

        return render_creation_field(self.taxonomy)

    def on_field_render_edit(self, term: Term) -> SafeString:
        """
        HTML for the associated terms field of the edit form of ``term``.
        """
        from .forms import render_edit_field  # pylint: disable=import-outside-toplevel

        return render_edit_field(term)

    def on_save(self, term: Term, data: Any) -> set[int]:
        """
        Store the associations submitted along with ``term``.
        """
        return api.save_associated_terms(term.id, api.data_to_submission(data))


def register_integrations() -> Dict[str, TaxonomyIntegration]:
    """
    Builds the registration table: one integration per covered taxonomy, keyed by name.
    """
    table = {
        taxonomy.name.lower(): TaxonomyIntegration(taxonomy)
        for taxonomy in get_covered_taxonomies()
    }
    log.debug("Associated terms enabled for taxonomies: %s", sorted(table))
    return table


def get_integration(taxonomy: Taxonomy | None) -> TaxonomyIntegration | None:
    """
    Returns the integration for ``taxonomy``, or None if it isn't covered.
    """
    if taxonomy is None or not taxonomy.public:
        return None
    if not get_taxonomy_filter()(taxonomy):
        return None
    return TaxonomyIntegration(taxonomy)
