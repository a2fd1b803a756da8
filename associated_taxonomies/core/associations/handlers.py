"""
Signal handlers for Associations.

The ``terms`` app sends TERM_CREATED and TERM_EDITED from its editing UI. It
sits at a lower layer than ``associations`` and must not know this app exists,
which is why the save path is hooked up through signals instead of being
called directly.
"""
from __future__ import annotations

from .integrations import get_integration


def save_associated_terms_from_editor(sender, term=None, data=None, **kwargs):
    """
    Store the associated terms submitted with ``term``, if its taxonomy is covered.
    """
    integration = get_integration(term.taxonomy if term is not None else None)
    if integration is None:
        return
    integration.on_save(term, data)
