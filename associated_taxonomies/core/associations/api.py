"""
Associations API

Stores, for each term, the set of other terms (in the same taxonomy) it has
been associated with. Associations live in the term metadata store under
``ASSOCIATED_TERMS_META_KEY``, so there are no models in this app.

Associations are one-way: associating A with B does not associate B with A.
Nothing is validated on write; IDs that no longer resolve to a term are skipped
when the associations are displayed.

No permissions/rules are enforced by these methods -- these must be enforced in the views.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable

from ..terms import api as terms_api
from ..terms.models import Taxonomy, Term

log = logging.getLogger(__name__)

ASSOCIATED_TERMS_META_KEY = "associated_terms"


def get_associated_term_ids(term_id: int) -> set[int]:
    """
    Returns the set of term IDs associated with the given term.

    A term with no stored associations (or with a stored value that isn't a
    list) has an empty set.
    """
    stored = terms_api.get_term_meta(term_id, ASSOCIATED_TERMS_META_KEY)
    if not isinstance(stored, list):
        return set()
    return {terms_api.coerce_int(value) for value in stored}


def set_associated_term_ids(term_id: int, ids: Iterable[int]) -> None:
    """
    Replaces the set of term IDs associated with the given term.

    An empty ``ids`` removes the stored record altogether, so "no associations"
    is always represented by the absence of metadata.
    IDs are clamped to the signed 64-bit range like any other coerced ID.
    """
    ids = sorted({terms_api.coerce_int(value) for value in ids})
    if not ids:
        terms_api.delete_term_meta(term_id, ASSOCIATED_TERMS_META_KEY)
        log.debug("Cleared associated terms of term %s", term_id)
        return
    terms_api.update_term_meta(term_id, ASSOCIATED_TERMS_META_KEY, ids)
    log.debug("Associated terms of term %s set to %s", term_id, ids)


def clear_associated_term_ids(term_id: int) -> None:
    """
    Removes every association of the given term.
    """
    set_associated_term_ids(term_id, [])


def get_associated_terms(term: Term) -> list[Term]:
    """
    Resolves the associations of ``term`` to Term objects in the same taxonomy.

    IDs of deleted terms, or terms of another taxonomy, are left out. The result
    is sorted by stored ID.
    """
    ids = sorted(get_associated_term_ids(term.id))
    if not ids:
        return []
    found = {
        associated.id: associated
        for associated in terms_api.get_terms(term.taxonomy).filter(id__in=ids)
    }
    dangling = [term_id for term_id in ids if term_id not in found]
    if dangling:
        log.debug("Skipping unresolvable associated terms %s of term %s", dangling, term.id)
    return [found[term_id] for term_id in ids if term_id in found]


def get_association_choices(taxonomy: Taxonomy, term: Term | None = None) -> list[tuple[int, str]]:
    """
    Returns the (id, name) pairs that may be selected as associations.

    That is every term of the taxonomy, including terms no post uses yet,
    except ``term`` itself: a term can't be associated with itself.
    """
    exclude = [term.id] if term is not None and term.id else None
    return [
        (choice.id, choice.name)
        for choice in terms_api.get_terms(taxonomy, hide_empty=False, exclude=exclude)
    ]


def data_to_submission(data: Mapping | None) -> Any:
    """
    Pulls the raw associated terms selection out of submitted form data.

    Works with QueryDicts (where a multi-select submits a list of values) and
    with plain mappings.
    """
    if data is None:
        return None
    if hasattr(data, "getlist"):
        if ASSOCIATED_TERMS_META_KEY not in data:
            return None
        return data.getlist(ASSOCIATED_TERMS_META_KEY)
    return data.get(ASSOCIATED_TERMS_META_KEY)


def save_associated_terms(term_id: int, submitted: Any) -> set[int]:
    """
    Save the associated terms selection submitted by the term editor.

    ``submitted`` should be a list of raw values. Each one is converted to an
    integer ID; non-numeric values become 0. Anything that isn't a list (including
    a missing selection) clears the term's associations, as does an empty list.

    Returns the set of IDs now stored.
    """
    if not isinstance(submitted, (list, tuple)):
        if submitted is not None:
            log.info("Ignoring malformed associated terms submission for term %s", term_id)
        clear_associated_term_ids(term_id)
        return set()
    ids = {terms_api.coerce_int(value) for value in submitted}
    set_associated_term_ids(term_id, ids)
    return ids
