"""
Front-end fragments built from term associations.

Both renderers are meant to be embedded in page content, so they never raise:
bad input is reported as an inline message instead.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from django.template.loader import render_to_string
from django.utils.html import format_html
from django.utils.safestring import SafeString
from django.utils.translation import gettext as _

from ..terms import api as terms_api
from . import api

log = logging.getLogger(__name__)


def render_message(message: str) -> SafeString:
    """
    An inline message paragraph, e.g. for invalid input or empty results.
    """
    return format_html("<p>{}</p>", message)


def parse_term_ids(value: Any) -> list[int]:
    """
    Turn a comma separated string (or a sequence) of term IDs into integers.

    Every token is kept: tokens that aren't numbers become 0 rather than being
    dropped. An empty string is a single empty token, so it gives ``[0]``.
    """
    if value is None:
        return []
    if isinstance(value, str):
        tokens: Sequence[Any] = value.split(",")
    elif isinstance(value, (list, tuple, set)):
        tokens = list(value)
    else:
        tokens = [value]
    return [terms_api.coerce_int(token) for token in tokens]


def render_associated_terms(term_id: Any, taxonomy: Any) -> SafeString:
    """
    Render a term, followed by links to each of its associated terms.

    Usage as a shortcode: ``[related_terms id="123" taxonomy="category"]``
    """
    term_id = terms_api.coerce_int(term_id)
    taxonomy_name = str(taxonomy or "").strip()
    if (
        not term_id
        or not terms_api.taxonomy_exists(taxonomy_name)
        or not terms_api.term_exists(term_id, taxonomy_name)
    ):
        return render_message(_("Invalid term ID or taxonomy."))

    term = terms_api.get_term(term_id, taxonomy_name)
    associated_terms = [
        {"term": associated, "url": terms_api.get_term_link(associated)}
        for associated in api.get_associated_terms(term)
    ]
    return render_to_string(
        "associated_taxonomies/related_terms.html",
        {"term": term, "associated_terms": associated_terms},
    )


def render_posts_by_related_terms(parent: Any, child: Any, taxonomy: Any) -> SafeString:
    """
    Render links to the posts that carry the ``parent`` term and at least one
    of the ``child`` terms.

    ``child`` is a comma separated list of term IDs.

    Usage as a shortcode:
    ``[posts_by_related_terms parent="12" child="34,56" taxonomy="category"]``
    """
    parent_id = terms_api.coerce_int(parent)
    child_ids = parse_term_ids(child)
    taxonomy_name = str(taxonomy or "").strip()
    if not parent_id or not child_ids or not terms_api.taxonomy_exists(taxonomy_name):
        return render_message(_("Invalid parent or child terms provided, or invalid taxonomy."))

    # Evaluate the queryset here, so the template never hits the database.
    posts = list(terms_api.query_posts(taxonomy_name, all_of=[parent_id], any_of=child_ids))
    if not posts:
        return render_message(_("No posts found for the specified terms."))

    entries = [{"post": post, "url": terms_api.get_permalink(post)} for post in posts]
    return render_to_string(
        "associated_taxonomies/posts_by_related_terms.html",
        {"posts": entries},
    )
