"""
Terms API

Anyone using the terms app should use these APIs instead of creating or
modifying the models directly. This module is the term directory, the term
metadata store and the post query engine that other apps build on.

No permissions/rules are enforced by these methods -- these must be enforced in the views.
"""
from __future__ import annotations

import math
import re
from typing import Any, Iterable

from django.db.models import QuerySet
from django.urls import reverse
from django.utils.text import slugify

from .models import Post, Taxonomy, Term, TermMeta

# Export this as part of the API
TermDoesNotExist = Term.DoesNotExist

# IDs are stored in 64-bit integer columns; larger values saturate at the bounds.
MIN_INT = -(2 ** 63)
MAX_INT = 2 ** 63 - 1

LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def coerce_int(value: Any) -> int:
    """
    Loosely convert ``value`` to an integer, returning 0 when that's not possible.

    Strings are parsed from their leading digits, so "12abc" is 12 and "abc" is
    0. Booleans and floats are truncated like any other number. Results are
    clamped to the signed 64-bit range, so they are always safe to query with.
    """
    if value is None:
        return 0
    if isinstance(value, (bool, int)):
        number = int(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return 0
        number = int(value)
    else:
        match = LEADING_INT_RE.match(str(value))
        if not match:
            return 0
        number = int(match.group(1))
    return max(MIN_INT, min(MAX_INT, number))


def create_taxonomy(
    name: str,
    label: str | None = None,
    description: str | None = None,
    public: bool = True,
) -> Taxonomy:
    """
    Creates, saves, and returns a new Taxonomy with the given attributes.
    """
    taxonomy = Taxonomy(
        name=name,
        label=label or "",
        description=description or "",
        public=public,
    )
    taxonomy.full_clean()
    taxonomy.save()
    return taxonomy


def get_taxonomy(name: str) -> Taxonomy | None:
    """
    Returns the Taxonomy with the given machine name, if any.
    """
    if not name:
        return None
    return Taxonomy.objects.filter(name=name).first()


def taxonomy_exists(name: str) -> bool:
    """
    Is there a taxonomy registered with the given machine name?
    """
    return bool(name) and Taxonomy.objects.filter(name=name).exists()


def get_taxonomies(public: bool | None = True) -> QuerySet[Taxonomy]:
    """
    Returns a queryset containing the public taxonomies, sorted by name.

    If you want the non-public taxonomies, pass public=False.
    If you want all taxonomies, pass public=None.
    """
    queryset = Taxonomy.objects.order_by("name", "id")
    if public is None:
        return queryset.all()
    return queryset.filter(public=public)


def create_term(
    taxonomy: Taxonomy,
    name: str,
    slug: str | None = None,
    description: str = "",
    parent: Term | None = None,
) -> Term:
    """
    Creates, saves, and returns a new Term in the given taxonomy.
    """
    term = Term(
        taxonomy=taxonomy,
        name=name,
        slug=slug or slugify(name, allow_unicode=True),
        description=description,
        parent=parent,
    )
    term.full_clean()
    term.save()
    return term


def get_terms(
    taxonomy: Taxonomy | str,
    hide_empty: bool = False,
    exclude: Iterable[int] | None = None,
) -> QuerySet[Term]:
    """
    Returns a QuerySet of the terms in the given taxonomy, sorted by name.

    By default every term is returned, including those no post carries yet.
    Pass ``hide_empty=True`` to only get terms used by at least one published post.
    """
    queryset = Term.objects.select_related("taxonomy")
    if isinstance(taxonomy, Taxonomy):
        queryset = queryset.filter(taxonomy=taxonomy)
    else:
        queryset = queryset.filter(taxonomy__name=taxonomy)
    if hide_empty:
        queryset = queryset.filter(posts__status=Post.STATUS_PUBLISH).distinct()
    if exclude:
        queryset = queryset.exclude(id__in=list(exclude))
    return queryset.order_by("name", "id")


def get_term(term_id: Any, taxonomy: Taxonomy | str) -> Term | None:
    """
    Returns the term with the given ID if it belongs to the given taxonomy.

    Anything that isn't a positive integer ID, a term from another taxonomy, or
    a deleted term all give ``None``.
    """
    term_id = coerce_int(term_id)
    if term_id <= 0:
        return None
    queryset = Term.objects.select_related("taxonomy").filter(id=term_id)
    if isinstance(taxonomy, Taxonomy):
        queryset = queryset.filter(taxonomy=taxonomy)
    else:
        queryset = queryset.filter(taxonomy__name=taxonomy)
    return queryset.first()


def term_exists(term_id: Any, taxonomy: Taxonomy | str) -> bool:
    """
    Does the given term ID exist in the given taxonomy?
    """
    return get_term(term_id, taxonomy) is not None


def get_term_link(term: Term) -> str:
    """
    Returns the canonical URL of the page listing the posts of ``term``.
    """
    return reverse(
        "at_terms:term-detail",
        kwargs={"taxonomy": term.taxonomy.name, "slug": term.slug},
    )


def get_term_meta(term_id: int, key: str, default: Any = None) -> Any:
    """
    Returns the value stored under ``key`` for the given term, or ``default``.
    """
    meta = TermMeta.objects.filter(term_id=term_id, key=key).first()
    if meta is None:
        return default
    return meta.value


def update_term_meta(term_id: int, key: str, value: Any) -> TermMeta:
    """
    Stores ``value`` under ``key`` for the given term, replacing any previous value.
    """
    meta, _created = TermMeta.objects.update_or_create(
        term_id=term_id,
        key=key,
        defaults={"value": value},
    )
    return meta


def delete_term_meta(term_id: int, key: str) -> bool:
    """
    Removes the value stored under ``key`` for the given term.

    Returns True if something was deleted.
    """
    deleted, _ = TermMeta.objects.filter(term_id=term_id, key=key).delete()
    return deleted > 0


def create_post(
    title: str,
    terms: Iterable[Term] = (),
    slug: str | None = None,
    post_type: str = "post",
    status: str = Post.STATUS_PUBLISH,
    published_at=None,
) -> Post:
    """
    Creates, saves, and returns a new Post carrying the given terms.
    """
    post = Post(
        title=title,
        slug=slug or slugify(title, allow_unicode=True),
        post_type=post_type,
        status=status,
    )
    if published_at is not None:
        post.published_at = published_at
    post.full_clean()
    post.save()
    post.terms.set(list(terms))
    return post


def query_posts(
    taxonomy: Taxonomy | str,
    all_of: Iterable[int] = (),
    any_of: Iterable[int] = (),
    post_type: str = "post",
) -> QuerySet[Post]:
    """
    Returns the published posts carrying terms of ``taxonomy`` that match both:

    * every term ID in ``all_of`` (exact terms only; children of those terms
      do not count), and
    * at least one term ID in ``any_of``, if any are given.

    Results use the default Post ordering (newest first) and are not limited.
    """
    taxonomy_name = taxonomy.name if isinstance(taxonomy, Taxonomy) else taxonomy
    queryset = Post.objects.filter(post_type=post_type, status=Post.STATUS_PUBLISH)
    # Each filter() call on a multi-valued relation gets its own join, which is
    # what makes these conditions combine with AND.
    for term_id in all_of:
        queryset = queryset.filter(terms__id=term_id, terms__taxonomy__name=taxonomy_name)
    any_of = list(any_of)
    if any_of:
        queryset = queryset.filter(terms__id__in=any_of, terms__taxonomy__name=taxonomy_name)
    return queryset.distinct()


def get_permalink(post: Post) -> str:
    """
    Returns the canonical URL of ``post``.
    """
    return reverse("at_terms:post-detail", kwargs={"slug": post.slug})
