"""
Django rules-based permissions for term associations
"""
from __future__ import annotations

from typing import Callable, Union

import django.contrib.auth.models
# typing support in rules depends on https://github.com/dfunckt/django-rules/pull/177
import rules  # type: ignore[import]

from ..terms.models import Term
from .integrations import get_integration

UserType = Union[
    django.contrib.auth.models.User, django.contrib.auth.models.AnonymousUser
]


# Global staff are the editors of term associations.
# (Superusers can already do anything)
is_association_editor: Callable[[UserType], bool] = rules.is_staff


@rules.predicate
def can_view_term_associations(user: UserType, term: Term | None = None) -> bool:
    """
    Anyone can view the associations of a term in a public taxonomy,
    but only editors can view those of a non-public taxonomy.
    """
    return not term or term.taxonomy.public or is_association_editor(user)


@rules.predicate
def can_change_term_associations(user: UserType, term: Term | None = None) -> bool:
    """
    Editors can change the associations of terms in the covered taxonomies.
    """
    return is_association_editor(user) and (
        not term or get_integration(term.taxonomy) is not None
    )


rules.add_perm("at_associations.view_term_associations", can_view_term_associations)
rules.add_perm("at_associations.change_term_associations", can_change_term_associations)
