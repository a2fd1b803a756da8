"""
Term association permissions
"""
from rest_framework.permissions import BasePermission


class TermAssociationsPermissions(BasePermission):
    """
    Maps each REST API method to its corresponding term association permission.
    """
    perms_map = {
        "GET": ["at_associations.view_term_associations"],
        "OPTIONS": [],
        "HEAD": ["at_associations.view_term_associations"],
        "PUT": ["at_associations.change_term_associations"],
        "PATCH": ["at_associations.change_term_associations"],
    }

    def _perms(self, request):
        return self.perms_map.get(request.method)

    def has_permission(self, request, view):
        """
        Returns True if the user may use the given method on any term at all.
        """
        perms = self._perms(request)
        if perms is None:
            return False
        return request.user.has_perms(perms)

    def has_object_permission(self, request, view, obj):
        """
        Returns True if the user may use the given method on the given term.
        """
        perms = self._perms(request)
        if perms is None:
            return False
        return request.user.has_perms(perms, obj)
