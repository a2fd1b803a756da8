"""
Utilities for the API
"""
from edx_rest_framework_extensions.auth.jwt.authentication import JwtAuthentication  # type: ignore[import]
from edx_rest_framework_extensions.auth.session.authentication import (  # type: ignore[import]
    SessionAuthenticationAllowInactiveUser,
)


def view_auth_classes(func_or_class):
    """
    Class decorator that sets the authentication classes for api views.

    Requires either JWT or Session-based authentication; these are the same
    authentication classes the rest of the platform uses.
    """
    func_or_class.authentication_classes = (
        JwtAuthentication,
        SessionAuthenticationAllowInactiveUser,
    )
    return func_or_class
