"""
terms Django application initialization.
"""

from django.apps import AppConfig


class TermsConfig(AppConfig):
    """
    Configuration for the terms Django application.
    """

    name = "associated_taxonomies.core.terms"
    verbose_name = "Terms"
    default_auto_field = "django.db.models.BigAutoField"
    label = "at_terms"
