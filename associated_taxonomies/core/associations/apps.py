"""
Django metadata for the Associations Django application.
"""
from django.apps import AppConfig


class AssociationsConfig(AppConfig):
    """
    Configuration for the Associations Django application.
    """

    name = "associated_taxonomies.core.associations"
    verbose_name = "Associated Taxonomies: Associations"
    default_auto_field = "django.db.models.BigAutoField"
    label = "at_associations"

    def ready(self):
        """
        Save associated terms whenever a term is created or edited.
        """
        from ..terms.signals import TERM_CREATED, TERM_EDITED
        from . import handlers

        TERM_CREATED.connect(
            handlers.save_associated_terms_from_editor,
            dispatch_uid="at__associations__save_on_term_created",
        )
        TERM_EDITED.connect(
            handlers.save_associated_terms_from_editor,
            dispatch_uid="at__associations__save_on_term_edited",
        )
