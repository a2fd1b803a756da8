"""
Terms app data models

These are the host-side content models: taxonomies, the terms inside them, the
key/value metadata attached to terms, and the posts that terms are applied to.
Other apps should go through ``api.py`` rather than touching these directly.
"""
from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from associated_taxonomies.lib.fields import case_insensitive_char_field, case_insensitive_text_field

log = logging.getLogger(__name__)


class Taxonomy(models.Model):
    """
    A named classification namespace, e.g. "category" or "post_tag".
    """

    id = models.BigAutoField(primary_key=True)
    name = case_insensitive_char_field(
        max_length=64,
        unique=True,
        help_text=_(
            "Machine name used to reference this taxonomy from embeds and settings."
        ),
    )
    label = case_insensitive_char_field(
        max_length=255,
        blank=True,
        help_text=_("User-facing name of the taxonomy."),
    )
    description = case_insensitive_text_field(
        blank=True,
        help_text=_("Provides extra information about the taxonomy for authors."),
    )
    public = models.BooleanField(
        default=True,
        help_text=_(
            "Only public taxonomies have pages on the site and get term associations by default."
        ),
    )

    class Meta:
        verbose_name_plural = "Taxonomies"
        ordering = ["name"]

    def __repr__(self):
        """
        Developer-facing representation of a Taxonomy.
        """
        return str(self)

    def __str__(self):
        """
        User-facing string representation of a Taxonomy.
        """
        return f"<{self.__class__.__name__}> ({self.id}) {self.name}"

    def clean(self):
        """
        Validate this taxonomy before saving
        """
        self.name = self.name.strip()
        if not self.label:
            self.label = self.name


class Term(models.Model):
    """
    A single value in a taxonomy, e.g. the "News" category.

    Terms may form a hierarchy through ``parent``, but nothing in this project
    expands a term to its children when querying posts.
    """

    id = models.BigAutoField(primary_key=True)
    taxonomy = models.ForeignKey(
        Taxonomy,
        on_delete=models.CASCADE,
        related_name="terms",
        help_text=_("Namespace this term belongs to."),
    )
    parent = models.ForeignKey(
        "self",
        null=True,
        blank=True,
        default=None,
        on_delete=models.SET_NULL,
        related_name="children",
        help_text=_("Term one level up from the current term, in the same taxonomy."),
    )
    name = case_insensitive_char_field(
        max_length=200,
        help_text=_("Display name of the term."),
    )
    slug = case_insensitive_char_field(
        max_length=200,
        help_text=_("URL-friendly version of the name. Unique within the taxonomy."),
    )
    description = case_insensitive_text_field(
        blank=True,
        help_text=_("Shown below the term name wherever the term is displayed."),
    )

    class Meta:
        ordering = ["name", "id"]
        indexes = [
            models.Index(fields=["taxonomy", "name"], name="at_terms_taxonomy_name_idx"),
        ]
        unique_together = [
            ["taxonomy", "slug"],
        ]

    def __repr__(self):
        """
        Developer-facing representation of a Term.
        """
        return str(self)

    def __str__(self):
        """
        User-facing string representation of a Term.
        """
        return f"<{self.__class__.__name__}> ({self.id}) {self.name}"

    def clean(self):
        """
        Validate this term before saving
        """
        self.name = self.name.strip()
        self.slug = self.slug.strip()
        if self.parent_id and self.parent and self.parent.taxonomy_id != self.taxonomy_id:
            raise ValidationError("A term's parent must belong to the same taxonomy.")
        if self.parent_id and self.parent_id == self.id:
            raise ValidationError("A term cannot be its own parent.")


class TermMeta(models.Model):
    """
    A single named attribute attached to a term.

    Values are stored as JSON so callers can keep lists and mappings without
    serializing them themselves.
    """

    id = models.BigAutoField(primary_key=True)
    term = models.ForeignKey(
        Term,
        on_delete=models.CASCADE,
        related_name="meta",
    )
    key = models.CharField(max_length=255)
    value = models.JSONField(null=True, blank=True, default=None)

    class Meta:
        verbose_name = "Term metadata"
        verbose_name_plural = "Term metadata"
        unique_together = [
            ["term", "key"],
        ]

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.term_id}) {self.key}"


class Post(models.Model):
    """
    A piece of published content that terms can be applied to.
    """

    STATUS_PUBLISH = "publish"
    STATUS_DRAFT = "draft"
    STATUS_CHOICES = [
        (STATUS_PUBLISH, _("Published")),
        (STATUS_DRAFT, _("Draft")),
    ]

    id = models.BigAutoField(primary_key=True)
    title = case_insensitive_char_field(max_length=500)
    slug = case_insensitive_char_field(max_length=200, unique=True)
    post_type = models.CharField(
        max_length=20,
        default="post",
        db_index=True,
        help_text=_("Kind of content, e.g. 'post' or 'page'."),
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_PUBLISH,
    )
    published_at = models.DateTimeField(default=timezone.now)
    terms = models.ManyToManyField(
        Term,
        blank=True,
        related_name="posts",
    )

    class Meta:
        ordering = ["-published_at", "-id"]

    def __str__(self):
        return f"<{self.__class__.__name__}> ({self.id}) {self.title}"
