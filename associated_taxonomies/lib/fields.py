"""
Field helpers that keep text comparison consistent across database backends.

MySQL compares text case-insensitively by default, while SQLite and Postgres
are case-sensitive. Term names and slugs are looked up by humans, so we pin
the collation per vendor instead of relying on whatever the server default is.
"""
from __future__ import annotations

from django.db import models


class MultiCollationMixin:
    """
    Mixin that picks a collation based on the connected database vendor.

    Mix into subclasses of CharField and TextField only, since those are the
    field types that store text data.
    """

    def __init__(self, *args, db_collations=None, **kwargs):
        """
        ``db_collations`` maps vendor names to collations, e.g.::

          {"sqlite": "NOCASE", "mysql": "utf8mb4_unicode_ci"}
        """
        super().__init__(*args, **kwargs)
        self.db_collations = db_collations or {}

    def db_parameters(self, connection):
        db_params = models.Field.db_parameters(self, connection)
        if connection.vendor in self.db_collations:
            db_params["collation"] = self.db_collations[connection.vendor]
        return db_params

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        if self.db_collations:
            kwargs["db_collations"] = self.db_collations
        return name, path, args, kwargs


class MultiCollationCharField(MultiCollationMixin, models.CharField):
    """
    CharField with per-database-vendor collation settings.
    """


class MultiCollationTextField(MultiCollationMixin, models.TextField):
    """
    TextField with per-database-vendor collation settings.

    We never sort by descriptions, but setting a collation forces a compatible
    charset in MySQL.
    """


def case_insensitive_char_field(**kwargs) -> MultiCollationCharField:
    """
    Return a case-insensitive ``MultiCollationCharField``.

    Unique indexes on these fields are case-insensitive too, so "News" and
    "news" cannot both be used as a term slug in the same taxonomy.
    """
    final_kwargs = {
        "null": False,
        "db_collations": {
            "sqlite": "NOCASE",
            "mysql": "utf8mb4_unicode_ci",
        },
    }
    final_kwargs.update(kwargs)
    return MultiCollationCharField(**final_kwargs)


def case_insensitive_text_field(**kwargs) -> MultiCollationTextField:
    """
    Return a ``MultiCollationTextField`` using the same collations as
    ``case_insensitive_char_field``.
    """
    final_kwargs = {
        "db_collations": {
            "sqlite": "NOCASE",
            "mysql": "utf8mb4_unicode_ci",
        },
    }
    final_kwargs.update(kwargs)
    return MultiCollationTextField(**final_kwargs)
