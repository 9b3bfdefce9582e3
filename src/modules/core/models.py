"""Base abstract models shared by the catalog modules.

Provides ``TimestampedModel``: integer primary key (``DEFAULT_AUTO_FIELD``)
plus ``created_at`` / ``updated_at`` bookkeeping.

- Both timestamps are stamped from a single ``timezone.now()`` call on
  insert, so a freshly persisted row has ``created_at == updated_at``.
- Every later ``save()`` refreshes ``updated_at`` only; ``created_at`` is
  never rewritten once set.
- The ``update_fields`` guard keeps ``updated_at`` in the UPDATE statement
  when a caller restricts the saved columns.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


class TimestampedModel(models.Model):
    """Abstract base with creation / modification timestamps."""

    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField(editable=False)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        now = timezone.now()
        if self.created_at is None:
            self.created_at = now
        self.updated_at = now

        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
