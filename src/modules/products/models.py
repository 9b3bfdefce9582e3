"""Product model.

A product is identified by a store-assigned integer ``id`` and carries a
``name`` plus the timestamps inherited from ``TimestampedModel``.

Name rules (non-null, non-blank) are enforced before persistence by
``modules.products.validators``; the table itself does not constrain
``name`` beyond NOT NULL and does not make it unique.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    """Product aggregate root."""

    name = models.CharField(max_length=255)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["created_at"], name="products_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
