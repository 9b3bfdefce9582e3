"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
or ``False`` for unknown or malformed IDs instead of raising, and the
caller decides how a miss is turned into an API response.
"""

from __future__ import annotations

from typing import Any, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

# Raised by the ORM when an ID cannot be coerced to the integer column.
_BAD_ID_ERRORS = (ValueError, TypeError, OverflowError, ValidationError)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except _BAD_ID_ERRORS:
            return None

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name=name).order_by("id").first()

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def list_ordered_by_created_at_desc(self) -> List[Product]:
        return list(Product.objects.order_by("-created_at", "-id"))

    def save(self, entity: Product) -> Product:
        """Persist (insert or update) a product and return the same instance."""
        entity.save()
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Hard-delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` otherwise.
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except _BAD_ID_ERRORS:
            return False
        if deleted:
            logger.info("product.deleted", product_id=id)
        return bool(deleted)

    def exists(self, id: Any) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except _BAD_ID_ERRORS:
            return False

    def count(self) -> int:
        return Product.objects.count()
