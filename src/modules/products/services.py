"""Product service layer (Use Cases).

Orchestrates the Product operations, delegating persistence to the
``IProductRepository`` passed to the constructor.

- Reads go straight to the repository; a miss is ``None``, not an error.
- ``create_product`` validates first and only then touches the store,
  inside an explicit ``transaction.atomic()`` scope that is released on
  every exit path.  A rejected candidate never reaches ``save``.
- Name uniqueness is deliberately not checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductValidationError
from modules.products.validators import validate_product

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases."""

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, candidate: Optional[Product]) -> Product:
        """Validate and persist a new product.

        Raises:
            ProductIsNull: if ``candidate`` is ``None``.
            InvalidProductName: if the name is null or blank.
        """
        try:
            validate_product(candidate)
        except ProductValidationError as exc:
            logger.warning("product.validation_failed", code=exc.code)
            raise

        with transaction.atomic():
            product = self._repo.save(candidate)

        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product (possibly an empty list)."""
        return self._repo.list()

    def get_product(self, id: Any) -> Optional[Product]:
        """Retrieve a single product, or ``None`` when it does not exist."""
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=str(id))
            return None
        logger.info("product.retrieved", product_id=product.id)
        return product
