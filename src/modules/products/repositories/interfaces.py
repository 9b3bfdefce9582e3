"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the catalog needs:
exact-name search and a newest-first listing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by its exact name (lowest ID wins)."""

    @abstractmethod
    def list_ordered_by_created_at_desc(self) -> List[Product]:
        """Every product, newest first."""
