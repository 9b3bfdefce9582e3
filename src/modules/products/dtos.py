"""Product DTOs for the Service Layer.

Framework-agnostic request contracts using Pydantic v2.  DTOs are
immutable (``frozen=True``).

``CreateProductDTO`` only checks the *shape* of the payload (an object
whose ``name`` is a string or null).  Whether the name is acceptable is
decided by ``modules.products.validators``, so a blank or null name
reaches the service and is rejected there with the domain message.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from modules.products.models import Product


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Unknown keys (e.g. a client echoing ``id`` or ``createdAt``) are
    ignored; identity and timestamps are always assigned by the store.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None

    def to_entity(self) -> Product:
        """Build an unsaved ``Product`` candidate."""
        return Product(name=self.name)
