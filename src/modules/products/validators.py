"""Pre-persistence checks for product candidates.

The entity check always runs before the name check, so a missing
product is reported as ``ProductIsNull`` and never as a name problem.
Validators only read the candidate; they never mutate or persist it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from modules.products.exceptions import InvalidProductName, ProductIsNull

if TYPE_CHECKING:
    from modules.products.models import Product


def validate_product(candidate: Optional[Product]) -> None:
    """Raise a ``ProductValidationError`` subclass if ``candidate`` is unusable."""
    if candidate is None:
        raise ProductIsNull()
    validate_product_name(candidate.name)


def validate_product_name(name: Optional[str]) -> None:
    """Reject ``None`` and names that are empty once whitespace is trimmed."""
    if name is None or not name.strip():
        raise InvalidProductName()
