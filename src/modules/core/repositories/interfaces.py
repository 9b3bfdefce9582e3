"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that every
domain-specific repository interface extends.  Service-layer code
depends on this abstraction, never on the Django ORM directly.

Misses are reported as ``None`` / ``False``; implementations do not
raise for unknown or malformed identifiers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: Any) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (insert or update) an entity and return it."""

    @abstractmethod
    def delete(self, id: Any) -> bool:
        """Remove an entity by ID. ``False`` when nothing was removed."""

    @abstractmethod
    def exists(self, id: Any) -> bool:
        """Whether an entity with this ID is stored."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored entities."""
