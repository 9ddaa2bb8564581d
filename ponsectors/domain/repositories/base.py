"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations.

    ``update`` is a compare-and-swap on ``entity.version``: it raises
    ``ConcurrentUpdateException`` when the stored version differs and
    ``EntityNotFoundException`` when the id no longer exists.
    """

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def list(self) -> List[T]:
        """List all entities, newest first."""
        ...

    def create(self, entity: T) -> T:
        """Persist a new entity."""
        ...

    def update(self, entity: T) -> T:
        """Replace an existing entity; returns the stored copy with its new version."""
        ...

    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        ...
