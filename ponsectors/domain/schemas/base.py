"""Base schema for persisted entities."""

from pydantic import BaseModel


class Entity(BaseModel):
    """Persisted entity with an optimistic-concurrency version."""

    id: str
    version: int = 0

    model_config = {"from_attributes": True}

    def with_changes(self, **changes):
        """Return a re-validated copy with ``changes`` applied."""
        return type(self).model_validate({**self.model_dump(), **changes})
