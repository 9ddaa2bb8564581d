"""Optimistic read-modify-write helper used by every list/status mutation."""

from typing import Callable, Optional, TypeVar

import structlog

from ponsectors.config import get_settings
from ponsectors.core.exceptions import ConcurrentUpdateException, EntityNotFoundException

settings = get_settings()
logger = structlog.get_logger(__name__)

T = TypeVar("T")


def mutate_entity(repo, entity_id: str, mutate: Callable[[T], Optional[T]], retries: Optional[int] = None) -> T:
    """Load ``entity_id``, apply ``mutate`` and write it back with compare-and-swap.

    ``mutate`` receives a fresh copy on every attempt and returns the new entity,
    or ``None`` when nothing needs to change. Domain errors raised by ``mutate``
    propagate unchanged.
    """
    attempts = retries or settings.MAX_WRITE_RETRIES
    for attempt in range(1, attempts + 1):
        current = repo.get_by_id(entity_id)
        if current is None:
            raise EntityNotFoundException(details={"id": entity_id})
        updated = mutate(current)
        if updated is None:
            return current
        try:
            return repo.update(updated)
        except ConcurrentUpdateException:
            logger.warning("Write conflict, retrying", entity_id=entity_id, attempt=attempt)
    raise ConcurrentUpdateException(details={"id": entity_id, "attempts": attempts})
