"""
API Dependencies.
"""

from contextlib import contextmanager
from typing import Generator, Iterator

from ponsectors.config import get_settings
from ponsectors.domain.repositories.store import DataStore
from ponsectors.infrastructure.database import SessionLocal
from ponsectors.infrastructure.memory_store import get_memory_store
from ponsectors.infrastructure.repositories.store import SQLAlchemyStore

settings = get_settings()


@contextmanager
def store_scope() -> Iterator[DataStore]:
    """Open the configured DataStore; the SQL session is closed on exit."""
    if settings.STORAGE_BACKEND == "memory":
        yield get_memory_store()
        return

    db = SessionLocal()
    try:
        yield SQLAlchemyStore(db)
    finally:
        db.close()


def get_store() -> Generator[DataStore, None, None]:
    with store_scope() as store:
        yield store
