"""
In-memory DataStore.
Process-local collections with the same contract as the SQLAlchemy store,
used for local development and tests (STORAGE_BACKEND=memory).
"""

import threading
from functools import lru_cache
from typing import Dict, Generic, List, Optional, TypeVar

from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import (
    BusinessRuleViolationException,
    ConcurrentUpdateException,
    EmailAlreadyRegisteredException,
    EntityNotFoundException,
)
from ponsectors.domain.schemas.auth import User
from ponsectors.domain.schemas.base import Entity
from ponsectors.domain.schemas.comment import Comment
from ponsectors.domain.schemas.funding import FundingOpportunity
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.notification import Notification
from ponsectors.domain.schemas.project import Project

T = TypeVar("T", bound=Entity)


class MemoryCollection(Generic[T]):
    """Dictionary-backed collection; entities are copied on the way in and out."""

    newest_first = True

    def __init__(self, lock: threading.RLock):
        self._lock = lock
        self._items: Dict[str, T] = {}

    def get_by_id(self, id: str) -> Optional[T]:
        with self._lock:
            item = self._items.get(id)
            return item.model_copy(deep=True) if item else None

    def list(self) -> List[T]:
        with self._lock:
            items = [i.model_copy(deep=True) for i in self._items.values()]
        return list(reversed(items)) if self.newest_first else items

    def create(self, entity: T) -> T:
        with self._lock:
            if entity.id in self._items:
                raise BusinessRuleViolationException("Duplicate id", details={"id": entity.id})
            self._items[entity.id] = entity.model_copy(deep=True)
            return entity.model_copy(deep=True)

    def update(self, entity: T) -> T:
        with self._lock:
            current = self._items.get(entity.id)
            if current is None:
                raise EntityNotFoundException(details={"id": entity.id})
            if current.version != entity.version:
                raise ConcurrentUpdateException(details={"id": entity.id, "version": entity.version})
            stored = entity.model_copy(update={"version": entity.version + 1}, deep=True)
            self._items[entity.id] = stored
            return stored.model_copy(deep=True)

    def delete(self, id: str) -> None:
        with self._lock:
            if self._items.pop(id, None) is None:
                raise EntityNotFoundException(details={"id": id})


class MemoryUserRepository(MemoryCollection[User]):
    newest_first = False

    def __init__(self, lock: threading.RLock):
        super().__init__(lock)
        self._password_hashes: Dict[str, str] = {}

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.strip().lower()
        with self._lock:
            for user in self._items.values():
                if user.email.lower() == wanted:
                    return user.model_copy(deep=True)
        return None

    def create(self, user: User, password_hash: str) -> User:
        with self._lock:
            if self.get_by_email(user.email):
                raise EmailAlreadyRegisteredException(details={"email": user.email})
            created = super().create(user)
            self._password_hashes[user.id] = password_hash
            return created

    def get_password_hash(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._password_hashes.get(user_id)

    def toggle_save(self, user_id: str, project_id: str) -> User:
        def flip(user: User) -> User:
            saved = list(user.saved_project_ids)
            if project_id in saved:
                saved.remove(project_id)
            else:
                saved.append(project_id)
            return user.with_changes(saved_project_ids=saved)

        with self._lock:
            return mutate_entity(self, user_id, flip)


class MemoryCommentRepository(MemoryCollection[Comment]):
    newest_first = False

    def get_by_parent(self, parent_id: str) -> List[Comment]:
        return [c for c in self.list() if c.parent_id == parent_id]

    def add(self, comment: Comment) -> Comment:
        return self.create(comment)

    def delete_by_parent(self, parent_id: str) -> int:
        with self._lock:
            doomed = [cid for cid, c in self._items.items() if c.parent_id == parent_id]
            for cid in doomed:
                del self._items[cid]
        return len(doomed)


class MemoryNotificationRepository(MemoryCollection[Notification]):
    def get_by_user(self, user_id: str) -> List[Notification]:
        return [n for n in self.list() if n.user_id == user_id]

    def add(self, notification: Notification) -> Notification:
        return self.create(notification)

    def mark_as_read(self, id: str) -> Notification:
        with self._lock:
            return mutate_entity(
                self, id, lambda n: None if n.is_read else n.with_changes(is_read=True)
            )


class MemoryStore:
    def __init__(self):
        lock = threading.RLock()
        self.users = MemoryUserRepository(lock)
        self.projects: MemoryCollection[Project] = MemoryCollection(lock)
        self.insights: MemoryCollection[Insight] = MemoryCollection(lock)
        self.funding: MemoryCollection[FundingOpportunity] = MemoryCollection(lock)
        self.comments = MemoryCommentRepository(lock)
        self.notifications = MemoryNotificationRepository(lock)


@lru_cache
def get_memory_store() -> MemoryStore:
    """Process-wide store for STORAGE_BACKEND=memory."""
    return MemoryStore()
