"""Notification Repository Interface."""

from typing import List, Optional, Protocol

from ponsectors.domain.schemas.notification import Notification


class NotificationRepository(Protocol):
    def get_by_user(self, user_id: str) -> List[Notification]:
        """Notifications for one user, newest first."""
        ...

    def get_by_id(self, id: str) -> Optional[Notification]:
        ...

    def add(self, notification: Notification) -> Notification:
        ...

    def mark_as_read(self, id: str) -> Notification:
        ...
