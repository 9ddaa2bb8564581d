"""
SQLAlchemy Implementation of Notification Repository.
"""

from typing import List

from sqlalchemy.orm import Session

from ponsectors.core.concurrency import mutate_entity
from ponsectors.domain.models.notification import NotificationModel
from ponsectors.domain.repositories.notification_repository import NotificationRepository
from ponsectors.domain.schemas.notification import Notification
from ponsectors.infrastructure.database import backend_errors
from ponsectors.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyNotificationRepository(SQLAlchemyRepository[NotificationModel, Notification], NotificationRepository):
    def __init__(self, db: Session):
        super().__init__(db, NotificationModel, Notification)

    def get_by_user(self, user_id: str) -> List[Notification]:
        with backend_errors(self.db):
            rows = (
                self.db.query(NotificationModel)
                .filter(NotificationModel.user_id == user_id)
                .order_by(NotificationModel.created_at.desc())
                .all()
            )
        return [self._to_entity(r) for r in rows]

    def add(self, notification: Notification) -> Notification:
        return self.create(notification)

    def mark_as_read(self, id: str) -> Notification:
        return mutate_entity(
            self, id, lambda n: None if n.is_read else n.with_changes(is_read=True)
        )
