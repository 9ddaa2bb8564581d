"""Notification model — in-app notifications per user."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from ponsectors.domain.enums import ContentKind, NotificationType
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class NotificationModel(Base):
    __tablename__ = "notifications"

    id = Column(String(32), primary_key=True)
    user_id = Column(String(32), nullable=False, index=True)
    type = Column(enum_column_type(NotificationType), nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(String(32), nullable=True)
    related_kind = Column(enum_column_type(ContentKind), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Notification {self.user_id} - {self.type}>"
