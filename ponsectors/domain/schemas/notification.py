"""Pydantic schemas for in-app Notifications."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ponsectors.domain.enums import ContentKind, NotificationType
from ponsectors.domain.schemas.base import Entity


class Notification(Entity):
    user_id: str
    type: NotificationType
    message: str
    related_id: Optional[str] = None
    related_kind: Optional[ContentKind] = None
    is_read: bool = False
    created_at: datetime


class NotificationList(BaseModel):
    items: List[Notification]
    unread_count: int
