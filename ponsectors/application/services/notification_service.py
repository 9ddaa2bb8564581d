"""Notification service — in-app notifications produced by the workflows."""

from typing import Optional

import structlog

from ponsectors.core.clock import new_id, now
from ponsectors.core.exceptions import EntityNotFoundException
from ponsectors.domain.enums import ContentKind, NotificationType
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.notification import Notification, NotificationList
from ponsectors.application.services.access_policy import Actor

logger = structlog.get_logger(__name__)


def notify(
    store: DataStore,
    user_id: str,
    type: NotificationType,
    message: str,
    related_id: Optional[str] = None,
    related_kind: Optional[ContentKind] = None,
) -> Notification:
    notification = store.notifications.add(
        Notification(
            id=new_id(),
            user_id=user_id,
            type=type,
            message=message,
            related_id=related_id,
            related_kind=related_kind,
            created_at=now(),
        )
    )
    logger.info("Notification created", user_id=user_id, type=type.value, related_id=related_id)
    return notification


def list_notifications(store: DataStore, actor: Actor) -> NotificationList:
    items = store.notifications.get_by_user(actor.id)
    return NotificationList(items=items, unread_count=sum(1 for n in items if not n.is_read))


def mark_as_read(store: DataStore, actor: Actor, notification_id: str) -> Notification:
    notification = store.notifications.get_by_id(notification_id)
    if notification is None or notification.user_id != actor.id:
        raise EntityNotFoundException("Notification not found", details={"id": notification_id})
    return store.notifications.mark_as_read(notification_id)
