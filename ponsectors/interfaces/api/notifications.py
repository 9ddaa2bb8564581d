"""Notifications API routes."""

from fastapi import APIRouter, Depends

from ponsectors.application.services import notification_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.notification import Notification, NotificationList
from ponsectors.interfaces.api.deps import get_current_actor
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@router.get("", response_model=NotificationList)
def list_notifications(
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    """Newest first, with the unread counter for the bell badge."""
    return notification_service.list_notifications(store, actor)


@router.post("/{notification_id}/read", response_model=Notification)
def mark_as_read(
    notification_id: str,
    store: DataStore = Depends(get_store),
    actor: Actor = Depends(get_current_actor),
):
    return notification_service.mark_as_read(store, actor, notification_id)
