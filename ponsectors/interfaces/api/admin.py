"""Admin API routes — moderation queue, user roles and platform stats."""

from typing import List

from fastapi import APIRouter, Depends

from ponsectors.application.services import moderation_service, user_service
from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.lifecycle import LifecycleAction
from ponsectors.domain.enums import ContentKind
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import RoleUpdate, User
from ponsectors.domain.schemas.moderation import AdminStats, ModerationItem, ModerationResult
from ponsectors.interfaces.api.deps import require_admin
from ponsectors.interfaces.deps import get_store

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/queue", response_model=List[ModerationItem])
def moderation_queue(
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return moderation_service.get_queue(store, admin)


@router.post("/{kind}/{item_id}/approve", response_model=ModerationResult)
def approve(
    kind: ContentKind,
    item_id: str,
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return moderation_service.moderate(store, admin, kind, item_id, LifecycleAction.APPROVE)


@router.post("/{kind}/{item_id}/reject", response_model=ModerationResult)
def reject(
    kind: ContentKind,
    item_id: str,
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return moderation_service.moderate(store, admin, kind, item_id, LifecycleAction.REJECT)


@router.get("/users", response_model=List[User])
def list_users(
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return user_service.list_users(store)


@router.patch("/users/{user_id}/role", response_model=User)
def assign_role(
    user_id: str,
    body: RoleUpdate,
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return user_service.assign_role(store, admin, user_id, body.role)


@router.get("/stats", response_model=AdminStats)
def stats(
    store: DataStore = Depends(get_store),
    admin: Actor = Depends(require_admin),
):
    return moderation_service.get_stats(store, admin)
