"""User service — directory, profile edits and admin role management."""

from typing import List

import structlog

from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import BusinessRuleViolationException, EntityNotFoundException
from ponsectors.domain.enums import UserRole
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import User, UserProfileUpdate, check_subtype
from ponsectors.application.services import access_policy as policy
from ponsectors.application.services.access_policy import Actor

logger = structlog.get_logger(__name__)


def list_users(store: DataStore) -> List[User]:
    return store.users.list()


def get_user(store: DataStore, user_id: str) -> User:
    user = store.users.get_by_id(user_id)
    if user is None:
        raise EntityNotFoundException("User not found", details={"id": user_id})
    return user


def update_profile(store: DataStore, actor: Actor, body: UserProfileUpdate) -> User:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)

    def apply(user: User) -> User:
        merged = user.with_changes(**changes)
        # Switching stakeholder type may leave the stored subtype behind
        try:
            check_subtype(merged.stakeholder_type, merged.subtype)
        except ValueError as exc:
            raise BusinessRuleViolationException(str(exc), details={"subtype": merged.subtype}) from exc
        return merged

    updated = mutate_entity(store.users, actor.id, apply)
    logger.info("Profile updated", user_id=actor.id, fields=sorted(changes))
    return updated


def assign_role(store: DataStore, actor: Actor, user_id: str, role: UserRole) -> User:
    """Admin sets the stored role of a user."""
    policy.require(policy.can_moderate(actor), "Admin access required")
    get_user(store, user_id)

    updated = mutate_entity(
        store.users,
        user_id,
        lambda u: None if u.role == role else u.with_changes(role=role),
    )
    logger.info("User role changed", user_id=user_id, role=role.value, admin_id=actor.id)
    return updated
