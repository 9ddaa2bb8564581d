"""Authorization policy — roles, ownership and visibility predicates.

Every check here is authoritative: routes and services call these instead of
trusting whatever the client chose to hide or show.
"""

from typing import Iterable, Optional

from pydantic import BaseModel

from ponsectors.config import get_settings
from ponsectors.core.exceptions import ForbiddenException
from ponsectors.domain.enums import (
    CollaboratorRole,
    CollaboratorStatus,
    ContentStatus,
    UserRole,
    Visibility,
)
from ponsectors.domain.schemas.auth import User
from ponsectors.domain.schemas.comment import Comment
from ponsectors.domain.schemas.project import Project

settings = get_settings()

FUNDING_ROLES = frozenset({UserRole.PREMIUM, UserRole.ADMIN})


class Actor(BaseModel):
    """The authenticated caller of a domain operation."""

    user: User
    role: UserRole

    @property
    def id(self) -> str:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def is_allow_listed(email: str, admin_emails: Optional[Iterable[str]] = None) -> bool:
    allow_list = settings.ADMIN_EMAILS if admin_emails is None else admin_emails
    return email.strip().lower() in {e.strip().lower() for e in allow_list}


def effective_role(user: User, admin_emails: Optional[Iterable[str]] = None) -> UserRole:
    """Stored role, unless the email is on the admin allow-list."""
    if is_allow_listed(user.email, admin_emails):
        return UserRole.ADMIN
    return user.role


def actor_for(user: User, admin_emails: Optional[Iterable[str]] = None) -> Actor:
    return Actor(user=user, role=effective_role(user, admin_emails))


def require(allowed: bool, message: str = "Forbidden") -> None:
    if not allowed:
        raise ForbiddenException(message)


def is_owner(actor: Actor, item) -> bool:
    return item.owner_user_id == actor.id


def is_member(actor: Actor, project: Project) -> bool:
    return any(c.user_id == actor.id for c in project.collaborators)


def is_collaborator(actor: Actor, project: Project) -> bool:
    """Active member with the Collaborator role; viewers and pending entries cannot edit."""
    return any(
        c.user_id == actor.id
        and c.role == CollaboratorRole.COLLABORATOR
        and c.status == CollaboratorStatus.ACTIVE
        for c in project.collaborators
    )


def can_view(actor: Actor, item) -> bool:
    return item.status == ContentStatus.SHARED or is_owner(actor, item) or actor.is_admin


def can_edit(actor: Actor, item) -> bool:
    if isinstance(item, Project):
        return is_owner(actor, item) or is_collaborator(actor, item)
    return is_owner(actor, item)


def can_change_status(actor: Actor, item) -> bool:
    return is_owner(actor, item)


def can_delete(actor: Actor, item) -> bool:
    return is_owner(actor, item)


def can_invite(actor: Actor, project: Project) -> bool:
    return is_owner(actor, project)


def can_request_join(actor: Actor, project: Project) -> bool:
    return can_view(actor, project) and not is_member(actor, project)


def can_post_funding(actor: Actor) -> bool:
    return actor.role in FUNDING_ROLES


def can_moderate(actor: Actor) -> bool:
    return actor.is_admin


def can_delete_comment(actor: Actor, comment: Comment, parent=None) -> bool:
    if comment.author_id == actor.id:
        return True
    return parent is not None and is_owner(actor, parent)


def is_in_portfolio(project: Project) -> bool:
    return project.status == ContentStatus.SHARED and project.visibility == Visibility.PUBLIC
