"""Collaboration service — join requests, invites, bookmarks and project listings."""

from typing import List, Optional

import structlog

from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import AlreadyCollaboratorException, UserNotFoundException
from ponsectors.domain.enums import CollaboratorRole, CollaboratorStatus, ContentKind, NotificationType
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.auth import User
from ponsectors.domain.schemas.project import Collaborator, JoinRequestResult, Project
from ponsectors.application.services import access_policy as policy
from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.content_service import get_visible, list_visible, not_found
from ponsectors.application.services.notification_service import notify

logger = structlog.get_logger(__name__)


def request_to_join(store: DataStore, actor: Actor, project_id: str) -> JoinRequestResult:
    """Add the actor to the project's join requests; repeating is a no-op."""
    project = get_visible(store, actor, ContentKind.PROJECT, project_id)
    if policy.is_member(actor, project):
        raise AlreadyCollaboratorException("You are already a member of this project.")

    already = []

    def add_request(p: Project) -> Optional[Project]:
        if actor.id in p.join_requests:
            already.append(True)
            return None
        return p.with_changes(join_requests=[*p.join_requests, actor.id])

    updated = mutate_entity(store.projects, project_id, add_request)

    if not already:
        logger.info("Join request sent", project_id=project_id, user_id=actor.id)
        notify(
            store,
            updated.owner_id,
            NotificationType.JOIN_REQUEST,
            f'{actor.user.name} asked to join "{updated.title}".',
            related_id=updated.id,
            related_kind=ContentKind.PROJECT,
        )
    return JoinRequestResult(project=updated, already_requested=bool(already))


def invite_collaborator(store: DataStore, actor: Actor, project_id: str, email: str) -> Project:
    """Owner adds a registered user, looked up by email, as an active collaborator."""
    project = get_visible(store, actor, ContentKind.PROJECT, project_id)
    policy.require(policy.can_invite(actor, project), "Only the project owner can invite collaborators")

    invitee = store.users.get_by_email(email)
    if invitee is None:
        raise UserNotFoundException(details={"email": email.strip().lower()})

    def add_collaborator(p: Project) -> Project:
        if any(c.user_id == invitee.id for c in p.collaborators):
            raise AlreadyCollaboratorException(details={"user_id": invitee.id})
        entry = Collaborator(
            user_id=invitee.id,
            role=CollaboratorRole.COLLABORATOR,
            status=CollaboratorStatus.ACTIVE,
        )
        return p.with_changes(collaborators=[*p.collaborators, entry])

    updated = mutate_entity(store.projects, project_id, add_collaborator)
    logger.info("Collaborator added", project_id=project_id, user_id=invitee.id, owner_id=actor.id)
    notify(
        store,
        invitee.id,
        NotificationType.COLLABORATOR_ADDED,
        f'You were added as a collaborator on "{updated.title}".',
        related_id=updated.id,
        related_kind=ContentKind.PROJECT,
    )
    return updated


def toggle_save(store: DataStore, actor: Actor, project_id: str) -> User:
    """Bookmark the project if not saved, un-bookmark it otherwise.

    A bookmark whose project has since been deleted can still be removed.
    """
    if store.projects.get_by_id(project_id) is None:
        current = store.users.get_by_id(actor.id) or actor.user
        if project_id not in current.saved_project_ids:
            raise not_found(ContentKind.PROJECT, project_id)
        user = store.users.toggle_save(actor.id, project_id)
        logger.info("Stale bookmark removed", project_id=project_id, user_id=actor.id)
        return user

    get_visible(store, actor, ContentKind.PROJECT, project_id)
    user = store.users.toggle_save(actor.id, project_id)
    saved = project_id in user.saved_project_ids

    delta = 1 if saved else -1
    mutate_entity(
        store.projects,
        project_id,
        lambda p: p.with_changes(save_count=max(0, p.save_count + delta)),
    )
    logger.info("Project bookmark toggled", project_id=project_id, user_id=actor.id, saved=saved)
    return user


def _matches(project: Project, thematic_area: Optional[str], country: Optional[str]) -> bool:
    if thematic_area and project.thematic_area != thematic_area:
        return False
    if country and project.country != country:
        return False
    return True


def list_projects(
    store: DataStore,
    actor: Actor,
    thematic_area: Optional[str] = None,
    country: Optional[str] = None,
) -> List[Project]:
    return [p for p in list_visible(store, actor, ContentKind.PROJECT) if _matches(p, thematic_area, country)]


def list_portfolio(
    store: DataStore,
    actor: Actor,
    thematic_area: Optional[str] = None,
    country: Optional[str] = None,
) -> List[Project]:
    """Shared, public projects: the browsable portfolio."""
    return [
        p for p in store.projects.list()
        if policy.is_in_portfolio(p) and _matches(p, thematic_area, country)
    ]


def list_joined(store: DataStore, actor: Actor) -> List[Project]:
    """Projects where the actor is a non-owner collaborator."""
    return [
        p for p in list_visible(store, actor, ContentKind.PROJECT)
        if any(c.user_id == actor.id and c.role != CollaboratorRole.OWNER for c in p.collaborators)
    ]


def list_saved(store: DataStore, actor: Actor) -> List[Project]:
    user = store.users.get_by_id(actor.id) or actor.user
    saved = set(user.saved_project_ids)
    return [p for p in list_visible(store, actor, ContentKind.PROJECT) if p.id in saved]
