"""Content service — create, read, edit, submit and delete submittable content.

Projects, insights and funding opportunities share one lifecycle and one set
of visibility rules; the kind only selects the repository and the schema.
"""

from typing import Dict, List, Optional, Union

import structlog

from ponsectors.core.clock import new_id, now
from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import EntityNotFoundException
from ponsectors.domain.enums import ContentKind, ContentStatus
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.funding import FundingCreate, FundingOpportunity, FundingUpdate
from ponsectors.domain.schemas.feed import FeedItem
from ponsectors.domain.schemas.insight import Insight, InsightCreate, InsightUpdate
from ponsectors.domain.schemas.moderation import ContentItem
from ponsectors.domain.schemas.project import Project, ProjectCreate, ProjectUpdate
from ponsectors.application.services import access_policy as policy
from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.lifecycle import initial_status, transition

logger = structlog.get_logger(__name__)

REPOSITORIES: Dict[ContentKind, str] = {
    ContentKind.PROJECT: "projects",
    ContentKind.INSIGHT: "insights",
    ContentKind.FUNDING: "funding",
}

LABELS: Dict[ContentKind, str] = {
    ContentKind.PROJECT: "Project",
    ContentKind.INSIGHT: "Insight",
    ContentKind.FUNDING: "Funding opportunity",
}

ContentUpdate = Union[ProjectUpdate, InsightUpdate, FundingUpdate]


def repository_for(store: DataStore, kind: ContentKind):
    return getattr(store, REPOSITORIES[kind])


def not_found(kind: ContentKind, item_id: str) -> EntityNotFoundException:
    return EntityNotFoundException(f"{LABELS[kind]} not found", details={"kind": kind.value, "id": item_id})


def get_item(store: DataStore, kind: ContentKind, item_id: str) -> ContentItem:
    """Unfiltered fetch; raises when the id does not exist."""
    item = repository_for(store, kind).get_by_id(item_id)
    if item is None:
        raise not_found(kind, item_id)
    return item


def get_visible(store: DataStore, actor: Actor, kind: ContentKind, item_id: str) -> ContentItem:
    """Fetch an item the actor may see; hidden items are reported as missing."""
    item = repository_for(store, kind).get_by_id(item_id)
    if item is None or not policy.can_view(actor, item):
        raise not_found(kind, item_id)
    return item


def list_visible(store: DataStore, actor: Actor, kind: ContentKind) -> List[ContentItem]:
    return [i for i in repository_for(store, kind).list() if policy.can_view(actor, i)]


def list_owned(store: DataStore, actor: Actor, kind: ContentKind) -> List[ContentItem]:
    return [i for i in repository_for(store, kind).list() if policy.is_owner(actor, i)]


def list_by_status(store: DataStore, kind: ContentKind, status: ContentStatus) -> List[ContentItem]:
    return [i for i in repository_for(store, kind).list() if i.status == status]


def create_project(store: DataStore, actor: Actor, body: ProjectCreate) -> Project:
    timestamp = now()
    project = Project(
        id=new_id(),
        title=body.title,
        description=body.description,
        thematic_area=body.thematic_area,
        country=body.country,
        city=body.city,
        owner_id=actor.id,
        status=initial_status(body.status),
        attachments=body.attachments,
        visibility=body.visibility,
        created_at=timestamp,
        updated_at=timestamp,
    )
    created = store.projects.create(project)
    logger.info("Project created", project_id=created.id, owner_id=actor.id, status=created.status.value)
    return created


def create_insight(store: DataStore, actor: Actor, body: InsightCreate) -> Insight:
    timestamp = now()
    insight = Insight(
        id=new_id(),
        title=body.title,
        description=body.description,
        thematic_area=body.thematic_area,
        author_id=actor.id,
        status=initial_status(body.status),
        attachments=body.attachments,
        created_at=timestamp,
        updated_at=timestamp,
    )
    created = store.insights.create(insight)
    logger.info("Insight created", insight_id=created.id, author_id=actor.id, status=created.status.value)
    return created


def create_funding(store: DataStore, actor: Actor, body: FundingCreate) -> FundingOpportunity:
    policy.require(
        policy.can_post_funding(actor),
        "Posting funding opportunities is available for Premium users only.",
    )
    timestamp = now()
    opportunity = FundingOpportunity(
        id=new_id(),
        title=body.title,
        description=body.description,
        deadline=body.deadline,
        eligibility=body.eligibility,
        application_info=body.application_info,
        owner_id=actor.id,
        status=initial_status(body.status),
        created_at=timestamp,
        updated_at=timestamp,
    )
    created = store.funding.create(opportunity)
    logger.info("Funding opportunity created", funding_id=created.id, owner_id=actor.id, status=created.status.value)
    return created


def _guard_write(actor: Actor, kind: ContentKind, item) -> None:
    # Callers that cannot even see the item get a 404, not a 403
    if not (policy.can_view(actor, item) or policy.can_edit(actor, item)):
        raise not_found(kind, item.id)


def update_content(
    store: DataStore,
    actor: Actor,
    kind: ContentKind,
    item_id: str,
    body: ContentUpdate,
) -> ContentItem:
    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    requested_status: Optional[ContentStatus] = changes.pop("status", None)

    def apply(item):
        _guard_write(actor, kind, item)
        policy.require(policy.can_edit(actor, item), f"You cannot edit this {LABELS[kind].lower()}")

        updates = dict(changes)
        if requested_status is not None and requested_status != item.status:
            policy.require(policy.can_change_status(actor, item), "Only the owner can change the status")
            updates["status"] = transition(item.status, requested_status, moderator=False)
        return item.with_changes(**updates, updated_at=now())

    updated = mutate_entity(repository_for(store, kind), item_id, apply)
    logger.info("Content updated", kind=kind.value, item_id=item_id, fields=sorted(changes))
    return updated


def submit_content(store: DataStore, actor: Actor, kind: ContentKind, item_id: str) -> ContentItem:
    """Owner moves a draft into the moderation queue."""

    def apply(item):
        _guard_write(actor, kind, item)
        policy.require(policy.can_change_status(actor, item), "Only the owner can submit for review")
        target = transition(item.status, ContentStatus.PENDING, moderator=False)
        if target == item.status:
            return None
        return item.with_changes(status=target, updated_at=now())

    submitted = mutate_entity(repository_for(store, kind), item_id, apply)
    logger.info("Content submitted for review", kind=kind.value, item_id=item_id)
    return submitted


def _drop_bookmarks(store: DataStore, project_id: str) -> int:
    """Remove a deleted project from every user's saved list."""

    def unsave(user):
        if project_id not in user.saved_project_ids:
            return None
        return user.with_changes(saved_project_ids=[p for p in user.saved_project_ids if p != project_id])

    savers = [u for u in store.users.list() if project_id in u.saved_project_ids]
    for user in savers:
        mutate_entity(store.users, user.id, unsave)
    return len(savers)


def delete_content(store: DataStore, actor: Actor, kind: ContentKind, item_id: str) -> None:
    item = get_item(store, kind, item_id)
    _guard_write(actor, kind, item)
    policy.require(policy.can_delete(actor, item), f"Only the owner can delete this {LABELS[kind].lower()}")

    repository_for(store, kind).delete(item_id)
    removed = unsaved = 0
    if kind in (ContentKind.PROJECT, ContentKind.INSIGHT):
        removed = store.comments.delete_by_parent(item_id)
    if kind == ContentKind.PROJECT:
        unsaved = _drop_bookmarks(store, item_id)
    logger.info(
        "Content deleted",
        kind=kind.value,
        item_id=item_id,
        comments_removed=removed,
        bookmarks_removed=unsaved,
    )


FEED_KINDS = (ContentKind.PROJECT, ContentKind.INSIGHT)


def list_feed(store: DataStore) -> List[FeedItem]:
    """Shared projects and insights merged, newest first."""
    feed = [
        FeedItem(kind=kind, item=item, created_at=item.created_at)
        for kind in FEED_KINDS
        for item in list_by_status(store, kind, ContentStatus.SHARED)
    ]
    feed.sort(key=lambda entry: entry.created_at, reverse=True)
    return feed
