"""Moderation service — admin review queue, approve/reject and platform stats."""

from typing import List

import structlog

from ponsectors.core.clock import now
from ponsectors.core.concurrency import mutate_entity
from ponsectors.domain.enums import ContentKind, ContentStatus, NotificationType
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.moderation import AdminStats, ModerationItem, ModerationResult
from ponsectors.application.services import access_policy as policy
from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.content_service import LABELS, get_item, list_by_status, repository_for
from ponsectors.application.services.lifecycle import ACTION_TARGETS, LifecycleAction, transition
from ponsectors.application.services.notification_service import notify

logger = structlog.get_logger(__name__)

# Queue order: projects, then insights, then funding opportunities
QUEUE_KINDS = (ContentKind.PROJECT, ContentKind.INSIGHT, ContentKind.FUNDING)

OUTCOME_NOTIFICATIONS = {
    LifecycleAction.APPROVE: (NotificationType.CONTENT_APPROVED, "Your {label} \"{title}\" was approved and is now shared."),
    LifecycleAction.REJECT: (NotificationType.CONTENT_REJECTED, "Your {label} \"{title}\" was not approved."),
}


def get_queue(store: DataStore, actor: Actor) -> List[ModerationItem]:
    policy.require(policy.can_moderate(actor), "Admin access required")
    queue = []
    for kind in QUEUE_KINDS:
        for item in list_by_status(store, kind, ContentStatus.PENDING):
            queue.append(
                ModerationItem(
                    kind=kind,
                    id=item.id,
                    title=item.title,
                    owner_id=item.owner_user_id,
                    status=item.status,
                    created_at=item.created_at,
                )
            )
    return queue


def moderate(
    store: DataStore,
    actor: Actor,
    kind: ContentKind,
    item_id: str,
    action: LifecycleAction,
) -> ModerationResult:
    """Approve or reject a pending item; a no-op for anything not Pending."""
    policy.require(policy.can_moderate(actor), "Admin access required")
    policy.require(action != LifecycleAction.SUBMIT, "Submission is an owner action")
    target = ACTION_TARGETS[action]

    get_item(store, kind, item_id)
    applied = []

    def apply(item):
        applied.clear()
        if item.status != ContentStatus.PENDING:
            return None
        applied.append(True)
        return item.with_changes(
            status=transition(item.status, target, moderator=True),
            updated_at=now(),
        )

    item = mutate_entity(repository_for(store, kind), item_id, apply)
    changed = bool(applied)

    if changed:
        logger.info("Content moderated", kind=kind.value, item_id=item_id, action=action.value, admin_id=actor.id)
        type_, template = OUTCOME_NOTIFICATIONS[action]
        notify(
            store,
            item.owner_user_id,
            type_,
            template.format(label=LABELS[kind].lower(), title=item.title),
            related_id=item.id,
            related_kind=kind,
        )
    else:
        logger.info("Moderation ignored, item not pending", kind=kind.value, item_id=item_id, status=item.status.value)

    return ModerationResult(kind=kind, item=item, changed=changed)


def get_stats(store: DataStore, actor: Actor) -> AdminStats:
    policy.require(policy.can_moderate(actor), "Admin access required")
    projects = store.projects.list()
    insights = store.insights.list()
    funding = store.funding.list()

    def pending(items) -> int:
        return sum(1 for i in items if i.status == ContentStatus.PENDING)

    pending_projects, pending_insights, pending_funding = pending(projects), pending(insights), pending(funding)
    return AdminStats(
        total_users=len(store.users.list()),
        total_projects=len(projects),
        total_insights=len(insights),
        total_funding=len(funding),
        pending_projects=pending_projects,
        pending_insights=pending_insights,
        pending_funding=pending_funding,
        total_pending=pending_projects + pending_insights + pending_funding,
    )
