"""Comment service — threaded discussion on projects and insights."""

from typing import Dict, List

import structlog

from ponsectors.core.clock import new_id, now
from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InvalidReplyException,
)
from ponsectors.domain.enums import ContentKind, NotificationType
from ponsectors.domain.repositories.store import DataStore
from ponsectors.domain.schemas.comment import Comment, CommentCreate, CommentNode
from ponsectors.application.services import access_policy as policy
from ponsectors.application.services.access_policy import Actor
from ponsectors.application.services.content_service import get_visible, repository_for
from ponsectors.application.services.notification_service import notify

logger = structlog.get_logger(__name__)

COMMENTABLE_KINDS = (ContentKind.PROJECT, ContentKind.INSIGHT)


def _visible_parent(store: DataStore, actor: Actor, kind: ContentKind, parent_id: str):
    if kind not in COMMENTABLE_KINDS:
        raise BusinessRuleViolationException(
            "Comments are only available on projects and insights",
            details={"kind": kind.value},
        )
    return get_visible(store, actor, kind, parent_id)


def _adjust_comment_count(store: DataStore, kind: ContentKind, parent_id: str, delta: int) -> None:
    mutate_entity(
        repository_for(store, kind),
        parent_id,
        lambda p: p.with_changes(comment_count=max(0, p.comment_count + delta)),
    )


def list_comments(store: DataStore, actor: Actor, kind: ContentKind, parent_id: str) -> List[Comment]:
    _visible_parent(store, actor, kind, parent_id)
    return store.comments.get_by_parent(parent_id)


def get_comment_tree(store: DataStore, actor: Actor, kind: ContentKind, parent_id: str) -> List[CommentNode]:
    return build_comment_tree(list_comments(store, actor, kind, parent_id))


def add_comment(store: DataStore, actor: Actor, body: CommentCreate) -> Comment:
    parent = _visible_parent(store, actor, body.parent_kind, body.parent_id)

    reply_target = None
    if body.reply_to_id:
        reply_target = store.comments.get_by_id(body.reply_to_id)
        if reply_target is None or reply_target.parent_id != body.parent_id:
            raise InvalidReplyException(
                "Reply target must be an existing comment in the same thread",
                details={"reply_to_id": body.reply_to_id},
            )

    # Ids are generated here, so a new comment can never close a reply cycle
    comment = store.comments.add(
        Comment(
            id=new_id(),
            parent_id=body.parent_id,
            parent_kind=body.parent_kind,
            author_id=actor.id,
            text=body.text,
            created_at=now(),
            reply_to_id=body.reply_to_id,
        )
    )
    _adjust_comment_count(store, body.parent_kind, body.parent_id, 1)
    logger.info("Comment added", comment_id=comment.id, parent_id=body.parent_id, reply_to_id=body.reply_to_id)

    owner_id = parent.owner_user_id
    if owner_id != actor.id:
        notify(
            store,
            owner_id,
            NotificationType.COMMENT_ADDED,
            f'{actor.user.name} commented on "{parent.title}".',
            related_id=parent.id,
            related_kind=body.parent_kind,
        )
    if reply_target is not None and reply_target.author_id not in (actor.id, owner_id):
        notify(
            store,
            reply_target.author_id,
            NotificationType.COMMENT_REPLY,
            f'{actor.user.name} replied to your comment on "{parent.title}".',
            related_id=parent.id,
            related_kind=body.parent_kind,
        )
    return comment


def delete_comment(store: DataStore, actor: Actor, comment_id: str) -> None:
    """Remove one comment; its replies stay and are shown as roots."""
    comment = store.comments.get_by_id(comment_id)
    if comment is None:
        raise EntityNotFoundException("Comment not found", details={"id": comment_id})

    parent = repository_for(store, comment.parent_kind).get_by_id(comment.parent_id)
    policy.require(
        policy.can_delete_comment(actor, comment, parent),
        "Only the author or the owner can delete this comment",
    )

    store.comments.delete(comment_id)
    if parent is not None:
        _adjust_comment_count(store, comment.parent_kind, comment.parent_id, -1)
    logger.info("Comment deleted", comment_id=comment_id, parent_id=comment.parent_id, actor_id=actor.id)


def build_comment_tree(comments: List[Comment]) -> List[CommentNode]:
    """Rebuild the reply tree from a flat list.

    Replies whose target is missing (deleted) become roots. Any cycle in the
    stored links is broken at its earliest comment, so every comment appears
    exactly once under exactly one root.
    """
    ordered = sorted(comments, key=lambda c: c.created_at)
    by_id = {c.id: c for c in ordered}

    children: Dict[str, List[Comment]] = {}
    roots: List[Comment] = []
    for c in ordered:
        if c.reply_to_id and c.reply_to_id in by_id and c.reply_to_id != c.id:
            children.setdefault(c.reply_to_id, []).append(c)
        else:
            roots.append(c)

    placed = set()

    def build(comment: Comment) -> CommentNode:
        placed.add(comment.id)
        replies = [build(child) for child in children.get(comment.id, []) if child.id not in placed]
        return CommentNode(comment=comment, replies=replies)

    tree = [build(root) for root in roots]

    # Whatever is still unplaced only reaches itself through a cycle
    for c in ordered:
        if c.id not in placed:
            tree.append(build(c))
    return tree
