"""Threaded comments and tree reconstruction."""

from datetime import datetime, timedelta, timezone

import pytest

from ponsectors.application.services import comment_service, content_service
from ponsectors.application.services.comment_service import build_comment_tree
from ponsectors.core.exceptions import (
    BusinessRuleViolationException,
    ForbiddenException,
    InvalidReplyException,
)
from ponsectors.domain.enums import ContentKind, NotificationType
from ponsectors.domain.schemas.comment import Comment, CommentCreate
from ponsectors.domain.schemas.insight import InsightCreate

T0 = datetime(2025, 3, 1, tzinfo=timezone.utc)


def comment(cid, reply_to=None, minutes=0):
    return Comment(
        id=cid,
        parent_id="p1",
        parent_kind=ContentKind.PROJECT,
        author_id="u1",
        text=cid,
        created_at=T0 + timedelta(minutes=minutes),
        reply_to_id=reply_to,
    )


def shape(nodes):
    return [(n.comment.id, shape(n.replies)) for n in nodes]


def test_tree_nests_replies_in_creation_order():
    flat = [comment("b", "a", 2), comment("a", None, 0), comment("c", "a", 1), comment("d", "c", 3)]
    assert shape(build_comment_tree(flat)) == [("a", [("c", [("d", [])]), ("b", [])])]


def test_orphaned_reply_becomes_root():
    flat = [comment("a", None, 0), comment("b", "gone", 1)]
    assert shape(build_comment_tree(flat)) == [("a", []), ("b", [])]


def test_self_reply_is_a_root():
    assert shape(build_comment_tree([comment("a", "a")])) == [("a", [])]


def test_cycle_is_broken_at_earliest_comment():
    flat = [comment("x", "y", 0), comment("y", "x", 1), comment("root", None, 2)]
    tree = build_comment_tree(flat)
    assert shape(tree) == [("root", []), ("x", [("y", [])])]


@pytest.fixture
def thread(store, make_actor):
    author = make_actor("Author")
    insight = content_service.create_insight(
        store,
        author,
        InsightCreate(title="Agritech notes", description="Mobile money for farmers", status="Pending"),
    )
    insight = store.insights.update(insight.with_changes(status="Shared"))
    return author, insight


def test_comment_and_reply_notify(store, make_actor, thread):
    author, insight = thread
    amir, jane = make_actor("Amir"), make_actor("Jane")

    first = comment_service.add_comment(
        store, amir, CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="Great read")
    )
    comment_service.add_comment(
        store,
        jane,
        CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="Agreed", reply_to_id=first.id),
    )

    assert store.insights.get_by_id(insight.id).comment_count == 2
    assert [n.type for n in store.notifications.get_by_user(amir.id)] == [NotificationType.COMMENT_REPLY]
    assert len(store.notifications.get_by_user(author.id)) == 2

    tree = comment_service.get_comment_tree(store, jane, ContentKind.INSIGHT, insight.id)
    assert shape(tree)[0][0] == first.id
    assert len(tree[0].replies) == 1


def test_reply_must_target_same_thread(store, make_actor, thread):
    _, insight = thread
    with pytest.raises(InvalidReplyException):
        comment_service.add_comment(
            store,
            make_actor("Amir"),
            CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="?", reply_to_id="nope"),
        )


def test_funding_has_no_comments(store, make_actor):
    with pytest.raises(BusinessRuleViolationException):
        comment_service.add_comment(
            store, make_actor("Amir"), CommentCreate(parent_id="f1", parent_kind=ContentKind.FUNDING, text="hi")
        )


def test_delete_keeps_replies_as_roots(store, make_actor, thread):
    author, insight = thread
    amir, jane = make_actor("Amir"), make_actor("Jane")
    first = comment_service.add_comment(
        store, amir, CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="one")
    )
    reply = comment_service.add_comment(
        store,
        jane,
        CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="two", reply_to_id=first.id),
    )

    with pytest.raises(ForbiddenException):
        comment_service.delete_comment(store, jane, first.id)

    # Parent owner may moderate the thread
    comment_service.delete_comment(store, author, first.id)

    tree = comment_service.get_comment_tree(store, jane, ContentKind.INSIGHT, insight.id)
    assert shape(tree) == [(reply.id, [])]
    assert store.insights.get_by_id(insight.id).comment_count == 1


def test_deleting_content_removes_its_thread(store, make_actor, thread):
    author, insight = thread
    comment_service.add_comment(
        store, make_actor("Amir"), CommentCreate(parent_id=insight.id, parent_kind=ContentKind.INSIGHT, text="x")
    )
    content_service.delete_content(store, author, ContentKind.INSIGHT, insight.id)
    assert store.comments.get_by_parent(insight.id) == []
