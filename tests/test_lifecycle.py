"""Content lifecycle state machine."""

import pytest

from ponsectors.application.services.lifecycle import (
    ACTION_TARGETS,
    LifecycleAction,
    allowed_targets,
    initial_status,
    transition,
)
from ponsectors.core.exceptions import ForbiddenException, InvalidTransitionException
from ponsectors.domain.enums import ContentStatus

DRAFT, PENDING, SHARED, REJECTED = (
    ContentStatus.DRAFT,
    ContentStatus.PENDING,
    ContentStatus.SHARED,
    ContentStatus.REJECTED,
)


def test_owner_submits_draft():
    assert transition(DRAFT, PENDING, moderator=False) == PENDING


@pytest.mark.parametrize("target", [SHARED, REJECTED])
def test_moderator_resolves_pending(target):
    assert transition(PENDING, target, moderator=True) == target


def test_owner_cannot_approve_own_content():
    with pytest.raises(ForbiddenException):
        transition(PENDING, SHARED, moderator=False)


def test_moderator_does_not_submit():
    with pytest.raises(ForbiddenException):
        transition(DRAFT, PENDING, moderator=True)


@pytest.mark.parametrize(
    "current,target",
    [
        (DRAFT, SHARED),
        (DRAFT, REJECTED),
        (PENDING, DRAFT),
        (SHARED, PENDING),
        (REJECTED, PENDING),
        (SHARED, REJECTED),
        (REJECTED, SHARED),
    ],
)
def test_illegal_edges_are_rejected(current, target):
    with pytest.raises(InvalidTransitionException):
        transition(current, target, moderator=True)
    with pytest.raises(InvalidTransitionException):
        transition(current, target, moderator=False)


def test_same_state_is_a_no_op():
    for status in ContentStatus:
        assert transition(status, status, moderator=False) == status


def test_terminal_states_have_no_way_out():
    for status in (SHARED, REJECTED):
        assert allowed_targets(status, moderator=True) == []
        assert allowed_targets(status, moderator=False) == []


def test_allowed_targets_split_by_path():
    assert allowed_targets(DRAFT, moderator=False) == [PENDING]
    assert set(allowed_targets(PENDING, moderator=True)) == {SHARED, REJECTED}


def test_new_content_starts_as_draft_or_pending():
    assert initial_status(DRAFT) == DRAFT
    assert initial_status(PENDING) == PENDING
    with pytest.raises(InvalidTransitionException):
        initial_status(SHARED)


def test_action_targets():
    assert ACTION_TARGETS[LifecycleAction.APPROVE] == SHARED
    assert ACTION_TARGETS[LifecycleAction.REJECT] == REJECTED
    assert ACTION_TARGETS[LifecycleAction.SUBMIT] == PENDING


def test_rejected_transition_lists_allowed_targets():
    with pytest.raises(InvalidTransitionException) as exc_info:
        transition(DRAFT, SHARED, moderator=False)
    assert exc_info.value.details["allowed"] == ["Pending"]
