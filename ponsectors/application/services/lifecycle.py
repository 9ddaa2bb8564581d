"""Content lifecycle state machine shared by projects, insights and funding.

    Draft ──submit──▶ Pending ──approve──▶ Shared
                         │
                         └────reject────▶ Rejected

Shared and Rejected are terminal.
"""

import enum
from typing import Dict, List, Tuple

from ponsectors.core.exceptions import ForbiddenException, InvalidTransitionException
from ponsectors.domain.enums import ContentStatus


class LifecycleAction(str, enum.Enum):
    SUBMIT = "submit"
    APPROVE = "approve"
    REJECT = "reject"


TRANSITIONS: Dict[Tuple[ContentStatus, ContentStatus], LifecycleAction] = {
    (ContentStatus.DRAFT, ContentStatus.PENDING): LifecycleAction.SUBMIT,
    (ContentStatus.PENDING, ContentStatus.SHARED): LifecycleAction.APPROVE,
    (ContentStatus.PENDING, ContentStatus.REJECTED): LifecycleAction.REJECT,
}

MODERATOR_ACTIONS = frozenset({LifecycleAction.APPROVE, LifecycleAction.REJECT})

INITIAL_STATUSES = (ContentStatus.DRAFT, ContentStatus.PENDING)

ACTION_TARGETS = {action: target for (_, target), action in TRANSITIONS.items()}


def initial_status(requested: ContentStatus) -> ContentStatus:
    """New content starts as Draft or Pending, chosen explicitly by the caller."""
    if requested not in INITIAL_STATUSES:
        raise InvalidTransitionException(
            f"New content cannot start as {requested.value}",
            details={"status": requested.value},
        )
    return requested


def transition(current: ContentStatus, target: ContentStatus, *, moderator: bool) -> ContentStatus:
    """Validate ``current -> target``; same-state requests are no-ops.

    ``moderator`` selects the admin path (approve/reject) versus the owner
    path (submit); each edge belongs to exactly one of them.
    """
    if current == target:
        return current

    action = TRANSITIONS.get((current, target))
    if action is None:
        raise InvalidTransitionException(
            f"Cannot move from {current.value} to {target.value}",
            details={
                "from": current.value,
                "to": target.value,
                "allowed": [t.value for t in allowed_targets(current, moderator=moderator)],
            },
        )
    if (action in MODERATOR_ACTIONS) != moderator:
        raise ForbiddenException(f"'{action.value}' is not allowed here")
    return target


def allowed_targets(current: ContentStatus, *, moderator: bool) -> List[ContentStatus]:
    return [
        target
        for (source, target), action in TRANSITIONS.items()
        if source == current and (action in MODERATOR_ACTIONS) == moderator
    ]
