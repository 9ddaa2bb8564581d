"""Admin moderation queue, approve/reject and stats."""

from datetime import date

import pytest

from ponsectors.application.services import content_service, moderation_service, user_service
from ponsectors.application.services.lifecycle import LifecycleAction
from ponsectors.core.exceptions import ForbiddenException, InvalidTransitionException
from ponsectors.domain.enums import ContentKind, ContentStatus, NotificationType, UserRole
from ponsectors.domain.schemas.funding import FundingCreate
from ponsectors.domain.schemas.insight import InsightCreate
from ponsectors.domain.schemas.project import ProjectCreate, ProjectUpdate


@pytest.fixture
def admin(make_actor):
    return make_actor("Moderator", role=UserRole.ADMIN)


@pytest.fixture
def premium(make_actor):
    return make_actor("Funder", role=UserRole.PREMIUM)


def new_project(store, actor, status="Pending"):
    return content_service.create_project(
        store,
        actor,
        ProjectCreate(
            title="Mobile clinics",
            description="Health vans for rural districts",
            thematic_area="Health and Well-being",
            country="Uganda",
            status=status,
        ),
    )


def test_queue_lists_pending_by_kind(store, make_actor, admin, premium):
    owner = make_actor("Owner")
    new_project(store, owner)
    new_project(store, owner, status="Draft")
    content_service.create_insight(store, owner, InsightCreate(title="Note", description="Text", status="Pending"))
    content_service.create_funding(
        store, premium, FundingCreate(title="Grant", description="Seed", deadline=date(2030, 1, 1), status="Pending")
    )

    queue = moderation_service.get_queue(store, admin)
    assert [i.kind for i in queue] == [ContentKind.PROJECT, ContentKind.INSIGHT, ContentKind.FUNDING]
    assert all(i.status == ContentStatus.PENDING for i in queue)


def test_queue_is_admin_only(store, make_actor):
    with pytest.raises(ForbiddenException):
        moderation_service.get_queue(store, make_actor("Owner"))


def test_approve_shares_and_notifies(store, make_actor, admin):
    owner = make_actor("Owner")
    project = new_project(store, owner)

    result = moderation_service.moderate(store, admin, ContentKind.PROJECT, project.id, LifecycleAction.APPROVE)

    assert result.changed is True
    assert result.item.status == ContentStatus.SHARED
    notes = store.notifications.get_by_user(owner.id)
    assert [n.type for n in notes] == [NotificationType.CONTENT_APPROVED]
    assert "Mobile clinics" in notes[0].message


def test_second_decision_is_a_no_op(store, make_actor, admin):
    project = new_project(store, make_actor("Owner"))
    moderation_service.moderate(store, admin, ContentKind.PROJECT, project.id, LifecycleAction.REJECT)

    again = moderation_service.moderate(store, admin, ContentKind.PROJECT, project.id, LifecycleAction.APPROVE)

    assert again.changed is False
    assert again.item.status == ContentStatus.REJECTED


def test_draft_is_not_moderated(store, make_actor, admin):
    project = new_project(store, make_actor("Owner"), status="Draft")
    result = moderation_service.moderate(store, admin, ContentKind.PROJECT, project.id, LifecycleAction.APPROVE)
    assert result.changed is False
    assert result.item.status == ContentStatus.DRAFT


def test_owner_cannot_moderate(store, make_actor):
    owner = make_actor("Owner")
    project = new_project(store, owner)
    with pytest.raises(ForbiddenException):
        moderation_service.moderate(store, owner, ContentKind.PROJECT, project.id, LifecycleAction.APPROVE)


def test_submit_then_resubmit_after_share_is_invalid(store, make_actor, admin):
    owner = make_actor("Owner")
    project = new_project(store, owner, status="Draft")
    submitted = content_service.submit_content(store, owner, ContentKind.PROJECT, project.id)
    assert submitted.status == ContentStatus.PENDING

    moderation_service.moderate(store, admin, ContentKind.PROJECT, project.id, LifecycleAction.APPROVE)

    with pytest.raises(InvalidTransitionException):
        content_service.update_content(
            store, owner, ContentKind.PROJECT, project.id, ProjectUpdate(status="Pending")
        )


def test_standard_user_cannot_post_funding(store, make_actor):
    with pytest.raises(ForbiddenException):
        content_service.create_funding(
            store,
            make_actor("Owner"),
            FundingCreate(title="Grant", description="Seed", deadline=date(2030, 1, 1), status="Draft"),
        )


def test_role_assignment_and_stats(store, make_actor, admin):
    member = make_actor("Member")
    new_project(store, member)

    promoted = user_service.assign_role(store, admin, member.id, UserRole.PREMIUM)
    assert promoted.role == UserRole.PREMIUM

    with pytest.raises(ForbiddenException):
        user_service.assign_role(store, member, admin.id, UserRole.STANDARD)

    stats = moderation_service.get_stats(store, admin)
    assert stats.total_users == 2
    assert stats.total_projects == 1
    assert stats.pending_projects == 1
    assert stats.total_pending == 1
