"""SQLAlchemy backend against an in-memory SQLite database."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import (
    BackendUnavailableException,
    ConcurrentUpdateException,
    EmailAlreadyRegisteredException,
    EntityNotFoundException,
)
from ponsectors.domain.enums import ContentKind, ContentStatus, UserRole
from ponsectors.domain.schemas.auth import User
from ponsectors.domain.schemas.comment import Comment
from ponsectors.domain.schemas.project import Attachment, Collaborator, Project
from ponsectors.application.services.auth_service import create_access_token
from ponsectors.infrastructure.database import Base
from ponsectors.infrastructure.repositories.store import SQLAlchemyStore
from ponsectors.interfaces.deps import get_store

# Register every table on Base.metadata
import ponsectors.main

NOW = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def sql_store(session_factory):
    db = session_factory()
    yield SQLAlchemyStore(db)
    db.close()


def make_user(uid, email):
    return User(id=uid, email=email, name=uid.title(), joined_at=NOW)


def make_project(pid="p1", owner="u1"):
    return Project(
        id=pid,
        title="Irrigation pilot",
        description="Drip irrigation for smallholders",
        thematic_area="Agriculture and Food Security",
        country="Rwanda",
        owner_id=owner,
        status=ContentStatus.PENDING,
        attachments=[Attachment(name="plan.pdf", url="https://files.example.com/plan.pdf", type="application/pdf")],
        created_at=NOW,
        updated_at=NOW,
    )


def test_user_create_and_lookup(sql_store):
    sql_store.users.create(make_user("u1", "amir@example.com"), "hash")

    found = sql_store.users.get_by_email("AMIR@Example.com")
    assert found.id == "u1"
    assert found.role == UserRole.STANDARD
    assert sql_store.users.get_password_hash("u1") == "hash"


def test_duplicate_email(sql_store):
    sql_store.users.create(make_user("u1", "amir@example.com"), "hash")
    with pytest.raises(EmailAlreadyRegisteredException):
        sql_store.users.create(make_user("u2", "amir@example.com"), "hash")


def test_embedded_documents_round_trip(sql_store):
    sql_store.projects.create(
        make_project().with_changes(collaborators=[Collaborator(user_id="u2")], join_requests=["u3"])
    )

    stored = sql_store.projects.get_by_id("p1")
    assert [c.user_id for c in stored.collaborators] == ["u1", "u2"]
    assert stored.join_requests == ["u3"]
    assert stored.attachments[0].name == "plan.pdf"
    assert stored.status == ContentStatus.PENDING
    assert stored.version == 0


def test_update_bumps_version(sql_store):
    created = sql_store.projects.create(make_project())
    updated = sql_store.projects.update(created.with_changes(title="Irrigation pilot v2"))
    assert updated.version == 1
    assert updated.title == "Irrigation pilot v2"


def test_stale_write_is_rejected(session_factory):
    first, second = SQLAlchemyStore(session_factory()), SQLAlchemyStore(session_factory())
    first.projects.create(make_project())

    mine = first.projects.get_by_id("p1")
    theirs = second.projects.get_by_id("p1")
    second.projects.update(theirs.with_changes(join_requests=["u9"]))

    with pytest.raises(ConcurrentUpdateException):
        first.projects.update(mine.with_changes(join_requests=["u8"]))

    # A retried read-modify-write keeps both additions
    merged = mutate_entity(
        first.projects, "p1", lambda p: p.with_changes(join_requests=[*p.join_requests, "u8"])
    )
    assert merged.join_requests == ["u9", "u8"]

    first.db.close()
    second.db.close()


def test_update_of_missing_row(sql_store):
    with pytest.raises(EntityNotFoundException):
        sql_store.projects.update(make_project("ghost"))


def test_toggle_save(sql_store):
    sql_store.users.create(make_user("u1", "amir@example.com"), "hash")
    assert sql_store.users.toggle_save("u1", "p1").saved_project_ids == ["p1"]
    assert sql_store.users.toggle_save("u1", "p1").saved_project_ids == []


def test_comments_by_parent(sql_store):
    for i, cid in enumerate(["c1", "c2"]):
        sql_store.comments.add(
            Comment(
                id=cid,
                parent_id="p1",
                parent_kind=ContentKind.PROJECT,
                author_id="u1",
                text=f"comment {i}",
                created_at=NOW.replace(minute=i),
            )
        )

    assert [c.id for c in sql_store.comments.get_by_parent("p1")] == ["c1", "c2"]
    assert sql_store.comments.delete_by_parent("p1") == 2
    assert sql_store.comments.get_by_parent("p1") == []


def test_timestamps_come_back_timezone_aware(sql_store):
    sql_store.users.create(make_user("u1", "amir@example.com"), "hash")
    sql_store.projects.create(make_project())

    project = sql_store.projects.get_by_id("p1")
    assert project.created_at.tzinfo is not None
    assert project.created_at == NOW
    assert sql_store.users.get_by_id("u1").joined_at.tzinfo is not None
    assert all(p.updated_at.tzinfo is not None for p in sql_store.projects.list())


@pytest.fixture
def unreachable_store(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'ponsectors.db'}")
    db = sessionmaker(bind=engine)()
    yield SQLAlchemyStore(db)
    db.close()
    engine.dispose()


def test_unreachable_database_raises_backend_unavailable(unreachable_store):
    with pytest.raises(BackendUnavailableException):
        unreachable_store.users.get_by_id("u1")


def test_unreachable_database_returns_503(unreachable_store):
    app = ponsectors.main.app
    app.dependency_overrides[get_store] = lambda: unreachable_store
    try:
        response = TestClient(app).get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {create_access_token({'sub': 'u1'})}"},
        )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "BackendUnavailableException"
