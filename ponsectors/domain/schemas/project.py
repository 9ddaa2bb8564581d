"""Pydantic schemas for Project domain."""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ponsectors.domain.constants import COUNTRIES, THEMATIC_AREAS
from ponsectors.domain.enums import (
    CollaboratorRole,
    CollaboratorStatus,
    ContentKind,
    ContentStatus,
    Visibility,
)
from ponsectors.domain.schemas.base import Entity

SUBMITTABLE_STATUSES = (ContentStatus.DRAFT, ContentStatus.PENDING)


def check_initial_status(value: Optional[ContentStatus]) -> Optional[ContentStatus]:
    if value is not None and value not in SUBMITTABLE_STATUSES:
        raise ValueError("status must be Draft or Pending")
    return value


def check_thematic_area(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in THEMATIC_AREAS:
        raise ValueError(f"unknown thematic area: {value}")
    return value


def check_country(value: Optional[str]) -> Optional[str]:
    # Empty means not provided
    if value and value not in COUNTRIES:
        raise ValueError(f"unknown country: {value}")
    return value


class Collaborator(BaseModel):
    user_id: str
    role: CollaboratorRole = CollaboratorRole.COLLABORATOR
    status: CollaboratorStatus = CollaboratorStatus.ACTIVE

    model_config = {"from_attributes": True}


class Attachment(BaseModel):
    name: str
    url: str
    type: str = ""
    size: Optional[int] = None

    model_config = {"from_attributes": True}


class Project(Entity):
    kind: ClassVar[ContentKind] = ContentKind.PROJECT

    title: str
    description: str
    thematic_area: str
    country: str
    city: str = ""
    owner_id: str
    collaborators: List[Collaborator] = []
    status: ContentStatus
    attachments: List[Attachment] = []
    created_at: datetime
    updated_at: datetime
    join_requests: List[str] = []
    visibility: Visibility = Visibility.PUBLIC
    comment_count: int = 0
    save_count: int = 0

    @property
    def owner_user_id(self) -> str:
        return self.owner_id

    @model_validator(mode="after")
    def normalize_membership(self):
        # Owner first and exactly once; one entry per user; join requests deduplicated
        entries = [Collaborator(user_id=self.owner_id, role=CollaboratorRole.OWNER)]
        seen = {self.owner_id}
        for entry in self.collaborators:
            if entry.user_id in seen:
                continue
            seen.add(entry.user_id)
            if entry.role == CollaboratorRole.OWNER:
                entry = entry.model_copy(update={"role": CollaboratorRole.COLLABORATOR})
            entries.append(entry)
        self.collaborators = entries
        self.join_requests = list(dict.fromkeys(self.join_requests))
        return self


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    thematic_area: str
    country: str
    city: str = ""
    visibility: Visibility = Visibility.PUBLIC
    attachments: List[Attachment] = []
    status: ContentStatus

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return check_initial_status(value)

    @field_validator("thematic_area")
    @classmethod
    def validate_thematic_area(cls, value):
        return check_thematic_area(value)

    @field_validator("country")
    @classmethod
    def validate_country(cls, value):
        return check_country(value)


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    thematic_area: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    visibility: Optional[Visibility] = None
    attachments: Optional[List[Attachment]] = None
    status: Optional[ContentStatus] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return check_initial_status(value)

    @field_validator("thematic_area")
    @classmethod
    def validate_thematic_area(cls, value):
        return check_thematic_area(value)

    @field_validator("country")
    @classmethod
    def validate_country(cls, value):
        return check_country(value)


class InviteRequest(BaseModel):
    email: str = Field(min_length=3)


class JoinRequestResult(BaseModel):
    project: Project
    already_requested: bool
