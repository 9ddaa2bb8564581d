"""Pydantic schemas for Insight domain."""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import BaseModel, Field, field_validator

from ponsectors.domain.enums import ContentKind, ContentStatus
from ponsectors.domain.schemas.base import Entity
from ponsectors.domain.schemas.project import Attachment, check_initial_status, check_thematic_area


class Insight(Entity):
    kind: ClassVar[ContentKind] = ContentKind.INSIGHT

    title: str
    description: str
    thematic_area: Optional[str] = None
    author_id: str
    status: ContentStatus
    attachments: List[Attachment] = []
    created_at: datetime
    updated_at: datetime
    comment_count: int = 0

    @property
    def owner_user_id(self) -> str:
        return self.author_id


class InsightCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    thematic_area: Optional[str] = None
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


class InsightUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    thematic_area: Optional[str] = None
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
