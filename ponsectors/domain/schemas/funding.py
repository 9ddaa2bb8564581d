"""Pydantic schemas for Funding Opportunity domain."""

from datetime import date, datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, Field, field_validator

from ponsectors.domain.enums import ContentKind, ContentStatus
from ponsectors.domain.schemas.base import Entity
from ponsectors.domain.schemas.project import check_initial_status


class FundingOpportunity(Entity):
    kind: ClassVar[ContentKind] = ContentKind.FUNDING

    title: str
    description: str
    deadline: date
    eligibility: str = ""
    application_info: str = ""
    owner_id: str
    status: ContentStatus
    created_at: datetime
    updated_at: datetime

    @property
    def owner_user_id(self) -> str:
        return self.owner_id


class FundingCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    deadline: date
    eligibility: str = ""
    application_info: str = ""
    status: ContentStatus

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return check_initial_status(value)


class FundingUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    deadline: Optional[date] = None
    eligibility: Optional[str] = None
    application_info: Optional[str] = None
    status: Optional[ContentStatus] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value):
        return check_initial_status(value)
