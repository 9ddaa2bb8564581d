"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from ponsectors.domain.constants import SUBTYPES_BY_STAKEHOLDER
from ponsectors.domain.enums import StakeholderType, UserRole
from ponsectors.domain.schemas.base import Entity
from ponsectors.domain.schemas.project import check_country


def check_subtype(stakeholder_type: StakeholderType, subtype: Optional[str]) -> Optional[str]:
    if subtype and subtype not in SUBTYPES_BY_STAKEHOLDER[stakeholder_type.value]:
        raise ValueError(f"{subtype} is not a subtype of {stakeholder_type.value}")
    return subtype


class User(Entity):
    email: str
    name: str
    stakeholder_type: StakeholderType = StakeholderType.INDIVIDUAL
    subtype: Optional[str] = None
    country: str = ""
    city: str = ""
    focus_areas: List[str] = []
    about: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.STANDARD
    is_verified: bool = False
    joined_at: datetime
    saved_project_ids: List[str] = []


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    stakeholder_type: StakeholderType = StakeholderType.INDIVIDUAL
    subtype: Optional[str] = None
    country: str = ""
    city: str = ""
    focus_areas: List[str] = []
    about: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("country")
    @classmethod
    def validate_country(cls, value):
        return check_country(value)

    @model_validator(mode="after")
    def validate_subtype(self):
        check_subtype(self.stakeholder_type, self.subtype)
        return self


class UserProfileUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    stakeholder_type: Optional[StakeholderType] = None
    subtype: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    focus_areas: Optional[List[str]] = None
    about: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("country")
    @classmethod
    def validate_country(cls, value):
        return check_country(value)


class RoleUpdate(BaseModel):
    role: UserRole


class LoginRequest(BaseModel):
    email: str
    password: str


class SessionRead(BaseModel):
    """Authenticated session: the stored user plus the role actually in force."""

    user: User
    effective_role: UserRole


class TokenResponse(SessionRead):
    access_token: str
    token_type: str = "bearer"
