"""Pydantic schemas for the admin moderation console."""

from datetime import datetime
from typing import Union

from pydantic import BaseModel

from ponsectors.domain.enums import ContentKind, ContentStatus
from ponsectors.domain.schemas.funding import FundingOpportunity
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.project import Project

ContentItem = Union[Project, Insight, FundingOpportunity]


class ModerationItem(BaseModel):
    kind: ContentKind
    id: str
    title: str
    owner_id: str
    status: ContentStatus
    created_at: datetime


class ModerationResult(BaseModel):
    kind: ContentKind
    item: ContentItem
    changed: bool


class AdminStats(BaseModel):
    total_users: int
    total_projects: int
    total_insights: int
    total_funding: int
    pending_projects: int
    pending_insights: int
    pending_funding: int
    total_pending: int
