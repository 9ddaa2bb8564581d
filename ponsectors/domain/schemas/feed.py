"""Pydantic schemas for the home feed."""

from datetime import datetime
from typing import Union

from pydantic import BaseModel

from ponsectors.domain.enums import ContentKind
from ponsectors.domain.schemas.insight import Insight
from ponsectors.domain.schemas.project import Project


class FeedItem(BaseModel):
    kind: ContentKind
    item: Union[Project, Insight]
    created_at: datetime
