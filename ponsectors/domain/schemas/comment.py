"""Pydantic schemas for Comment threads."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ponsectors.domain.enums import ContentKind
from ponsectors.domain.schemas.base import Entity


class Comment(Entity):
    parent_id: str
    parent_kind: ContentKind
    author_id: str
    text: str
    created_at: datetime
    reply_to_id: Optional[str] = None


class CommentCreate(BaseModel):
    parent_id: str
    parent_kind: ContentKind = ContentKind.PROJECT
    text: str = Field(min_length=1)
    reply_to_id: Optional[str] = None


class CommentNode(BaseModel):
    comment: Comment
    replies: List["CommentNode"] = []
