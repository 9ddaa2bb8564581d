"""Insight domain model — maps to the 'insights' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from ponsectors.domain.enums import ContentStatus
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class InsightModel(Base):
    __tablename__ = "insights"

    id = Column(String(32), primary_key=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    thematic_area = Column(String(100), nullable=True)
    author_id = Column(String(32), nullable=False, index=True)
    status = Column(enum_column_type(ContentStatus), nullable=False, index=True)
    attachments = Column(JSON, nullable=False, default=list)
    comment_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Insight {self.id} - {self.title}>"
