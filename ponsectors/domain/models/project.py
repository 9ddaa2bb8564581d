"""Project domain model — maps to the 'projects' table.

Collaborators, join requests and attachments are embedded JSON documents.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from ponsectors.domain.enums import ContentStatus, Visibility
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class ProjectModel(Base):
    __tablename__ = "projects"

    id = Column(String(32), primary_key=True)
    title = Column(String(300), nullable=False)
    description = Column(Text, nullable=False)
    thematic_area = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False, index=True)
    city = Column(String(100), nullable=False, default="")
    owner_id = Column(String(32), nullable=False, index=True)
    collaborators = Column(JSON, nullable=False, default=list)
    status = Column(enum_column_type(ContentStatus), nullable=False, index=True)
    attachments = Column(JSON, nullable=False, default=list)
    join_requests = Column(JSON, nullable=False, default=list)
    visibility = Column(enum_column_type(Visibility), nullable=False, default=Visibility.PUBLIC)
    comment_count = Column(Integer, nullable=False, default=0)
    save_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Project {self.id} - {self.title}>"
