"""Comment model — maps to the 'comments' table."""

from sqlalchemy import Column, Integer, String, Text, DateTime

from ponsectors.domain.enums import ContentKind
from ponsectors.domain.models.columns import enum_column_type
from ponsectors.infrastructure.database import Base


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(String(32), primary_key=True)
    parent_id = Column(String(32), nullable=False, index=True)
    parent_kind = Column(enum_column_type(ContentKind), nullable=False)
    author_id = Column(String(32), nullable=False, index=True)
    text = Column(Text, nullable=False)
    reply_to_id = Column(String(32), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    version = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Comment {self.id} on {self.parent_id}>"
