"""
SQLAlchemy Implementation of Comment Repository.
"""

from typing import List

from sqlalchemy.orm import Session

from ponsectors.domain.models.comment import CommentModel
from ponsectors.domain.repositories.comment_repository import CommentRepository
from ponsectors.domain.schemas.comment import Comment
from ponsectors.infrastructure.database import backend_errors
from ponsectors.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCommentRepository(SQLAlchemyRepository[CommentModel, Comment], CommentRepository):
    def __init__(self, db: Session):
        super().__init__(db, CommentModel, Comment)

    def get_by_parent(self, parent_id: str) -> List[Comment]:
        with backend_errors(self.db):
            rows = (
                self.db.query(CommentModel)
                .filter(CommentModel.parent_id == parent_id)
                .order_by(CommentModel.created_at.asc())
                .all()
            )
        return [self._to_entity(r) for r in rows]

    def add(self, comment: Comment) -> Comment:
        return self.create(comment)

    def delete_by_parent(self, parent_id: str) -> int:
        with backend_errors(self.db):
            removed = (
                self.db.query(CommentModel)
                .filter(CommentModel.parent_id == parent_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        return removed
