"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ponsectors.core.concurrency import mutate_entity
from ponsectors.core.exceptions import EmailAlreadyRegisteredException
from ponsectors.domain.models.user import UserModel
from ponsectors.domain.repositories.user_repository import UserRepository
from ponsectors.domain.schemas.auth import User
from ponsectors.infrastructure.database import backend_errors
from ponsectors.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[UserModel, User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    json_fields = ("focus_areas", "saved_project_ids")

    def __init__(self, db: Session):
        super().__init__(db, UserModel, User)

    def list(self) -> List[User]:
        with backend_errors(self.db):
            rows = self.db.query(UserModel).order_by(UserModel.joined_at.asc()).all()
        return [self._to_entity(r) for r in rows]

    def get_by_email(self, email: str) -> Optional[User]:
        with backend_errors(self.db):
            row = (
                self.db.query(UserModel)
                .filter(func.lower(UserModel.email) == email.strip().lower())
                .first()
            )
        return self._to_entity(row) if row else None

    def create(self, user: User, password_hash: str) -> User:
        if self.get_by_email(user.email):
            raise EmailAlreadyRegisteredException(details={"email": user.email})

        with backend_errors(self.db):
            row = UserModel(**self._to_columns(user), password_hash=password_hash)
            self.db.add(row)
            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise EmailAlreadyRegisteredException(details={"email": user.email}) from exc
            self.db.refresh(row)
        return self._to_entity(row)

    def get_password_hash(self, user_id: str) -> Optional[str]:
        with backend_errors(self.db):
            row = self.db.query(UserModel.password_hash).filter(UserModel.id == user_id).first()
        return row[0] if row else None

    def toggle_save(self, user_id: str, project_id: str) -> User:
        def flip(user: User) -> User:
            saved = list(user.saved_project_ids)
            if project_id in saved:
                saved.remove(project_id)
            else:
                saved.append(project_id)
            return user.with_changes(saved_project_ids=saved)

        return mutate_entity(self, user_id, flip)
