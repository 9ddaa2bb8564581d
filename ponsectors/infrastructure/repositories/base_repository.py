"""
SQLAlchemy implementation of the Base Repository.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ponsectors.core.clock import tz
from ponsectors.core.exceptions import ConcurrentUpdateException, EntityNotFoundException
from ponsectors.infrastructure.database import Base, backend_errors

ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType", bound=BaseModel)


class SQLAlchemyRepository(Generic[ModelType, EntityType]):
    """Generic repository mapping SQLAlchemy rows to pydantic entities."""

    # Embedded documents stored in JSON columns
    json_fields: tuple = ()

    def __init__(self, db: Session, model: Type[ModelType], schema: Type[EntityType]):
        self.db = db
        self.model = model
        self.schema = schema

    def _to_entity(self, row: ModelType) -> EntityType:
        entity = self.schema.model_validate(row)
        # SQLite drops the offset; stored values are wall-clock in the app timezone
        naive = {
            name: tz.localize(value)
            for name, value in entity
            if isinstance(value, datetime) and value.tzinfo is None
        }
        return entity.model_copy(update=naive) if naive else entity

    def _to_columns(self, entity: EntityType) -> Dict[str, Any]:
        data = {
            name: value.astimezone(tz) if isinstance(value, datetime) and value.tzinfo else value
            for name, value in entity.model_dump(exclude=set(self.json_fields)).items()
        }
        if self.json_fields:
            data.update(entity.model_dump(mode="json", include=set(self.json_fields)))
        return data

    def get_by_id(self, id: str) -> Optional[EntityType]:
        with backend_errors(self.db):
            row = self.db.get(self.model, id)
        return self._to_entity(row) if row else None

    def list(self) -> List[EntityType]:
        with backend_errors(self.db):
            rows = self.db.query(self.model).order_by(self.model.created_at.desc()).all()
        return [self._to_entity(r) for r in rows]

    def create(self, entity: EntityType) -> EntityType:
        with backend_errors(self.db):
            row = self.model(**self._to_columns(entity))
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return self._to_entity(row)

    def update(self, entity: EntityType) -> EntityType:
        values = self._to_columns(entity)
        values.pop("id")
        values["version"] = entity.version + 1

        with backend_errors(self.db):
            matched = (
                self.db.query(self.model)
                .filter(self.model.id == entity.id, self.model.version == entity.version)
                .update(values, synchronize_session=False)
            )
            self.db.commit()

        if not matched:
            if self.get_by_id(entity.id) is None:
                raise EntityNotFoundException(details={"id": entity.id})
            raise ConcurrentUpdateException(details={"id": entity.id, "version": entity.version})
        return self.get_by_id(entity.id)

    def delete(self, id: str) -> None:
        with backend_errors(self.db):
            row = self.db.get(self.model, id)
            if row is None:
                raise EntityNotFoundException(details={"id": id})
            self.db.delete(row)
            self.db.commit()
