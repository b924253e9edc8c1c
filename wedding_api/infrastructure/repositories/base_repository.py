"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from wedding_api.domain.repositories.base import BaseRepository
from wedding_api.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def create(self, obj_in: Any) -> ModelType:
        # Accepts a dict or a pydantic model
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump(exclude_unset=True)
        else:
            obj_data = obj_in

        db_obj = self.model(**obj_data)
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def update(self, db_obj: ModelType, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            update_data = obj_in.model_dump(exclude_unset=True)
        else:
            update_data = obj_in

        for field in update_data:
            if hasattr(db_obj, field):
                setattr(db_obj, field, update_data[field])

        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj
