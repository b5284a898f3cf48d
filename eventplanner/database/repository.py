"""Repository layer for database operations.

`CrudRepository` wraps a SQLAlchemy session for one table and exchanges
Pydantic models with callers. Entity-specific repositories add their own
finders on top.
"""

import logging
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from eventplanner.exceptions import (
    ConflictError,
    EntityDeleteError,
    EntityNotFoundError,
    EntitySaveError,
    EntityUpdateError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class CrudRepository(Generic[M]):
    """Generic create/find/update/delete by primary key."""

    db_model: Any = None
    entity_name: str = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def _apply(self, row, model: M) -> None:
        """Copy mutable fields from model onto an existing row."""
        row.apply(model)

    def _conflict_message(self, model: M) -> str:
        return f"{self.entity_name} conflicts with an existing record"

    def find_all(self) -> List[M]:
        rows = self.db.query(self.db_model).order_by(self.db_model.id).all()
        return [row.to_pydantic() for row in rows]

    def find_by_id(self, entity_id: int) -> Optional[M]:
        row = self.db.get(self.db_model, entity_id)
        return row.to_pydantic() if row else None

    def find_or_throw(self, entity_id: int) -> M:
        found = self.find_by_id(entity_id)
        if found is None:
            raise EntityNotFoundError(f"{self.entity_name} with id {entity_id} not found")
        return found

    def create(self, model: M) -> M:
        """Insert a new row and return it with its allocated id."""
        try:
            row = self.db_model.from_pydantic(model)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
            logger.debug(f"Created {self.entity_name} {row.id}")
            return row.to_pydantic()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity violation creating {self.entity_name}: {e.orig}")
            raise ConflictError(self._conflict_message(model), e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create {self.entity_name}: {type(e).__name__}: {str(e)}")
            raise EntitySaveError(f"Failed to save {self.entity_name}", e) from e

    def update(self, model: M) -> M:
        """Write model's fields onto the stored row with the same id."""
        row = self.db.get(self.db_model, model.id)
        if row is None:
            raise EntityNotFoundError(f"{self.entity_name} with id {model.id} not found")
        try:
            self._apply(row, model)
            self.db.commit()
            self.db.refresh(row)
            logger.debug(f"Updated {self.entity_name} {row.id}")
            return row.to_pydantic()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Integrity violation updating {self.entity_name} {model.id}: {e.orig}")
            raise ConflictError(self._conflict_message(model), e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update {self.entity_name} {model.id}: {type(e).__name__}: {str(e)}")
            raise EntityUpdateError(f"Failed to update {self.entity_name} with id {model.id}", e) from e

    def delete(self, model: M) -> None:
        row = self.db.get(self.db_model, model.id)
        if row is None:
            raise EntityNotFoundError(f"{self.entity_name} with id {model.id} not found")
        try:
            self.db.delete(row)
            self.db.commit()
            logger.debug(f"Deleted {self.entity_name} {model.id}")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete {self.entity_name} {model.id}: {type(e).__name__}: {str(e)}")
            raise EntityDeleteError(f"Failed to delete {self.entity_name} with id {model.id}", e) from e
