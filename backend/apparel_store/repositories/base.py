"""
Base Repository - shared CRUD for SQLAlchemy models

Every entity repository extends this class and only adds its own queries.
Insert and update are separate operations; the caller decides which one
applies.
"""
import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from apparel_store.core.exceptions import ConcurrencyConflictError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


def contains_pattern(value: str) -> str:
    """Build a LIKE pattern matching `value` as a literal substring"""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SqlAlchemyRepository(Generic[ModelT]):
    """
    Generic repository bound to one SQLAlchemy session

    Subclasses set `model` and `entity_name`.
    """

    model: Type[ModelT]
    entity_name: str = "Entity"

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Find entity by ID

        Args:
            entity_id: Internal ID

        Returns:
            Entity or None if not found
        """
        return self.db.get(self.model, entity_id)

    def find_all(self) -> List[ModelT]:
        """Return every row, ordered by ID"""
        return list(self.db.scalars(select(self.model).order_by(self.model.id)).all())

    def exists_by_id(self, entity_id: int) -> bool:
        total = self.db.scalar(
            select(func.count()).select_from(self.model).where(self.model.id == entity_id)
        )
        return bool(total)

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(self.model))

    def insert(self, entity: ModelT) -> ModelT:
        """
        Insert a new entity

        Identity, version and timestamps are assigned by the database on
        flush.

        Raises:
            ValueError if the entity already has an identity
        """
        if entity.id is not None:
            raise ValueError(f"{self.entity_name} already has id {entity.id}; use update()")

        self.db.add(entity)
        self.db.flush()
        logger.debug(f"Inserted {self.entity_name} id={entity.id}")
        return entity

    def update(self, entity: ModelT, expected_version: Optional[int] = None) -> ModelT:
        """
        Persist changes made to a loaded entity

        The flush issues `UPDATE ... WHERE id = :id AND version = :version`
        and increments the version, so a row changed by another transaction
        since it was loaded is detected.

        Args:
            entity: Entity loaded through this repository's session
            expected_version: Version the caller based its changes on (optional)

        Returns:
            The updated entity

        Raises:
            ConcurrencyConflictError: expected_version is stale or the row
                changed underneath this transaction
        """
        if entity.id is None:
            raise ValueError(f"{self.entity_name} has no id; use insert()")

        if expected_version is not None and expected_version != entity.version:
            raise ConcurrencyConflictError(
                self.entity_name, entity.id,
                expected_version=expected_version,
                current_version=entity.version,
            )

        # A failed flush rolls the session back; the entity must not be read afterwards
        entity_id = entity.id
        loaded_version = entity.version

        try:
            self.db.flush()
        except StaleDataError as e:
            raise ConcurrencyConflictError(
                self.entity_name, entity_id,
                expected_version=expected_version if expected_version is not None else loaded_version,
            ) from e

        logger.debug(f"Updated {self.entity_name} id={entity.id} version={entity.version}")
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.flush()

    def delete_by_id(self, entity_id: Any) -> None:
        """Delete by ID; does nothing when the row does not exist"""
        entity = self.find_by_id(entity_id)
        if entity is None:
            return
        self.delete(entity)

    def delete_all(self) -> None:
        """Delete every row through the ORM so cascades apply"""
        for entity in self.find_all():
            self.db.delete(entity)
        self.db.flush()
