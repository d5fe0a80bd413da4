"""
Base repository pattern implementation.

This module provides the persistence port used by the resource handlers.
Repositories wrap a SQLAlchemy session and expose single-row operations
keyed by the entity's identifier column.
"""

import logging
from abc import ABC
from typing import TypeVar, Generic, List, Optional, Any, Type
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

# Type variable for generic entity type
T = TypeVar('T')

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Base exception for repository operations."""
    pass


class NotFoundError(RepositoryError):
    """Exception raised when entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class DuplicateError(RepositoryError):
    """Exception raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, entity_id: Any):
        super().__init__(f"{entity_type} with id {entity_id} already exists")
        self.entity_type = entity_type
        self.entity_id = entity_id


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common database operations.

    Writes are split into two explicit capabilities: ``insert`` refuses an
    existing key, ``upsert`` inserts or overwrites.
    """

    id_column: str = "id"
    entity_name: Optional[str] = None

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize repository with database session and model class.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @property
    def entity_type(self) -> str:
        return self.entity_name or self.model.__name__

    def _id_attribute(self):
        return getattr(self.model, self.id_column)

    def identify(self, entity: T) -> Any:
        """Return the identifier value of an entity."""
        return getattr(entity, self.id_column)

    def get_by_id(self, entity_id: Any) -> T:
        """
        Get entity by ID.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity instance

        Raises:
            NotFoundError: If entity not found
        """
        entity = self.get_by_id_optional(entity_id)
        if entity is None:
            raise NotFoundError(self.entity_type, entity_id)
        return entity

    def get_by_id_optional(self, entity_id: Any) -> Optional[T]:
        """
        Get entity by ID, returning None if not found.

        Args:
            entity_id: Entity identifier

        Returns:
            Entity instance or None
        """
        return self.db.query(self.model).filter(
            self._id_attribute() == entity_id
        ).first()

    def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters
    ) -> List[T]:
        """
        List entities in store order with optional pagination and filters.
        """
        query = self.db.query(self.model)

        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)

        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        return query.all()

    def insert(self, entity: T) -> T:
        """
        Insert a new entity.

        Raises:
            DuplicateError: If an entity with the same identifier exists
            RepositoryError: If database operation fails
        """
        entity_id = self.identify(entity)

        if self.exists(entity_id):
            raise DuplicateError(self.entity_type, entity_id)

        try:
            self.db.add(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError(self.entity_type, entity_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"SQLAlchemyError in insert: {e}")
            raise RepositoryError(f"Failed to insert {self.entity_type}: {str(e)}")

    def upsert(self, entity: T) -> T:
        """
        Insert the entity if its identifier is absent, otherwise overwrite
        the stored row with the entity's values.

        Returns:
            The stored entity

        Raises:
            DuplicateError: If a changed identifier collides with another row
            RepositoryError: If database operation fails
        """
        entity_id = self.identify(entity)

        try:
            if entity not in self.db:
                entity = self.db.merge(entity)
            self.db.commit()
            self.db.refresh(entity)
            return entity
        except IntegrityError:
            self.db.rollback()
            raise DuplicateError(self.entity_type, entity_id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"SQLAlchemyError in upsert: {e}")
            raise RepositoryError(f"Failed to save {self.entity_type}: {str(e)}")

    def delete(self, entity: T) -> None:
        """
        Delete a stored entity.

        Raises:
            RepositoryError: If deletion fails
        """
        try:
            self.db.delete(entity)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"SQLAlchemyError in delete: {e}")
            raise RepositoryError(f"Failed to delete {self.entity_type}: {str(e)}")

    def exists(self, entity_id: Any) -> bool:
        """Check if entity exists by ID."""
        return self.db.query(self.model).filter(
            self._id_attribute() == entity_id
        ).count() > 0

    def find_by(self, **criteria) -> List[T]:
        """
        Find entities by multiple criteria.

        Args:
            **criteria: Search criteria as keyword arguments

        Returns:
            List of matching entities
        """
        query = self.db.query(self.model)

        for key, value in criteria.items():
            if hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)

        return query.all()

    def count(self, **criteria) -> int:
        query = self.db.query(self.model)

        for key, value in criteria.items():
            if hasattr(self.model, key):
                query = query.filter(getattr(self.model, key) == value)

        return query.count()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        self.db.rollback()
