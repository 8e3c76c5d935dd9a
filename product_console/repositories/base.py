"""
Generic SQLAlchemy repository.

Thin data access primitives over a session; every mutation commits its own
transaction and rolls back when the commit fails for any reason, so the
session stays usable.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from product_console.db.database import Base


# Module logger
logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """
    Add/remove/query/update primitives for one ORM model.

    Subclasses set ``model``.

    Example:
        >>> class ProductsRepository(Repository[Product]):
        ...     model = Product
        >>> repo = ProductsRepository(session)
        >>> repo.get("AB12C")
    """

    model: Type[ModelT]

    def __init__(self, db: Session) -> None:
        self._db = db

    @property
    def session(self) -> Session:
        return self._db

    # =========================================================================
    # QUERIES
    # =========================================================================

    def all(self) -> List[ModelT]:
        return self._db.query(self.model).all()

    def get(self, key: Any) -> Optional[ModelT]:
        """Look up a row by primary key."""
        return self._db.get(self.model, key)

    def filter_by(self, **criteria: Any) -> List[ModelT]:
        return self._db.query(self.model).filter_by(**criteria).all()

    def count(self) -> int:
        return self._db.query(self.model).count()

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    def add(self, entity: ModelT) -> ModelT:
        self._db.add(entity)
        self._commit()
        self._db.refresh(entity)
        return entity

    def update(self, entity: ModelT) -> ModelT:
        """Persist pending changes on an entity tracked by this session."""
        self._commit()
        self._db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self._db.delete(entity)
        self._commit()

    def rollback(self) -> None:
        """Discard uncommitted changes; tracked entities reload on next access."""
        self._db.rollback()

    def _commit(self) -> None:
        try:
            self._db.commit()
        except Exception as e:
            self._db.rollback()
            logger.error(f"{self.model.__name__} commit failed: {type(e).__name__}: {e}")
            raise
