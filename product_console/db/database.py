"""
==============================================================================
Database Connection Management Module
==============================================================================

Engine and session handling for the products store.

This module implements:
- Base: declarative base shared by the ORM models
- DatabaseManager: owns one engine and its session factory
- get_database_manager / get_db: process-wide manager and FastAPI dependency

Engine selection:
----------------
    sqlite file    -> default pool, check_same_thread disabled
    sqlite memory  -> StaticPool, every session sees the same database
    anything else  -> QueuePool sized from DB_POOL_* settings

FastAPI runs sync dependencies in a thread pool, which is why SQLite
connections must be usable from threads other than their creator.

==============================================================================
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from product_console.config import Settings, get_settings


# Module logger
logger = logging.getLogger(__name__)

# Declarative base for all models
Base = declarative_base()


class DatabaseManager:
    """
    Engine and session factory for one database URL.

    Nothing connects until ``engine`` is first read. The application uses
    the shared instance from ``get_database_manager()``; tests may build
    their own from explicit settings.

    Example:
        >>> manager = DatabaseManager(Settings(database_url="sqlite://"))
        >>> manager.create_tables()
        >>> session = manager.get_session()
        >>> try:
        ...     session.query(Product).count()
        ... finally:
        ...     session.close()
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    # =========================================================================
    # ENGINE
    # =========================================================================

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(
                self._settings.database_url,
                echo=self._settings.debug,
                **self._engine_options(),
            )
            logger.info(f"Created database engine: {self._engine.url!r}")
        return self._engine

    def _engine_options(self) -> Dict[str, Any]:
        """Connection and pool arguments for the configured database."""
        settings = self._settings

        if settings.is_memory_database:
            return {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }

        if settings.is_sqlite:
            return {"connect_args": {"check_same_thread": False}}

        return {
            "pool_size": settings.db_pool_size,
            "max_overflow": settings.db_max_overflow,
            "pool_recycle": settings.db_pool_recycle,
            "pool_pre_ping": True,
        }

    # =========================================================================
    # SESSIONS
    # =========================================================================

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            # Repositories commit per call; loaded rows stay readable afterwards
            self._session_factory = sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """New session; the caller closes it."""
        return self.session_factory()

    # =========================================================================
    # SCHEMA
    # =========================================================================

    def create_tables(self) -> None:
        """Create missing tables for every registered model."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def verify_connection(self) -> bool:
        """Run ``SELECT 1``; False if the database cannot be reached."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

        logger.debug("Database connection verified")
        return True

    def dispose(self) -> None:
        """Close pooled connections; a later access builds a new engine."""
        if self._engine is None:
            return

        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        return f"DatabaseManager(url={self._settings.database_url!r})"


# =============================================================================
# APPLICATION ACCESS
# =============================================================================

@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """Manager for the configured database, shared by the whole process."""
    return DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency yielding a request-scoped session.

    Usage:
        @router.get("/products")
        async def list_products(db: Session = Depends(get_db)):
            ...
    """
    session = get_database_manager().get_session()
    try:
        yield session
    finally:
        session.close()
