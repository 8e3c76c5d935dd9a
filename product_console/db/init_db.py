"""
==============================================================================
Database Initialization Module
==============================================================================

Database initialization and setup utilities.

This module implements:
- DatabaseInitializer: Class for database setup operations
- Table creation and verification
- Sample catalog seeding and statistics

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. Seed sample products if enabled and the catalog is empty
3. Verify the connection

Usage:
------
    from product_console.db import init_db, DatabaseInitializer

    init_db()

    initializer = DatabaseInitializer()
    initializer.create_tables()
    initializer.seed_sample_products()

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from product_console.config import get_settings
from product_console.db.database import DatabaseManager, get_database_manager
from product_console.db.models import Product


# Module logger
logger = logging.getLogger(__name__)


SAMPLE_PRODUCTS = [
    {
        "product_code": "AB12C",
        "product_name": "Rose Oil",
        "origin_country": "Bulgaria",
        "price": Decimal("1.25"),
        "quantity": 100,
        "description": "Cold pressed rose oil",
    },
    {
        "product_code": "DB12C",
        "product_name": "Black Forest Ham",
        "origin_country": "Germany",
        "price": Decimal("100.00"),
        "quantity": 200,
        "description": "Smoked ham",
    },
    {
        "product_code": "IT45P",
        "product_name": "Parmigiano",
        "origin_country": "Italy",
        "price": Decimal("24.90"),
        "quantity": 35,
        "description": None,
    },
]


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager instance
        _settings: Application settings
        _session: Externally owned session, if any

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(
        self,
        db_manager: Optional[DatabaseManager] = None,
        session: Optional[Session] = None
    ) -> None:
        """
        Initialize the database initializer.

        Args:
            db_manager: Optional DatabaseManager (shared manager if None)
            session: Optional existing session (creates new if None)
        """
        self._db_manager = db_manager or get_database_manager()
        self._settings = get_settings()
        self._session = session

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    def _get_session(self) -> Session:
        if self._session is not None:
            return self._session
        return self._db_manager.get_session()

    def _release(self, session: Session) -> None:
        if self._session is None:
            session.close()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all database tables from ORM models (idempotent)."""
        logger.info("Creating database tables...")
        self._db_manager.create_tables()
        logger.info("✅ Database tables created successfully")

    def verify_tables(self) -> bool:
        """
        Verify that the products table can be queried.

        Returns:
            True if all tables exist, False otherwise
        """
        session = self._get_session()
        try:
            session.query(Product).first()
            logger.debug("Database tables verified successfully")
            return True
        except Exception as e:
            logger.error(f"Table verification failed: {e}")
            return False
        finally:
            self._release(session)

    # =========================================================================
    # SAMPLE DATA
    # =========================================================================

    def seed_sample_products(self) -> int:
        """
        Insert the sample products when the catalog is empty.

        Returns:
            Number of products inserted
        """
        if self._settings.is_production:
            logger.error("Cannot seed sample data in production!")
            raise RuntimeError("Sample data seeding not allowed in production")

        session = self._get_session()
        try:
            if session.query(Product).count() > 0:
                logger.info("Products already present, skipping sample data")
                return 0

            for data in SAMPLE_PRODUCTS:
                session.add(Product(**data))
            session.commit()

            logger.info(f"✅ Seeded {len(SAMPLE_PRODUCTS)} sample products")
            return len(SAMPLE_PRODUCTS)
        except Exception as e:
            session.rollback()
            logger.error(f"Failed to seed sample products: {e}")
            raise
        finally:
            self._release(session)

    # =========================================================================
    # INITIALIZATION METHODS
    # =========================================================================

    def initialize(self) -> None:
        """
        Perform full database initialization.

        Recommended method for application startup.
        """
        logger.info("Initializing database...")

        self.create_tables()

        if self._settings.seed_sample_data:
            self.seed_sample_products()

        if self._db_manager.verify_connection() and self.verify_tables():
            logger.info("✅ Database ready")
        else:
            logger.warning("⚠️ Database check failed")

    def get_stats(self) -> dict:
        """
        Get catalog statistics.

        Returns:
            Dictionary with product counts and totals
        """
        session = self._get_session()
        try:
            total_quantity = session.query(
                func.coalesce(func.sum(Product.quantity), 0)
            ).scalar()
            countries = session.query(
                func.count(func.distinct(Product.origin_country))
            ).scalar()

            return {
                "products": {
                    "total": session.query(Product).count(),
                    "in_stock": session.query(Product).filter(
                        Product.quantity > 0
                    ).count(),
                    "total_quantity": int(total_quantity or 0),
                    "origin_countries": int(countries or 0),
                }
            }
        finally:
            self._release(session)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def init_db() -> None:
    """Initialize the database at application startup."""
    DatabaseInitializer().initialize()

