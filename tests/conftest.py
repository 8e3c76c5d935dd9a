"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, products manager, client and product fixtures.

==============================================================================
"""

import os

# Keep the application's own engine in memory; must run before app imports
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from decimal import Decimal
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from product_console.main import app
from product_console.db.database import Base, get_db
from product_console.db.models import Product
from product_console.repositories import ProductsRepository
from product_console.services import ProductsManager


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fetch_product(db: Session) -> Callable[[str], Product]:
    """Load a product straight from the database, bypassing the identity map."""
    def _fetch(product_code: str):
        db.expire_all()
        return db.query(Product).filter(Product.product_code == product_code).first()
    return _fetch


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def products_repository(db: Session) -> ProductsRepository:
    """Repository bound to the test session."""
    return ProductsRepository(db)


@pytest.fixture
def products_manager(products_repository: ProductsRepository) -> ProductsManager:
    """Products manager bound to the test session."""
    return ProductsManager(products_repository)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create test client with database override."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def bulgarian_product() -> Product:
    """Valid, not yet stored product from Bulgaria."""
    return Product(
        origin_country="Bulgaria",
        product_name="TestProduct",
        product_code="AB12C",
        price=Decimal("1.25"),
        quantity=100,
        description="Anything for description",
    )


@pytest.fixture
def german_product() -> Product:
    """Valid, not yet stored product from Germany."""
    return Product(
        origin_country="Germany",
        product_name="TestProduct",
        product_code="DB12C",
        price=Decimal("100"),
        quantity=200,
        description="Anything for description",
    )
