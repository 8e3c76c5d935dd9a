"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM models for the product catalog.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                                │
    ├─────────────────────────────────────────────────────────────────┤
    │ product_code (VARCHAR(10), PK)                                  │
    │ product_name (VARCHAR(100), NOT NULL)                           │
    │ origin_country (VARCHAR(50), NOT NULL, INDEX)                   │
    │ price (NUMERIC(18, 2), NOT NULL)                                │
    │ quantity (INTEGER, NOT NULL)                                    │
    │ description (VARCHAR(500), NULLABLE)                            │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, Integer, Numeric, String

from product_console.db.database import Base


# Column sizes, shared with the product validator
PRODUCT_CODE_MAX_LENGTH = 10
PRODUCT_NAME_MAX_LENGTH = 100
ORIGIN_COUNTRY_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500
PRICE_PRECISION = 18
PRICE_SCALE = 2

# Largest value every supported backend stores in an INTEGER column
QUANTITY_MAX = 2**31 - 1


class Product(Base):
    """
    Product catalog entry.

    Attributes:
        product_code: Unique product identifier (primary key)
        product_name: Display name
        origin_country: Country the product comes from
        price: Unit price, never negative
        quantity: Units in stock, never negative
        description: Optional free text

    Example:
        >>> product = Product(
        ...     product_code="AB12C",
        ...     product_name="TestProduct",
        ...     origin_country="Bulgaria",
        ...     price=Decimal("1.25"),
        ...     quantity=100,
        ... )
        >>> session.add(product)
        >>> session.commit()
    """

    __tablename__ = "products"

    # =========================================================================
    # COLUMNS
    # =========================================================================

    product_code: str = Column(
        String(PRODUCT_CODE_MAX_LENGTH),
        primary_key=True,
        doc="Unique product code"
    )

    product_name: str = Column(
        String(PRODUCT_NAME_MAX_LENGTH),
        nullable=False,
        doc="Product display name"
    )

    origin_country: str = Column(
        String(ORIGIN_COUNTRY_MAX_LENGTH),
        nullable=False,
        index=True,
        doc="Country of origin"
    )

    price: Decimal = Column(
        Numeric(PRICE_PRECISION, PRICE_SCALE),
        nullable=False,
        doc="Unit price"
    )

    quantity: int = Column(
        Integer,
        nullable=False,
        doc="Units in stock"
    )

    description: Optional[str] = Column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
        doc="Free text description"
    )

    # =========================================================================
    # METHODS
    # =========================================================================

    def copy_from(self, other: Product) -> None:
        """Copy every non-key attribute from another product."""
        self.product_name = other.product_name
        self.origin_country = other.origin_country
        self.price = other.price
        self.quantity = other.quantity
        self.description = other.description

    def __repr__(self) -> str:
        return (
            f"Product(product_code={self.product_code!r}, "
            f"product_name={self.product_name!r}, "
            f"origin_country={self.origin_country!r}, "
            f"price={self.price}, quantity={self.quantity})"
        )

    def __str__(self) -> str:
        return f"{self.product_name} ({self.product_code})"
