"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the product routes.

Dependency Hierarchy:
--------------------
    ┌─────────────────────┐
    │      get_db()       │
    └──────────┬──────────┘
               │
    ┌──────────▼──────────┐
    │get_products_manager │
    └─────────────────────┘

Usage:
------
    @router.get("/products")
    async def list_products(
        manager: ProductsManager = Depends(get_products_manager)
    ):
        return manager.get_all()

==============================================================================
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from product_console.db.database import get_db
from product_console.repositories import ProductsRepository
from product_console.services import ProductsManager


def get_products_manager(db: Session = Depends(get_db)) -> ProductsManager:
    """Build a ProductsManager bound to the request's session."""
    return ProductsManager(ProductsRepository(db))


__all__ = [
    "get_db",
    "get_products_manager",
]
