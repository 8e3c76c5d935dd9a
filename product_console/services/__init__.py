"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

    ┌─────────────────┐
    │   API Router    │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductsManager │  ← Business Logic
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← Data Access (via ORM)
    └─────────────────┘

Usage:
------
    from product_console.repositories import ProductsRepository
    from product_console.services import ProductsManager

    manager = ProductsManager(ProductsRepository(db_session))
    products = manager.get_all()

==============================================================================
"""

from .products_manager import ProductsManager

__all__ = [
    "ProductsManager",
]
