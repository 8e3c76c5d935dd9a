"""
Repositories Package - Data Access Layer

- Repository: generic add/remove/query/update primitives over a session
- ProductsRepository: product lookups by code and origin country
"""

from .base import Repository
from .products_repository import ProductsRepository

__all__ = [
    "Repository",
    "ProductsRepository",
]
