"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductCreate,
    ProductUpdate,
    ProductDetail,
    ProductResponse,
    ProductListResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    # Product
    "ProductCreate",
    "ProductUpdate",
    "ProductDetail",
    "ProductResponse",
    "ProductListResponse",
]
