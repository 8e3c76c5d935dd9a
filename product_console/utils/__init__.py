"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: Product and product code validation

==============================================================================
"""

from .validators import ProductCodeValidator, ProductValidator, is_blank

__all__ = [
    "ProductCodeValidator",
    "ProductValidator",
    "is_blank",
]
