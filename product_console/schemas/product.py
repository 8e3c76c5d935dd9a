"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for the product endpoints.

Request schemas only check types; business rules (blank fields, negative
price or quantity) are enforced by ProductsManager so API callers get the
same errors as direct callers.

==============================================================================
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from product_console.db.models import Product


class ProductFields(BaseModel):
    """Editable product attributes."""
    product_name: str
    origin_country: str
    price: Decimal
    quantity: int
    description: Optional[str] = Field(default=None)


class ProductCreate(ProductFields):
    """Product creation request."""
    product_code: str

    def to_model(self) -> Product:
        """Build a new Product from the request."""
        return Product(**self.model_dump())


class ProductUpdate(ProductFields):
    """Product update request; the code comes from the URL."""

    def to_model(self, product_code: str) -> Product:
        """Build a detached Product carrying the new values."""
        return Product(product_code=product_code, **self.model_dump())


class ProductDetail(BaseModel):
    """Product information."""
    model_config = ConfigDict(from_attributes=True)

    product_code: str
    product_name: str
    origin_country: str
    price: Decimal
    quantity: int
    description: Optional[str] = None


class ProductResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: ProductDetail


class ProductListResponse(BaseModel):
    """List of products response."""
    success: bool = Field(default=True)
    products: List[ProductDetail]
    total: int
