"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD endpoints over ProductsManager.

==============================================================================
"""

from fastapi import APIRouter, Depends, Query

from product_console.core.dependencies import get_products_manager
from product_console.schemas import (
    MessageResponse,
    ProductCreate,
    ProductDetail,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)
from product_console.services import ProductsManager


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, manager: ProductsManager):
        self._manager = manager

    @staticmethod
    def _list_response(products) -> ProductListResponse:
        return ProductListResponse(
            products=[ProductDetail.model_validate(p) for p in products],
            total=len(products),
        )

    def list_products(self) -> ProductListResponse:
        """List every product."""
        return self._list_response(self._manager.get_all())

    def search(self, country: str) -> ProductListResponse:
        """List products by origin country."""
        return self._list_response(self._manager.search_by_origin_country(country))

    def get_by_code(self, product_code: str) -> ProductResponse:
        """Get product by code."""
        product = self._manager.get_specific(product_code)
        return ProductResponse(product=ProductDetail.model_validate(product))

    def create(self, data: ProductCreate) -> ProductResponse:
        """Add a product."""
        product = self._manager.add(data.to_model())
        return ProductResponse(product=ProductDetail.model_validate(product))

    def update(self, product_code: str, data: ProductUpdate) -> ProductResponse:
        """Replace the attributes of a stored product."""
        product = self._manager.update(data.to_model(product_code))
        return ProductResponse(product=ProductDetail.model_validate(product))

    def delete(self, product_code: str) -> MessageResponse:
        """Delete a product."""
        self._manager.delete(product_code)
        return MessageResponse(message=f"Product {product_code} deleted")


@router.get("", response_model=ProductListResponse)
async def list_products(manager: ProductsManager = Depends(get_products_manager)):
    """List all products."""
    return ProductController(manager).list_products()


@router.get("/search", response_model=ProductListResponse)
async def search_products(
    country: str = Query(...),
    manager: ProductsManager = Depends(get_products_manager)
):
    """Search products by origin country."""
    return ProductController(manager).search(country)


@router.get("/{product_code}", response_model=ProductResponse)
async def get_product(
    product_code: str,
    manager: ProductsManager = Depends(get_products_manager)
):
    """Get product by code."""
    return ProductController(manager).get_by_code(product_code)


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    manager: ProductsManager = Depends(get_products_manager)
):
    """Add a new product."""
    return ProductController(manager).create(data)


@router.put("/{product_code}", response_model=ProductResponse)
async def update_product(
    product_code: str,
    data: ProductUpdate,
    manager: ProductsManager = Depends(get_products_manager)
):
    """Update an existing product."""
    return ProductController(manager).update(product_code, data)


@router.delete("/{product_code}", response_model=MessageResponse)
async def delete_product(
    product_code: str,
    manager: ProductsManager = Depends(get_products_manager)
):
    """Delete a product; unknown codes succeed without changes."""
    return ProductController(manager).delete(product_code)
