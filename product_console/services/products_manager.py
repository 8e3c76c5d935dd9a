"""
==============================================================================
Products Manager Module
==============================================================================

Business rules for the product catalog.

This module implements:
- ProductsManager: validation and lookup logic around ProductsRepository

Error Signaling:
---------------
- ArgumentException: blank product code / country name
- ValidationException: product missing or with invalid fields
- NotFoundException: no matching product(s)
- ConflictException: product code already taken on add

Each operation is a single request/response against the repository;
errors propagate directly to the caller.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from product_console.core import exceptions
from product_console.db.models import Product
from product_console.repositories import ProductsRepository
from product_console.utils.validators import ProductValidator, is_blank


# Module logger
logger = logging.getLogger(__name__)


class ProductsManager:
    """
    Product catalog service.

    Attributes:
        _repository: ProductsRepository used for storage
        _validator: ProductValidator for field checks

    Example:
        >>> manager = ProductsManager(ProductsRepository(db_session))
        >>> manager.add(Product(
        ...     product_code="AB12C",
        ...     product_name="TestProduct",
        ...     origin_country="Bulgaria",
        ...     price=Decimal("1.25"),
        ...     quantity=100,
        ... ))
        >>> manager.get_specific("AB12C").product_name
        'TestProduct'
    """

    def __init__(
        self,
        repository: ProductsRepository,
        validator: Optional[ProductValidator] = None
    ) -> None:
        """
        Initialize the products manager.

        Args:
            repository: Data access for products
            validator: Optional ProductValidator (default rules if None)
        """
        self._repository = repository
        self._validator = validator or ProductValidator()

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def add(self, product: Product) -> Product:
        """
        Validate and persist a new product.

        Args:
            product: Product to add

        Returns:
            The stored product

        Raises:
            ValidationException: "Invalid product!" if any field is invalid
            ConflictException: if the product code already exists
        """
        is_valid, error = self._validator.validate(product)
        if not is_valid:
            logger.warning(f"Product rejected on add: {error}")
            raise exceptions.invalid_product(error)

        if self._repository.get_by_code(product.product_code) is not None:
            logger.warning(f"Product code already exists: {product.product_code}")
            raise exceptions.product_exists(product.product_code)

        try:
            self._repository.add(product)
        except IntegrityError:
            raise exceptions.product_exists(product.product_code)

        logger.info(f"✅ Product added: {product.product_code}")
        return product

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    def delete(self, product_code: Optional[str]) -> None:
        """
        Remove the product with the given code.

        Deleting a code that is not stored is a no-op.

        Raises:
            ArgumentException: if the code is None, empty or whitespace
        """
        if is_blank(product_code):
            raise exceptions.product_code_empty()

        product = self._repository.get_by_code(product_code)
        if product is None:
            logger.debug(f"Nothing to delete for product code: {product_code}")
            return

        self._repository.delete(product)
        logger.info(f"✅ Product deleted: {product_code}")

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_all(self) -> List[Product]:
        """
        Get every product, ordered by product code.

        Raises:
            NotFoundException: "No product found." if the catalog is empty
        """
        products = self._repository.all()
        if not products:
            raise exceptions.no_products_found()
        return products

    def search_by_origin_country(self, origin_country: Optional[str]) -> List[Product]:
        """
        Get the products coming from a country.

        Args:
            origin_country: Exact country name

        Returns:
            Matching products, ordered by product code

        Raises:
            ArgumentException: if the country is None, empty or whitespace
            NotFoundException: if no product matches
        """
        if is_blank(origin_country):
            raise exceptions.country_name_empty()

        products = self._repository.find_by_origin_country(origin_country)
        if not products:
            raise exceptions.no_products_for_country(origin_country)
        return products

    def get_specific(self, product_code: Optional[str]) -> Product:
        """
        Get a single product by code.

        Raises:
            ArgumentException: if the code is None, empty or whitespace
            NotFoundException: if no product has this code
        """
        if is_blank(product_code):
            raise exceptions.product_code_empty()

        product = self._repository.get_by_code(product_code)
        if product is None:
            raise exceptions.product_not_found(product_code)
        return product

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def update(self, product: Optional[Product]) -> Product:
        """
        Validate and persist changes to a stored product.

        ``product`` may be the tracked instance returned by this manager or a
        detached instance carrying the new values for the same code. A
        rejected update discards the pending changes of a tracked instance.

        Raises:
            ValidationException: "Invalid prduct!" if product is None, invalid
                or a tracked instance whose code was changed
            NotFoundException: if no product has this code
        """
        is_valid, error = self._validator.validate(product)
        if not is_valid:
            logger.warning(f"Product rejected on update: {error}")
            self._discard_changes(product)
            raise exceptions.invalid_product_update(error)

        if self._code_changed(product):
            logger.warning(f"Product code change rejected: {product.product_code}")
            self._discard_changes(product)
            raise exceptions.invalid_product_update("Product code cannot be changed")

        product_code = product.product_code
        stored = self._repository.get_by_code(product_code)
        if stored is None:
            self._discard_changes(product)
            raise exceptions.product_not_found(product_code)

        if stored is not product:
            stored.copy_from(product)

        self._repository.update(stored)
        logger.info(f"✅ Product updated: {stored.product_code}")
        return stored

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _is_tracked(self, product: Any) -> bool:
        return isinstance(product, Product) and product in self._repository.session

    def _code_changed(self, product: Product) -> bool:
        """True if a tracked product's primary key was edited in memory."""
        if not self._is_tracked(product):
            return False
        return inspect(product).attrs.product_code.history.has_changes()

    def _discard_changes(self, product: Any) -> None:
        """Roll back uncommitted edits made to a tracked product."""
        if self._is_tracked(product):
            self._repository.rollback()
