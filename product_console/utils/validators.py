"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for product input data.

This module implements:
- ProductCodeValidator: Validates identifying text input (codes, countries)
- ProductValidator: Validates every field of a product

Validation Rules for Products:
-----------------------------
- product_code, product_name, origin_country: required, non-blank
- Text fields must fit their column sizes
- price: required, >= 0, fits NUMERIC(18, 2)
- quantity: required integer, 0 to QUANTITY_MAX
- description: optional

==============================================================================
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple

from product_console.db.models import (
    DESCRIPTION_MAX_LENGTH,
    ORIGIN_COUNTRY_MAX_LENGTH,
    PRICE_PRECISION,
    PRICE_SCALE,
    PRODUCT_CODE_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    QUANTITY_MAX,
)


PRICE_STEP = Decimal(1).scaleb(-PRICE_SCALE)


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not str(value).strip()


class ProductCodeValidator:
    """
    Validator for product codes used as lookup keys.

    Example:
        >>> validator = ProductCodeValidator()
        >>> validator.validate("   ")
        (False, 'Product code cannot be empty')
    """

    MAX_LENGTH = PRODUCT_CODE_MAX_LENGTH

    def validate(self, code: Optional[str]) -> Tuple[bool, Optional[str]]:
        """
        Validate a product code.

        Args:
            code: Product code to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if is_blank(code):
            return False, "Product code cannot be empty"

        if len(code) > self.MAX_LENGTH:
            return False, f"Product code must be at most {self.MAX_LENGTH} characters"

        return True, None

    def is_valid(self, code: Optional[str]) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(code)
        return is_valid


class ProductValidator:
    """
    Validator for whole products.

    Works on any object exposing the product attributes, so both ORM
    instances and request schemas can be checked.

    Example:
        >>> validator = ProductValidator()
        >>> is_valid, error = validator.validate(product)
        >>> if not is_valid:
        ...     print(error)
    """

    TEXT_FIELDS = (
        ("product_name", "Product name", PRODUCT_NAME_MAX_LENGTH, True),
        ("origin_country", "Origin country", ORIGIN_COUNTRY_MAX_LENGTH, True),
        ("description", "Description", DESCRIPTION_MAX_LENGTH, False),
    )

    def __init__(self, code_validator: Optional[ProductCodeValidator] = None) -> None:
        self._code_validator = code_validator or ProductCodeValidator()

    def validate(self, product: Any) -> Tuple[bool, Optional[str]]:
        """
        Validate every field of a product.

        Args:
            product: Product to validate (may be None)

        Returns:
            Tuple of (is_valid, error_message)
        """
        if product is None:
            return False, "Product is required"

        is_valid, error = self._code_validator.validate(
            getattr(product, "product_code", None)
        )
        if not is_valid:
            return False, error

        for attr, label, max_length, required in self.TEXT_FIELDS:
            value = getattr(product, attr, None)

            if value is None:
                if required:
                    return False, f"{label} is required"
                continue

            if not isinstance(value, str):
                return False, f"{label} must be text"

            if required and not value.strip():
                return False, f"{label} cannot be empty"

            if len(value) > max_length:
                return False, f"{label} must be at most {max_length} characters"

        is_valid, error = self._validate_price(getattr(product, "price", None))
        if not is_valid:
            return False, error

        return self._validate_quantity(getattr(product, "quantity", None))

    def is_valid(self, product: Any) -> bool:
        """Quick validation check."""
        is_valid, _ = self.validate(product)
        return is_valid

    @staticmethod
    def _validate_price(price: Any) -> Tuple[bool, Optional[str]]:
        if price is None or isinstance(price, bool):
            return False, "Price is required"

        try:
            amount = Decimal(str(price))
        except (InvalidOperation, ValueError):
            return False, "Price must be a number"

        if not amount.is_finite():
            return False, "Price must be a number"

        if amount < 0:
            return False, "Price cannot be negative"

        # adjusted() is the exponent of the leading digit
        if amount and amount.adjusted() >= PRICE_PRECISION - PRICE_SCALE:
            return False, f"Price must have at most {PRICE_PRECISION - PRICE_SCALE} whole digits"

        if amount != amount.quantize(PRICE_STEP):
            return False, f"Price must have at most {PRICE_SCALE} decimal places"

        return True, None

    @staticmethod
    def _validate_quantity(quantity: Any) -> Tuple[bool, Optional[str]]:
        if quantity is None:
            return False, "Quantity is required"

        if isinstance(quantity, bool) or not isinstance(quantity, int):
            return False, "Quantity must be a whole number"

        if quantity < 0:
            return False, "Quantity cannot be negative"

        if quantity > QUANTITY_MAX:
            return False, f"Quantity must be at most {QUANTITY_MAX}"

        return True, None
