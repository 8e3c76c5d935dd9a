"""
Application Exception Handling

AppException hierarchy for product catalog errors with FastAPI integration.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Base application exception for all error scenarios.

    Provides consistent error response format across the entire API.

    Usage:
        raise AppException("Something broke", "INTERNAL_ERROR", 500)
        raise NotFoundException("No product found.")

    Error Codes:
        - INVALID_ARGUMENT (400): blank or missing identifying input
        - VALIDATION_ERROR (422): product fields failed validation
        - NOT_FOUND (404): no matching product(s)
        - PRODUCT_EXISTS (409): product code already taken
        - INTERNAL_ERROR (500)
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "NOT_FOUND")
            status_code: HTTP status code (default: 400)
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class ArgumentException(AppException):
    """Blank or missing identifying input (product code, country name)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "INVALID_ARGUMENT", 400, details)


class ValidationException(AppException):
    """A product failed field validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "VALIDATION_ERROR", 422, details)


class NotFoundException(AppException):
    """No product matched the lookup."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "NOT_FOUND", 404, details)


class ConflictException(AppException):
    """A product with the same code already exists."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "PRODUCT_EXISTS", 409, details)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def product_code_empty() -> ArgumentException:
    """Create blank product code exception."""
    return ArgumentException("Product code cannot be empty.")


def country_name_empty() -> ArgumentException:
    """Create blank country name exception."""
    return ArgumentException("Country name cannot be empty.")


def invalid_product(reason: Optional[str] = None) -> ValidationException:
    """Create exception for a product rejected on add."""
    details = {"reason": reason} if reason else None
    return ValidationException("Invalid product!", details)


def invalid_product_update(reason: Optional[str] = None) -> ValidationException:
    """Create exception for a product rejected on update."""
    details = {"reason": reason} if reason else None
    return ValidationException("Invalid prduct!", details)


def no_products_found() -> NotFoundException:
    """Create exception for an empty catalog."""
    return NotFoundException("No product found.")


def no_products_for_country(country: str) -> NotFoundException:
    """Create exception for a country search with no matches."""
    return NotFoundException(
        "No product found with the given first name.",
        {"origin_country": country}
    )


def product_not_found(product_code: str) -> NotFoundException:
    """Create product not found exception."""
    return NotFoundException(
        f"No product found with product code: {product_code}",
        {"product_code": product_code}
    )


def product_exists(product_code: str) -> ConflictException:
    """Create product code already exists exception."""
    return ConflictException(
        f"Product with code '{product_code}' already exists.",
        {"product_code": product_code}
    )
