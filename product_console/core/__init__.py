"""
==============================================================================
Core Package
==============================================================================

Modules:
--------
- exceptions: AppException hierarchy and error factory functions
- dependencies: FastAPI dependency injection functions

==============================================================================
"""

from .exceptions import (
    AppException,
    ArgumentException,
    ConflictException,
    NotFoundException,
    ValidationException,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "ArgumentException",
    "ConflictException",
    "NotFoundException",
    "ValidationException",
    "register_exception_handlers",
]
