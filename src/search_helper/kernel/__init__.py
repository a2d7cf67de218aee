"""Kernel – framework-agnostic building blocks."""

from search_helper.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownParameterError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnknownParameterError",
    "ValidationError",
]
