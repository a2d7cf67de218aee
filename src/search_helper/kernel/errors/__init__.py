"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── UnknownParameterError
    └── ApplicationError         (application.py)
        └── ConfigError          (search_helper.config.validation)
"""

from search_helper.kernel.errors.application import ApplicationError
from search_helper.kernel.errors.base import BaseError
from search_helper.kernel.errors.domain import (
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
