"""Application-layer errors — cross-cutting concerns around the value object."""

from __future__ import annotations

from search_helper.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
