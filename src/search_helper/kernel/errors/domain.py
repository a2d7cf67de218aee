"""Domain errors — rejected search-state input."""

from __future__ import annotations

from typing import Any, Iterable

from search_helper.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when search-state input breaks a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownParameterError(ValidationError):
    """A parameter mapping carried keys that name no search parameter."""

    default_code = "unknown_parameter"

    def __init__(self, names: Iterable[str], **kwargs: Any) -> None:
        self.names: tuple[str, ...] = tuple(sorted(names))
        super().__init__(
            f"Unknown search parameter(s): {', '.join(self.names)}",
            errors=[{"field": name, "error": "unknown"} for name in self.names],
            detail={"unknown": list(self.names)},
            **kwargs,
        )


__all__ = ["DomainError", "UnknownParameterError", "ValidationError"]
