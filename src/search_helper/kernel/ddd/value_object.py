"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

V = TypeVar("V", bound="ValueObject")


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for value objects.

    Subclasses should be ``@dataclass(frozen=True)``.  Equality is based on
    field values (dataclass default for frozen).  ``__post_init__`` runs
    :meth:`_validate` so subclasses only override the hook.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field invariant checks."""

    def _set(self, name: str, value: Any) -> None:
        """Assign a field during construction only (``__post_init__``)."""
        object.__setattr__(self, name, value)

    def copy_with(self: V, **changes: Any) -> V:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


__all__ = ["ValueObject"]
