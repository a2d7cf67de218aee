"""Config settings – SettingsValidator."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from search_helper.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from search_helper.config.settings.base import Settings


@dataclasses.dataclass(frozen=True)
class SettingViolation:
    """One field that failed validation."""
    name: str
    value: Any
    reason: str

    def __str__(self) -> str:
        return f"{self.name} {self.reason}"


class SettingsValidator:
    """Field-level checks shared by every settings class.

    Required fields must not be ``None``; integer fields (page sizes,
    facet value counts) must not be negative.
    """

    def violations(self, settings: Settings) -> list[SettingViolation]:
        found: list[SettingViolation] = []
        for field in dataclasses.fields(settings):
            value = getattr(settings, field.name)
            if value is None and field.default is dataclasses.MISSING:
                found.append(SettingViolation(field.name, value, "is required but None"))
            elif isinstance(value, int) and not isinstance(value, bool) and value < 0:
                found.append(SettingViolation(field.name, value, "must be >= 0"))
        return found

    def validate(self, settings: Settings) -> list[str]:
        """Return a list of validation error messages."""
        return [str(v) for v in self.violations(settings)]

    def check(self, settings: Settings) -> None:
        """Raise :class:`InvalidSettingValueError` for the first violation."""
        found = self.violations(settings)
        if found:
            first = found[0]
            raise InvalidSettingValueError(first.name, first.value, first.reason)


__all__ = ["SettingViolation", "SettingsValidator"]
