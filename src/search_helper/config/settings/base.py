"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses

from search_helper.config.settings.validator import SettingsValidator


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings.

    ``_prefix`` names the environment namespace (``SEARCH`` reads
    ``SEARCH_HITS_PER_PAGE``).  Every instance is checked by
    :class:`SettingsValidator` on construction, so a loader can never hand
    out a negative page size.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Run the shared field checks; override to add cross-field rules."""
        SettingsValidator().check(self)


__all__ = ["Settings"]
