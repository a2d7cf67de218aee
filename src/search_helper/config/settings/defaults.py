"""Config settings – defaults applied to freshly built SearchParameters."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar

from search_helper.config.settings.base import Settings


@dataclasses.dataclass
class SearchDefaultsSettings(Settings):
    """Environment-driven defaults (``SEARCH_HITS_PER_PAGE`` etc.)."""

    _prefix: ClassVar[str] = "SEARCH"

    hits_per_page: int = 20
    max_values_per_facet: int = 10
    query_type: str | None = None
    typo_tolerance: str | None = None
    analytics: bool | None = None
    attributes_to_retrieve: list[str] | None = None

    def as_parameters(self) -> dict[str, Any]:
        """Settings as SearchParameters keyword arguments, unset ones omitted."""
        return {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(self)
            if getattr(self, field.name) is not None
        }


__all__ = ["SearchDefaultsSettings"]
