"""Search parameters – mutable draft used by the copy-on-write protocol.

A draft is a private, deep-enough copy of one ``SearchParameters`` instance:
every container is fresh, so a change function may mutate it freely without
touching the instance it came from.  ``SearchParameters._mutate`` builds a
draft, hands it to the change function and freezes the result.
"""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Sequence

from search_helper.parameters.fields import PASSTHROUGH_FIELDS, NumericOperator

if TYPE_CHECKING:
    from search_helper.parameters.state import SearchParameters

__all__ = ["ParametersDraft", "index_of", "same_value"]

_TUNING_NAMES = frozenset(f.name for f in PASSTHROUGH_FIELDS)


def same_value(a: Any, b: Any) -> bool:
    """Strict refinement-value equality: ``True``, ``1`` and ``1.0`` differ."""
    return type(a) is type(b) and a == b


def index_of(values: Sequence[Any], value: Any) -> int:
    """Position of the first strictly equal entry, or -1."""
    for i, candidate in enumerate(values):
        if same_value(candidate, value):
            return i
    return -1


@dataclasses.dataclass
class ParametersDraft:
    query: str
    page: int
    hits_per_page: int
    max_values_per_facet: int
    facets: list[str]
    disjunctive_facets: list[str]
    facets_refinements: dict[str, Any]
    facets_excludes: dict[str, list[Any]]
    disjunctive_facets_refinements: dict[str, list[Any]]
    numeric_refinements: dict[str, dict[str, Any]]
    tuning: dict[str, Any]

    @classmethod
    def of(cls, params: SearchParameters) -> ParametersDraft:
        return cls(
            query=params.query,
            page=params.page,
            hits_per_page=params.hits_per_page,
            max_values_per_facet=params.max_values_per_facet,
            facets=list(params.facets),
            disjunctive_facets=list(params.disjunctive_facets),
            facets_refinements=dict(params.facets_refinements),
            facets_excludes={k: list(v) for k, v in params.facets_excludes.items()},
            disjunctive_facets_refinements={
                k: list(v) for k, v in params.disjunctive_facets_refinements.items()
            },
            numeric_refinements={k: dict(v) for k, v in params.numeric_refinements.items()},
            tuning={f.name: getattr(params, f.name) for f in PASSTHROUGH_FIELDS},
        )

    def as_kwargs(self) -> dict[str, Any]:
        """Constructor arguments for the frozen instance."""
        kwargs = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "tuning"
        }
        kwargs.update(self.tuning)
        return kwargs

    def assign(self, name: str, value: Any) -> None:
        """Set one field by attribute name; tuning options live in ``tuning``."""
        if name in _TUNING_NAMES:
            self.tuning[name] = value
        else:
            setattr(self, name, value)

    # -- numeric refinements -------------------------------------------------

    def set_numeric(self, attribute: str, operator: NumericOperator | str, value: Any) -> None:
        self.numeric_refinements.setdefault(attribute, {})[operator] = value

    def remove_numeric(self, attribute: str, operator: NumericOperator | str) -> bool:
        """Drop one (attribute, operator) value.

        Returns ``True`` when the attribute had numeric refinements at all,
        which is what decides whether the page position is reset.
        """
        operators = self.numeric_refinements.get(attribute)
        if not operators:
            return False
        if operator in operators:
            del operators[operator]
            if not operators:
                del self.numeric_refinements[attribute]
        return True

    # -- list-valued facet refinements ---------------------------------------

    @staticmethod
    def append_value(refinements: dict[str, list[Any]], facet: str, value: Any) -> None:
        refinements.setdefault(facet, []).append(value)

    @staticmethod
    def remove_value(refinements: dict[str, list[Any]], facet: str, value: Any) -> bool:
        """Remove the first occurrence of ``value``; prune the facet when empty.

        Returns ``True`` when the facet had a value list.
        """
        values = refinements.get(facet)
        if not values:
            return False
        idx = index_of(values, value)
        if idx > -1:
            del values[idx]
            if not values:
                del refinements[facet]
        return True

    # -- clearing ------------------------------------------------------------

    def clear_numeric_refinements(self, attribute: str | None = None) -> None:
        if attribute is None:
            self.numeric_refinements = {}
        else:
            self.numeric_refinements.pop(attribute, None)

    def clear_facet_refinements(self, facet: str | None = None) -> None:
        if facet is None:
            self.facets_refinements = {}
        else:
            self.facets_refinements.pop(facet, None)

    def clear_exclude_refinements(self, facet: str | None = None) -> None:
        if facet is None:
            self.facets_excludes = {}
        else:
            self.facets_excludes.pop(facet, None)

    def clear_disjunctive_facet_refinements(self, facet: str | None = None) -> None:
        if facet is None:
            self.disjunctive_facets_refinements = {}
        else:
            self.disjunctive_facets_refinements.pop(facet, None)
