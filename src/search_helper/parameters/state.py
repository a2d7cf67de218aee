"""Search parameters – the immutable SearchParameters value object.

``SearchParameters`` holds everything needed to describe one search request:
query text, pagination, facet declarations, the four refinement collections
and the passthrough tuning options.  It never performs a search.

Instances are frozen.  Every "mutation" goes through :meth:`_mutate`, which
copies the current state into a :class:`ParametersDraft`, applies a change
function to the draft and freezes the result into a new instance::

    params = SearchParameters(disjunctive_facets=["color"])
    refined = params.add_disjunctive_facet_refinement("color", "red")
    assert params.disjunctive_facets_refinements == {}
    assert refined.is_disjunctive_facet_refined("color", "red")
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Sequence

from search_helper.kernel.ddd import ValueObject
from search_helper.kernel.errors import UnknownParameterError
from search_helper.observability.logging import get_logger
from search_helper.parameters.draft import ParametersDraft, index_of, same_value
from search_helper.parameters.fields import FIELDS, FIELDS_BY_KEY, NumericOperator

if TYPE_CHECKING:
    from search_helper.config.settings import SearchDefaultsSettings

__all__ = ["DEFAULT_HITS_PER_PAGE", "DEFAULT_MAX_VALUES_PER_FACET", "SearchParameters"]

DEFAULT_HITS_PER_PAGE = 20
DEFAULT_MAX_VALUES_PER_FACET = 10

_log = get_logger(__name__)

# Fields whose change can alter the result set, so the page position is reset.
_PAGE_RESETTING_FIELDS = frozenset({
    "query",
    "hits_per_page",
    "typo_tolerance",
    "facets_refinements",
    "facets_excludes",
    "disjunctive_facets_refinements",
    "numeric_refinements",
})


def _names(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """Attribute names as a tuple; a bare string is one name."""
    if isinstance(value, str):
        return (value,)
    return tuple(value or ())


def _frozen_lists(refinements: Mapping[str, Iterable[Any]] | None) -> Mapping[str, tuple[Any, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in (refinements or {}).items() if v})


def _frozen_numeric(
    refinements: Mapping[str, Mapping[str, Any]] | None,
) -> Mapping[str, Mapping[str, Any]]:
    return MappingProxyType(
        {k: MappingProxyType(dict(ops)) for k, ops in (refinements or {}).items() if ops}
    )


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((k, _hashable(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_hashable(v) for v in value)
    return value


def _plain(value: Any) -> Any:
    """Thaw tuples and read-only mappings back into lists and dicts."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value


@dataclasses.dataclass(frozen=True)
class SearchParameters(ValueObject):
    """Immutable description of one search request.

    Missing fields (or fields passed as ``None``) take the defaults: empty
    query, no facets, no refinements, ``hits_per_page=20``,
    ``max_values_per_facet=10``, ``page=0`` and every tuning option unset.
    """

    query: str = ""
    facets: Sequence[str] = ()
    disjunctive_facets: Sequence[str] = ()
    facets_refinements: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    facets_excludes: Mapping[str, Sequence[Any]] = dataclasses.field(default_factory=dict)
    disjunctive_facets_refinements: Mapping[str, Sequence[Any]] = dataclasses.field(default_factory=dict)
    numeric_refinements: Mapping[str, Mapping[str, Any]] = dataclasses.field(default_factory=dict)
    hits_per_page: int = DEFAULT_HITS_PER_PAGE
    max_values_per_facet: int = DEFAULT_MAX_VALUES_PER_FACET
    page: int = 0

    # passthrough tuning, forwarded verbatim
    query_type: Any = None
    typo_tolerance: Any = None
    min_word_size_for_1_typo: Any = None
    min_word_size_for_2_typos: Any = None
    allow_typos_on_numeric_tokens: Any = None
    ignore_plurals: Any = None
    restrict_searchable_attributes: Any = None
    advanced_syntax: Any = None
    analytics: Any = None
    analytics_tags: Any = None
    synonyms: Any = None
    replace_synonyms_in_highlight: Any = None
    optional_words: Any = None
    remove_words_if_no_results: Any = None
    attributes_to_retrieve: Any = None
    attributes_to_highlight: Any = None
    attributes_to_snippet: Any = None
    get_ranking_info: Any = None
    tag_filters: Any = None
    distinct: Any = None
    around_lat_lng: Any = None
    around_lat_lng_via_ip: Any = None
    around_radius: Any = None
    around_precision: Any = None
    inside_bounding_box: Any = None

    def __post_init__(self) -> None:
        # Own copies of every container, so no state is shared with the caller.
        self._set("query", "" if self.query is None else self.query)
        self._set("page", 0 if self.page is None else self.page)
        if self.hits_per_page is None:
            self._set("hits_per_page", DEFAULT_HITS_PER_PAGE)
        if self.max_values_per_facet is None:
            self._set("max_values_per_facet", DEFAULT_MAX_VALUES_PER_FACET)
        self._set("facets", _names(self.facets))
        self._set("disjunctive_facets", _names(self.disjunctive_facets))
        self._set("facets_refinements", MappingProxyType(dict(self.facets_refinements or {})))
        self._set("facets_excludes", _frozen_lists(self.facets_excludes))
        self._set("disjunctive_facets_refinements", _frozen_lists(self.disjunctive_facets_refinements))
        self._set("numeric_refinements", _frozen_numeric(self.numeric_refinements))
        super().__post_init__()

    def __hash__(self) -> int:
        return hash(tuple(_hashable(getattr(self, f.name)) for f in FIELDS))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(
        cls,
        params: Mapping[str, Any] | SearchParameters | None = None,
        *,
        strict: bool = False,
    ) -> SearchParameters:
        """Build from a partial mapping or copy another instance.

        Keys may use the wire spelling (``hitsPerPage``) or the attribute
        spelling (``hits_per_page``).  Unknown keys are ignored with a
        warning, or rejected with :class:`UnknownParameterError` when
        ``strict`` is set.
        """
        if params is None:
            return cls()
        if isinstance(params, SearchParameters):
            return cls(**{f.name: getattr(params, f.name) for f in FIELDS})

        kwargs: dict[str, Any] = {}
        unknown: list[str] = []
        for key, value in params.items():
            field = FIELDS_BY_KEY.get(key)
            if field is None:
                unknown.append(key)
                continue
            kwargs[field.name] = value
        if unknown:
            if strict:
                raise UnknownParameterError(unknown)
            _log.warning("search_parameters.unknown_keys_ignored", keys=sorted(unknown))
        return cls(**kwargs)

    @classmethod
    def from_settings(cls, settings: SearchDefaultsSettings, **overrides: Any) -> SearchParameters:
        """Build with environment-driven defaults; ``overrides`` win."""
        return cls(**{**settings.as_parameters(), **overrides})

    # ------------------------------------------------------------------
    # Copy-on-write
    # ------------------------------------------------------------------

    def _mutate(self, change: Callable[[ParametersDraft], None]) -> SearchParameters:
        """Apply ``change`` to a private copy and return it frozen."""
        draft = ParametersDraft.of(self)
        change(draft)
        return type(self)(**draft.as_kwargs())

    def copy_with(self, **changes: Any) -> SearchParameters:
        """Replace fields by attribute name through the copy-on-write path.

        Changing the query, page size, typo tolerance or any refinement
        resets ``page`` to 0 unless ``page`` is among ``changes``.
        """
        unknown = set(changes) - {f.name for f in FIELDS}
        if unknown:
            raise UnknownParameterError(unknown)

        def change(d: ParametersDraft) -> None:
            for name, value in changes.items():
                d.assign(name, value)
            if "page" not in changes and _PAGE_RESETTING_FIELDS & changes.keys():
                d.page = 0
        return self._mutate(change)

    # ------------------------------------------------------------------
    # Query, pagination and facet declarations
    # ------------------------------------------------------------------

    def set_query(self, query: str) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.query = query
            d.page = 0
        return self._mutate(change)

    def set_page(self, page: int) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.page = page
        return self._mutate(change)

    def set_hits_per_page(self, hits_per_page: int) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.hits_per_page = hits_per_page
            d.page = 0
        return self._mutate(change)

    def set_facets(self, facets: str | Iterable[str]) -> SearchParameters:
        """Replace the conjunctive facet declarations; the page is kept."""
        def change(d: ParametersDraft) -> None:
            d.facets = list(_names(facets))
        return self._mutate(change)

    def set_disjunctive_facets(self, facets: str | Iterable[str]) -> SearchParameters:
        """Replace the disjunctive facet declarations; the page is kept."""
        def change(d: ParametersDraft) -> None:
            d.disjunctive_facets = list(_names(facets))
        return self._mutate(change)

    def set_typo_tolerance(self, typo_tolerance: Any) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.tuning["typo_tolerance"] = typo_tolerance
            d.page = 0
        return self._mutate(change)

    # ------------------------------------------------------------------
    # Numeric refinements
    # ------------------------------------------------------------------

    def add_numeric_refinement(
        self, attribute: str, operator: NumericOperator | str, value: Any
    ) -> SearchParameters:
        """Set the value for ``(attribute, operator)``, replacing any previous one.

        ``operator`` is expected to be one of ``=, >, >=, <, <=, !=`` but is
        stored unchecked.
        """
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.set_numeric(attribute, operator, value)
        return self._mutate(change)

    def remove_numeric_refinement(self, attribute: str, operator: NumericOperator | str) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            if d.remove_numeric(attribute, operator):
                d.page = 0
        return self._mutate(change)

    def get_numeric_refinement(self, attribute: str, operator: NumericOperator | str) -> Any:
        """Value stored for ``(attribute, operator)``, or ``None``."""
        return self.numeric_refinements.get(attribute, {}).get(operator)

    def get_numeric_refinements(self, attribute: str) -> Mapping[str, Any]:
        return self.numeric_refinements.get(attribute, MappingProxyType({}))

    def _clear_numeric_refinements(self, attribute: str | None = None) -> SearchParameters:
        return self._mutate(lambda d: d.clear_numeric_refinements(attribute))

    # ------------------------------------------------------------------
    # Facet refinements: conjunctive, exclude, disjunctive
    # ------------------------------------------------------------------

    def add_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        """Select ``value`` for ``facet``; a conjunctive facet holds one value."""
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.facets_refinements[facet] = value
        return self._mutate(change)

    def add_exclude_refinement(self, facet: str, value: Any) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.append_value(d.facets_excludes, facet, value)
        return self._mutate(change)

    def add_disjunctive_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.append_value(d.disjunctive_facets_refinements, facet, value)
        return self._mutate(change)

    def remove_facet_refinement(self, facet: str) -> SearchParameters:
        """Drop the conjunctive refinement of ``facet``, whatever its value."""
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.clear_facet_refinements(facet)
        return self._mutate(change)

    def remove_exclude_refinement(self, facet: str, value: Any) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            if d.remove_value(d.facets_excludes, facet, value):
                d.page = 0
        return self._mutate(change)

    def remove_disjunctive_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        def change(d: ParametersDraft) -> None:
            if d.remove_value(d.disjunctive_facets_refinements, facet, value):
                d.page = 0
        return self._mutate(change)

    def _clear_facet_refinements(self, facet: str | None = None) -> SearchParameters:
        return self._mutate(lambda d: d.clear_facet_refinements(facet))

    def _clear_exclude_refinements(self, facet: str | None = None) -> SearchParameters:
        return self._mutate(lambda d: d.clear_exclude_refinements(facet))

    def _clear_disjunctive_facet_refinements(self, facet: str | None = None) -> SearchParameters:
        return self._mutate(lambda d: d.clear_disjunctive_facet_refinements(facet))

    def toggle_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        if self.is_facet_refined(facet, value):
            return self.remove_facet_refinement(facet)
        return self.add_facet_refinement(facet, value)

    def toggle_exclude_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        if self.is_exclude_refined(facet, value):
            return self.remove_exclude_refinement(facet, value)
        return self.add_exclude_refinement(facet, value)

    def toggle_disjunctive_facet_refinement(self, facet: str, value: Any) -> SearchParameters:
        if self.is_disjunctive_facet_refined(facet, value):
            return self.remove_disjunctive_facet_refinement(facet, value)
        return self.add_disjunctive_facet_refinement(facet, value)

    def is_facet_refined(self, facet: str, value: Any) -> bool:
        return facet in self.facets_refinements and same_value(self.facets_refinements[facet], value)

    def is_exclude_refined(self, facet: str, value: Any) -> bool:
        return index_of(self.facets_excludes.get(facet, ()), value) > -1

    def is_disjunctive_facet_refined(self, facet: str, value: Any) -> bool:
        return index_of(self.disjunctive_facets_refinements.get(facet, ()), value) > -1

    # ------------------------------------------------------------------
    # All refinements
    # ------------------------------------------------------------------

    def clear_refinements(self, name: str | None = None) -> SearchParameters:
        """Remove every refinement, or every refinement on attribute ``name``."""
        def change(d: ParametersDraft) -> None:
            d.page = 0
            d.clear_numeric_refinements(name)
            d.clear_facet_refinements(name)
            d.clear_exclude_refinements(name)
            d.clear_disjunctive_facet_refinements(name)
        return self._mutate(change)

    def has_refinements(self, name: str | None = None) -> bool:
        collections = (
            self.numeric_refinements,
            self.facets_refinements,
            self.facets_excludes,
            self.disjunctive_facets_refinements,
        )
        if name is None:
            return any(len(c) > 0 for c in collections)
        return any(name in c for c in collections)

    # ------------------------------------------------------------------
    # Disjunctive facet derivation
    # ------------------------------------------------------------------

    def get_refined_disjunctive_facets(self) -> list[str]:
        """Disjunctive facets with at least one refinement.

        Facets refined through ``disjunctive_facets_refinements`` come first,
        followed by declared disjunctive facets that carry a numeric
        refinement.  A facet refined both ways is listed twice.
        """
        numeric_refined = [
            attribute for attribute in self.numeric_refinements
            if attribute in self.disjunctive_facets
        ]
        return [*self.disjunctive_facets_refinements, *numeric_refined]

    def get_unrefined_disjunctive_facets(self) -> list[str]:
        refined = set(self.get_refined_disjunctive_facets())
        return [f for f in self.disjunctive_facets if f not in refined]

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def get_query_params(self) -> dict[str, Any]:
        """Request-ready parameters keyed by wire name.

        Facet declarations and refinements are left out; turning them into
        filters is up to the caller.  Unset options are omitted.
        """
        params: dict[str, Any] = {}
        for field in FIELDS:
            if field.managed:
                continue
            value = getattr(self, field.name)
            if value is not None:
                params[field.wire_name] = value
        return params

    def to_dict(self) -> dict[str, Any]:
        """Full state keyed by wire name, as plain lists and dicts."""
        out: dict[str, Any] = {}
        for field in FIELDS:
            value = getattr(self, field.name)
            if value is None:
                continue
            out[field.wire_name] = _plain(value) if field.managed else value
        return out
