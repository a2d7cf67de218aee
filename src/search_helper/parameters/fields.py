"""Search parameters – static field schema.

Every attribute of :class:`~search_helper.parameters.SearchParameters` is
listed here once, with the name the backend expects on the wire.  The six
*managed* fields carry facet declarations and refinement state; they are
translated into filters by the caller and never emitted by
``get_query_params()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = [
    "FIELDS",
    "FIELDS_BY_KEY",
    "MANAGED_FIELDS",
    "NUMERIC_OPERATORS",
    "NumericOperator",
    "PASSTHROUGH_FIELDS",
    "ParameterField",
]

NumericOperator = Literal["=", ">", ">=", "<", "<=", "!="]

#: Operators the backend understands; values outside this set are stored as-is.
NUMERIC_OPERATORS: tuple[str, ...] = ("=", ">", ">=", "<", "<=", "!=")


@dataclass(frozen=True)
class ParameterField:
    """One search parameter: Python attribute name and wire name."""
    name: str
    wire_name: str
    managed: bool = False


_CORE_FIELDS: tuple[ParameterField, ...] = (
    ParameterField("query", "query"),
)

MANAGED_FIELDS: tuple[ParameterField, ...] = (
    ParameterField("facets", "facets", managed=True),
    ParameterField("disjunctive_facets", "disjunctiveFacets", managed=True),
    ParameterField("facets_refinements", "facetsRefinements", managed=True),
    ParameterField("facets_excludes", "facetsExcludes", managed=True),
    ParameterField("disjunctive_facets_refinements", "disjunctiveFacetsRefinements", managed=True),
    ParameterField("numeric_refinements", "numericRefinements", managed=True),
)

_PAGINATION_FIELDS: tuple[ParameterField, ...] = (
    ParameterField("hits_per_page", "hitsPerPage"),
    ParameterField("max_values_per_facet", "maxValuesPerFacet"),
    ParameterField("page", "page"),
)

# Opaque tuning options forwarded verbatim.
PASSTHROUGH_FIELDS: tuple[ParameterField, ...] = (
    ParameterField("query_type", "queryType"),
    ParameterField("typo_tolerance", "typoTolerance"),
    ParameterField("min_word_size_for_1_typo", "minWordSizefor1Typo"),
    ParameterField("min_word_size_for_2_typos", "minWordSizefor2Typos"),
    ParameterField("allow_typos_on_numeric_tokens", "allowTyposOnNumericTokens"),
    ParameterField("ignore_plurals", "ignorePlurals"),
    ParameterField("restrict_searchable_attributes", "restrictSearchableAttributes"),
    ParameterField("advanced_syntax", "advancedSyntax"),
    ParameterField("analytics", "analytics"),
    ParameterField("analytics_tags", "analyticsTags"),
    ParameterField("synonyms", "synonyms"),
    ParameterField("replace_synonyms_in_highlight", "replaceSynonymsInHighlight"),
    ParameterField("optional_words", "optionalWords"),
    ParameterField("remove_words_if_no_results", "removeWordsIfNoResults"),
    ParameterField("attributes_to_retrieve", "attributesToRetrieve"),
    ParameterField("attributes_to_highlight", "attributesToHighlight"),
    ParameterField("attributes_to_snippet", "attributesToSnippet"),
    ParameterField("get_ranking_info", "getRankingInfo"),
    ParameterField("tag_filters", "tagFilters"),
    ParameterField("distinct", "distinct"),
    ParameterField("around_lat_lng", "aroundLatLng"),
    ParameterField("around_lat_lng_via_ip", "aroundLatLngViaIP"),
    ParameterField("around_radius", "aroundRadius"),
    ParameterField("around_precision", "aroundPrecision"),
    ParameterField("inside_bounding_box", "insideBoundingBox"),
)

FIELDS: tuple[ParameterField, ...] = (
    _CORE_FIELDS + MANAGED_FIELDS + _PAGINATION_FIELDS + PASSTHROUGH_FIELDS
)

#: Lookup by either spelling, ``hitsPerPage`` or ``hits_per_page``.
FIELDS_BY_KEY: dict[str, ParameterField] = {
    **{f.name: f for f in FIELDS},
    **{f.wire_name: f for f in FIELDS},
}
