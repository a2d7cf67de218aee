"""Search parameters – immutable search-request state."""
from search_helper.parameters.draft import ParametersDraft
from search_helper.parameters.fields import (
    FIELDS,
    MANAGED_FIELDS,
    NUMERIC_OPERATORS,
    PASSTHROUGH_FIELDS,
    NumericOperator,
    ParameterField,
)
from search_helper.parameters.state import (
    DEFAULT_HITS_PER_PAGE,
    DEFAULT_MAX_VALUES_PER_FACET,
    SearchParameters,
)

__all__ = [
    "DEFAULT_HITS_PER_PAGE",
    "DEFAULT_MAX_VALUES_PER_FACET",
    "FIELDS",
    "MANAGED_FIELDS",
    "NUMERIC_OPERATORS",
    "NumericOperator",
    "PASSTHROUGH_FIELDS",
    "ParameterField",
    "ParametersDraft",
    "SearchParameters",
]
