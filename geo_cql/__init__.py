from geo_cql.conditions import *  # noqa: F401,F403
from geo_cql.conditions import __all__ as _conditions_all
from geo_cql.context import (
    CQLContext,
    create_cql_context,
    format_spatial_query,
    format_temporal_value,
    format_value,
    to_wkt,
)
from geo_cql.exceptions import (
    CQLError,
    InvalidConditionError,
    SpatialOperationError,
    UnsupportedConditionTypeError,
)
from geo_cql.query_builder import QueryBuilder, QueryOptions, query_builder


__all__ = [
    *_conditions_all,
    "CQLContext",
    "create_cql_context",
    "format_spatial_query",
    "format_temporal_value",
    "format_value",
    "to_wkt",
    "CQLError",
    "InvalidConditionError",
    "SpatialOperationError",
    "UnsupportedConditionTypeError",
    "QueryBuilder",
    "QueryOptions",
    "query_builder",
]
