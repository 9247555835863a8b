from typing import Union

from geo_cql.conditions._base import Geometry, Interval, TemporalValue
from geo_cql.conditions._comparison import (
    BetweenCondition,
    ComparisonCondition,
    between,
    eq,
    gt,
    gte,
    is_not_null,
    is_null,
    lt,
    lte,
    ne,
)
from geo_cql.conditions._text import TextCondition, contains, like
from geo_cql.conditions._logical import LogicalCondition, NotCondition, and_, not_, or_
from geo_cql.conditions._spatial import (
    SpatialCondition,
    crosses,
    disjoint,
    intersects,
    overlaps,
    spatial_contains,
    spatial_equals,
    touches,
    within,
)
from geo_cql.conditions._temporal import (
    TemporalCondition,
    after,
    anyinteracts,
    before,
    begins,
    begunby,
    during,
    endedby,
    ends,
    meets,
    metby,
    overlappedby,
    tcontains,
    tequals,
    tintersects,
    toverlaps,
)
from geo_cql.conditions._render import render


Condition = Union[
    ComparisonCondition,
    BetweenCondition,
    TextCondition,
    LogicalCondition,
    NotCondition,
    SpatialCondition,
    TemporalCondition,
]


__all__ = [
    "Condition",
    "Geometry",
    "Interval",
    "TemporalValue",
    "render",
    # models
    "ComparisonCondition",
    "BetweenCondition",
    "TextCondition",
    "LogicalCondition",
    "NotCondition",
    "SpatialCondition",
    "TemporalCondition",
    # comparison
    "eq",
    "ne",
    "lt",
    "lte",
    "gt",
    "gte",
    "between",
    "is_null",
    "is_not_null",
    # text
    "like",
    "contains",
    # logical
    "and_",
    "or_",
    "not_",
    # spatial
    "intersects",
    "disjoint",
    "spatial_contains",
    "within",
    "touches",
    "overlaps",
    "crosses",
    "spatial_equals",
    # temporal
    "anyinteracts",
    "after",
    "before",
    "begins",
    "begunby",
    "tcontains",
    "during",
    "endedby",
    "ends",
    "tequals",
    "meets",
    "metby",
    "toverlaps",
    "overlappedby",
    "tintersects",
]
