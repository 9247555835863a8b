"""
Turns a condition tree into CQL2 text

`render` dispatches on the condition model and its `type` tag. Required fields are checked
    here rather than in the constructors, so an incomplete condition only fails once it is
    rendered
"""

from typing import Any, get_args

from geo_cql.context import CQLContext
from geo_cql.exceptions import InvalidConditionError, UnsupportedConditionTypeError
from geo_cql.conditions._base import _AttributeCondition
from geo_cql.conditions._comparison import BetweenCondition, ComparisonCondition
from geo_cql.conditions._logical import LogicalCondition, NotCondition
from geo_cql.conditions._spatial import SpatialCondition
from geo_cql.conditions._temporal import TemporalCondition, TemporalOperator
from geo_cql.conditions._text import TextCondition


_COMPARISON_SYMBOLS = {
    "eq": "=",
    "ne": "<>",
    "lt": "<",
    "lte": "<=",
    "gt": ">",
    "gte": ">=",
}

_NULL_CHECKS = {
    "eq": "IS NULL",
    "ne": "IS NOT NULL",
}

_SPATIAL_KEYWORDS = {
    "intersects": "INTERSECTS",
    "disjoint": "DISJOINT",
    "contains": "CONTAINS",
    "within": "WITHIN",
    "touches": "TOUCHES",
    "overlaps": "OVERLAPS",
    "crosses": "CROSSES",
    "eq": "EQUALS",
}

_LOGICAL_KEYWORDS = {
    "and": " AND ",
    "or": " OR ",
}

_TEMPORAL_OPERATORS = frozenset(get_args(TemporalOperator))


def _require_attr(condition: _AttributeCondition) -> str:
    if not condition.attr:
        raise InvalidConditionError(condition.type, condition.payload(), "attr")
    return condition.attr


def _unsupported(condition: Any) -> UnsupportedConditionTypeError:
    condition_type = getattr(condition, "type", type(condition).__name__)
    return UnsupportedConditionTypeError(str(condition_type), condition)


def _render_comparison(condition: ComparisonCondition, context: CQLContext) -> str:
    if condition.type not in _COMPARISON_SYMBOLS:
        raise _unsupported(condition)
    attr = _require_attr(condition)

    if condition.value is None and condition.type in _NULL_CHECKS:
        return f"{attr} {_NULL_CHECKS[condition.type]}"
    return f"{attr} {_COMPARISON_SYMBOLS[condition.type]} {context.format_value(condition.value)}"


def _render_between(condition: BetweenCondition, context: CQLContext) -> str:
    if condition.type != "between":
        raise _unsupported(condition)
    attr = _require_attr(condition)

    bounds = condition.value
    if not isinstance(bounds, (tuple, list)) or len(bounds) != 2:
        raise InvalidConditionError(
            condition.type, condition.payload(), "value ([lower, upper] pair)"
        )
    lower, upper = bounds
    return f"{attr} BETWEEN {context.format_value(lower)} AND {context.format_value(upper)}"


def _render_text(condition: TextCondition, context: CQLContext) -> str:
    attr = _require_attr(condition)

    if condition.type == "like":
        return f"{attr} LIKE {context.format_value(condition.value)}"
    if condition.type == "contains":
        if condition.value is None:
            raise InvalidConditionError(condition.type, condition.payload(), "value")
        return f"{attr} LIKE {context.format_value(f'%{condition.value}%')}"
    raise _unsupported(condition)


def _render_spatial(condition: SpatialCondition, context: CQLContext) -> str:
    if condition.type not in _SPATIAL_KEYWORDS:
        raise _unsupported(condition)
    attr = _require_attr(condition)

    if not condition.geometry:
        raise InvalidConditionError(condition.type, condition.payload(), "geometry")
    return context.format_spatial_query(_SPATIAL_KEYWORDS[condition.type], attr, condition.geometry)


def _render_temporal(condition: TemporalCondition, context: CQLContext) -> str:
    if condition.type not in _TEMPORAL_OPERATORS:
        raise _unsupported(condition)
    attr = _require_attr(condition)

    return f"{condition.type.upper()}({attr}, {context.format_temporal_value(condition.value)})"


def _render_logical(condition: LogicalCondition, context: CQLContext) -> str:
    if condition.type not in _LOGICAL_KEYWORDS:
        raise _unsupported(condition)
    if not condition.conditions:
        raise InvalidConditionError(condition.type, condition.payload(), "conditions")

    parts = [render(child, context) for child in condition.conditions]
    return f"({_LOGICAL_KEYWORDS[condition.type].join(parts)})"


def _render_not(condition: NotCondition, context: CQLContext) -> str:
    if condition.type != "not":
        raise _unsupported(condition)
    if condition.condition is None:
        raise InvalidConditionError(condition.type, condition.payload(), "condition")
    return f"NOT ({render(condition.condition, context)})"


# Spatial first: a geometry payload wins over a plain value
_RENDERERS = [
    (SpatialCondition, _render_spatial),
    (ComparisonCondition, _render_comparison),
    (BetweenCondition, _render_between),
    (TextCondition, _render_text),
    (TemporalCondition, _render_temporal),
    (LogicalCondition, _render_logical),
    (NotCondition, _render_not),
]


def render(condition: Any, context: CQLContext) -> str:
    """
    Renders a condition (and its children) as CQL2 text

    Args:
        - condition: any condition built by the operator functions
        - context: formatters to use, see `geo_cql.context.create_cql_context`

    Raises:
        - InvalidConditionError: a required field is missing or malformed
        - UnsupportedConditionTypeError: the condition or its tag is not known
        - SpatialOperationError: a geometry could not be converted to WKT
    """
    for model, renderer in _RENDERERS:
        if isinstance(condition, model):
            return renderer(condition, context)
    raise _unsupported(condition)
