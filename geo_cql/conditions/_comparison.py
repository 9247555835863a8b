from typing import Any, Literal

from pydantic import Field, SkipValidation

from geo_cql.conditions._base import _AttributeCondition


ComparisonOperator = Literal["eq", "ne", "lt", "lte", "gt", "gte"]


class ComparisonCondition(_AttributeCondition):
    """
    Binary comparison between an attribute and a scalar. A `None` value on `eq` / `ne` renders
        as `IS NULL` / `IS NOT NULL`
    """
    type: ComparisonOperator
    value: SkipValidation[Any] = Field(default=None, description="Value to compare against")


class BetweenCondition(_AttributeCondition):
    type: Literal["between"] = "between"
    value: SkipValidation[Any] = Field(default=None, description="(lower, upper) bounds")


def eq(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="eq", attr=attr, value=value)


def ne(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="ne", attr=attr, value=value)


def lt(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="lt", attr=attr, value=value)


def lte(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="lte", attr=attr, value=value)


def gt(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="gt", attr=attr, value=value)


def gte(attr: str, value: Any) -> ComparisonCondition:
    return ComparisonCondition(type="gte", attr=attr, value=value)


def between(attr: str, lower: Any, upper: Any) -> BetweenCondition:
    """
    Inclusive range check, `attr BETWEEN lower AND upper`. Bounds are kept in the order given
    """
    return BetweenCondition(attr=attr, value=(lower, upper))


def is_null(attr: str) -> ComparisonCondition:
    return eq(attr, None)


def is_not_null(attr: str) -> ComparisonCondition:
    return ne(attr, None)
