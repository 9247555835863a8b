from typing import Any, Literal, Optional

from pydantic import Field, SkipValidation

from geo_cql.conditions._base import _Condition


class LogicalCondition(_Condition):
    type: Literal["and", "or"]
    conditions: SkipValidation[tuple[Any, ...]] = Field(
        default=(), description="Child conditions, joined in order"
    )


class NotCondition(_Condition):
    type: Literal["not"] = "not"
    condition: SkipValidation[Optional[Any]] = Field(default=None, description="Negated condition")


def and_(*conditions: _Condition) -> LogicalCondition:
    """
    Joins conditions with AND. The children are referenced, not copied, so a prebuilt
        condition can be reused in several trees
    """
    return LogicalCondition(type="and", conditions=conditions)


def or_(*conditions: _Condition) -> LogicalCondition:
    return LogicalCondition(type="or", conditions=conditions)


def not_(condition: _Condition) -> NotCondition:
    return NotCondition(condition=condition)
