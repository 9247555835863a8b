from typing import Any, Literal

from pydantic import Field, SkipValidation

from geo_cql.conditions._base import _AttributeCondition


class TextCondition(_AttributeCondition):
    """
    Pattern match on a text attribute:
        - like: the value is used as the pattern, callers add their own `%` / `_` wildcards
        - contains: the value is wrapped in `%...%`
    """
    type: Literal["like", "contains"]
    value: SkipValidation[Any] = Field(default=None, description="Pattern or substring")


def like(attr: str, value: str) -> TextCondition:
    return TextCondition(type="like", attr=attr, value=value)


def contains(attr: str, value: str) -> TextCondition:
    return TextCondition(type="contains", attr=attr, value=value)
