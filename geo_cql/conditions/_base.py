"""
Base classes and shared types for conditions

Conditions are frozen pydantic models. Payload fields skip validation so that a condition can
    always be built, stored and combined before it is complete; missing fields are only
    reported when the condition is rendered
"""

from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, SkipValidation

from geo_cql.context import CQLContext, create_cql_context

# GeoJSON geometry mapping, e.g. {"type": "Point", "coordinates": [0, 0]}
Geometry = dict[str, Any]


class Interval(BaseModel):
    """
    A closed time interval. Each end is either an ISO-8601 string or a date / datetime
    """
    model_config = ConfigDict(frozen=True)

    start: Union[str, datetime, date]
    end: Union[str, datetime, date]


TemporalValue = Union[str, datetime, date, Interval, dict[str, Union[str, datetime, date]]]


class _Condition(BaseModel):
    """
    Base condition class, every subclass narrows `type` to the operator tags it covers
    """
    model_config = ConfigDict(frozen=True)

    type: str

    def payload(self) -> dict[str, Any]:
        """
        Returns the fields of the condition as a plain dict, used when reporting errors
        """
        return {name: getattr(self, name) for name in type(self).model_fields}

    def to_cql(self, context: Optional[CQLContext] = None) -> str:
        """
        Renders this condition on its own. See `geo_cql.conditions.render`
        """
        from geo_cql.conditions._render import render

        return render(self, context or create_cql_context())


class _AttributeCondition(_Condition):
    attr: SkipValidation[Optional[str]] = None
