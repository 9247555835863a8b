"""
Temporal operators. Every operator takes an attribute and either an instant (ISO-8601 string,
    date or datetime) or an interval, and renders as `<OPERATOR>(attr, TIMESTAMP(...))` or
    `<OPERATOR>(attr, INTERVAL(..., ...))`
"""

from typing import Literal

from pydantic import Field, SkipValidation

from geo_cql.conditions._base import TemporalValue, _AttributeCondition


TemporalOperator = Literal[
    "anyinteracts",
    "after", "before",
    "begins", "begunby",
    "tcontains", "during",
    "endedby", "ends",
    "tequals",
    "meets", "metby",
    "toverlaps", "overlappedby",
    "tintersects",
]


class TemporalCondition(_AttributeCondition):
    type: TemporalOperator
    value: SkipValidation[TemporalValue] = Field(default=None, description="Instant or interval")


def anyinteracts(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="anyinteracts", attr=attr, value=value)


def after(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="after", attr=attr, value=value)


def before(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="before", attr=attr, value=value)


def begins(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="begins", attr=attr, value=value)


def begunby(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="begunby", attr=attr, value=value)


def tcontains(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="tcontains", attr=attr, value=value)


def during(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="during", attr=attr, value=value)


def endedby(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="endedby", attr=attr, value=value)


def ends(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="ends", attr=attr, value=value)


def tequals(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="tequals", attr=attr, value=value)


def meets(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="meets", attr=attr, value=value)


def metby(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="metby", attr=attr, value=value)


def toverlaps(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="toverlaps", attr=attr, value=value)


def overlappedby(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="overlappedby", attr=attr, value=value)


def tintersects(attr: str, value: TemporalValue) -> TemporalCondition:
    return TemporalCondition(type="tintersects", attr=attr, value=value)
