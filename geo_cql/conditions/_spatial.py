from typing import Any, Literal, Optional

from pydantic import Field, SkipValidation

from geo_cql.conditions._base import Geometry, _AttributeCondition


# `eq` is the tag used by spatial_equals, it renders as EQUALS(...)
SpatialOperator = Literal[
    "intersects", "disjoint", "contains", "within",
    "touches", "overlaps", "crosses", "eq",
]


class SpatialCondition(_AttributeCondition):
    """
    Spatial relationship between a geometry attribute and a GeoJSON geometry. The geometry is
        stored untouched and only converted to WKT when rendered
    """
    type: SpatialOperator
    geometry: SkipValidation[Optional[Any]] = Field(default=None, description="GeoJSON geometry")


def intersects(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="intersects", attr=attr, geometry=geometry)


def disjoint(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="disjoint", attr=attr, geometry=geometry)


def spatial_contains(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="contains", attr=attr, geometry=geometry)


def within(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="within", attr=attr, geometry=geometry)


def touches(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="touches", attr=attr, geometry=geometry)


def overlaps(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="overlaps", attr=attr, geometry=geometry)


def crosses(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="crosses", attr=attr, geometry=geometry)


def spatial_equals(attr: str, geometry: Geometry) -> SpatialCondition:
    return SpatialCondition(type="eq", attr=attr, geometry=geometry)
