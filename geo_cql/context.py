"""
Formatting helpers used while rendering conditions to CQL text

A `CQLContext` bundles the three formatters (values, temporal values, spatial queries) and is
    created fresh for every top-level render call
"""

from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any, Callable, NamedTuple, Optional

import shapely.wkt
from shapely.errors import ShapelyError
from shapely.geometry import shape

from geo_cql.config import Configuration
from geo_cql.exceptions import SpatialOperationError
from geo_cql.logging import get_logger

logger = get_logger(__name__)


def to_iso_string(value: date) -> str:
    """
    Converts a date or datetime into an ISO-8601 UTC string with millisecond precision,
        e.g. `2023-01-01T00:00:00.000Z`

    Naive datetimes are taken as UTC, plain dates as midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_value(value: Any) -> str:
    """
    Formats a scalar as a CQL literal. Handles None, strings, booleans, dates and falls back
        to `str` for anything else (numbers etc.)

    Only single quotes are escaped (`'` becomes `\'`). Backslashes are passed through, so a
        string ending in a backslash can close the literal early; do not pass untrusted text
        containing backslashes
    """
    if value is None:
        return "NULL"
    if isinstance(value, str):
        esc = value.replace("'", "\\'")
        return f"'{esc}'"
    # bool before numbers, bool is an int
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, date):
        return f"TIMESTAMP('{to_iso_string(value)}')"
    return str(value)


def _interval_bounds(value: Any) -> Optional[tuple[Any, Any]]:
    if isinstance(value, Mapping):
        if "start" in value and "end" in value:
            return value["start"], value["end"]
        return None
    if hasattr(value, "start") and hasattr(value, "end"):
        return value.start, value.end
    return None


def _instant_text(value: Any) -> str:
    if isinstance(value, date):
        return to_iso_string(value)
    return str(value)


def format_temporal_value(value: Any) -> str:
    """
    Formats an instant or an interval for the temporal operators

    Args:
        - value: a date/datetime, an ISO-8601 string (passed through untouched), or an
            interval with `start` and `end` (mapping or `Interval`)

    Returns:
        `TIMESTAMP('...')` for instants, `INTERVAL('...', '...')` for intervals
    """
    if isinstance(value, date):
        return f"TIMESTAMP('{to_iso_string(value)}')"
    if isinstance(value, str):
        return f"TIMESTAMP('{value}')"

    bounds = _interval_bounds(value)
    if bounds is not None:
        start, end = bounds
        return f"INTERVAL('{_instant_text(start)}', '{_instant_text(end)}')"
    return str(value)


def to_wkt(geometry: Any) -> str:
    """
    Converts a GeoJSON geometry (or anything with `__geo_interface__`) into Well-Known Text
    """
    geom = shape(geometry)
    return shapely.wkt.dumps(
        geom,
        trim=Configuration.wkt_trim,
        rounding_precision=Configuration.wkt_rounding_precision,
    )


def format_spatial_query(operator: str, attribute: str, geometry: Any) -> str:
    """
    Builds `<OPERATOR>(<attribute>, <WKT>)` for a spatial predicate

    Raises:
        - SpatialOperationError: the geometry could not be parsed
    """
    try:
        wkt = to_wkt(geometry)
    except (ShapelyError, ValueError, TypeError, KeyError, IndexError, AttributeError) as e:
        logger.debug(f"Could not convert geometry for {operator} on {attribute}: {e}")
        raise SpatialOperationError(operator, str(e)) from e
    return f"{operator}({attribute}, {wkt})"


class CQLContext(NamedTuple):
    format_value: Callable[[Any], str]
    format_temporal_value: Callable[[Any], str]
    format_spatial_query: Callable[[str, str, Any], str]


def create_cql_context() -> CQLContext:
    return CQLContext(
        format_value=format_value,
        format_temporal_value=format_temporal_value,
        format_spatial_query=format_spatial_query,
    )
