# conftest.py
import pytest

from geo_cql.context import create_cql_context


@pytest.fixture
def ctx():
    return create_cql_context()


@pytest.fixture
def point_geometry():
    return {"type": "Point", "coordinates": [0, 0]}


@pytest.fixture
def line_geometry():
    return {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}


@pytest.fixture
def polygon_geometry():
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
    }
