import pytest
from urllib.parse import quote, unquote

from geo_cql.conditions import (
    after,
    and_,
    between,
    contains,
    eq,
    gt,
    intersects,
    is_null,
    like,
)
from geo_cql.config import Configuration
from geo_cql.exceptions import InvalidConditionError, SpatialOperationError
from geo_cql.query_builder import QueryBuilder, query_builder


def test_empty_builder_renders_empty_string():
    assert QueryBuilder().to_cql() == ""
    assert QueryBuilder().to_cql_url_safe() == ""


def test_filter_sets_condition():
    qb = QueryBuilder()
    condition = eq("status", "ACTIVE")
    assert qb.filter(condition) is qb
    assert qb.options.filter is condition


def test_filter_replaces_previous():
    qb = QueryBuilder().filter(eq("status", "ACTIVE")).filter(gt("age", 18))
    assert qb.to_cql() == "age > 18"


def test_filter_accepts_callable():
    qb = QueryBuilder().filter(lambda op: op.and_(op.eq("status", "ACTIVE"), op.is_not_null("email")))
    assert qb.to_cql() == "(status = 'ACTIVE' AND email IS NOT NULL)"


def test_factory():
    qb = query_builder()
    assert isinstance(qb, QueryBuilder)
    assert qb.filter(is_null("deletedAt")).to_cql() == "deletedAt IS NULL"


def test_clone_keeps_filter():
    qb = QueryBuilder().filter(eq("status", "ACTIVE"))
    clone = qb.clone()
    assert clone is not qb
    assert clone.to_cql() == qb.to_cql()
    # root condition is shared, not copied
    assert clone.options.filter is qb.options.filter


def test_clone_is_independent():
    qb = QueryBuilder().filter(eq("status", "ACTIVE"))
    clone = qb.clone()
    clone.filter(eq("status", "PENDING"))
    assert qb.to_cql() == "status = 'ACTIVE'"
    assert clone.to_cql() == "status = 'PENDING'"

    qb.filter(eq("status", "DELETED"))
    assert clone.to_cql() == "status = 'PENDING'"


def test_compose_with_previous_filter():
    qb = QueryBuilder().filter(eq("type", "product"))
    qb.filter(and_(qb.options.filter, between("price", 10, 20)))
    assert qb.to_cql() == "(type = 'product' AND price BETWEEN 10 AND 20)"


def test_url_safe_round_trip():
    qb = QueryBuilder().filter(
        and_(
            eq("name", "John & Jane"),
            contains("description", "100% satisfaction"),
        )
    )
    cql = qb.to_cql()
    url_safe = qb.to_cql_url_safe()

    assert cql == "(name = 'John & Jane' AND description LIKE '%100% satisfaction%')"
    assert " " not in url_safe
    assert "&" not in url_safe
    assert unquote(url_safe) == cql


def test_url_safe_matches_encode_uri_component():
    qb = QueryBuilder().filter(like("name", "A%"))
    assert qb.to_cql_url_safe() == "name%20LIKE%20'A%25'"
    assert qb.to_cql_url_safe() == quote("name LIKE 'A%'", safe="!*'()")


@pytest.mark.parametrize(
    "condition",
    [
        eq("title", "it's = 50% off & more"),
        and_(eq("a", "x/y?z#w"), like("b", "ü+é")),
        after("eventDate", "2023-01-01T00:00:00+02:00"),
        intersects("geom", {"type": "Point", "coordinates": [1.5, -2]}),
    ],
)
def test_url_safe_decodes_to_cql(condition):
    qb = QueryBuilder().filter(condition)
    assert unquote(qb.to_cql_url_safe()) == qb.to_cql()


def test_render_errors_propagate():
    with pytest.raises(InvalidConditionError):
        QueryBuilder().filter(and_()).to_cql()
    with pytest.raises(SpatialOperationError):
        QueryBuilder().filter(intersects("geom", {"type": "Nope"})).to_cql_url_safe()


def test_to_cql_logs_rendered_string(caplog):
    with caplog.at_level("DEBUG", logger="geo_cql"):
        QueryBuilder().filter(gt("age", 18)).to_cql()
    assert "age > 18" in caplog.text


def test_url_safe_characters_setting(monkeypatch):
    monkeypatch.setattr(Configuration, "url_safe_characters", "")
    qb = QueryBuilder().filter(like("name", "A%"))
    assert qb.to_cql_url_safe() == "name%20LIKE%20%27A%25%27"
    assert unquote(qb.to_cql_url_safe()) == qb.to_cql()


def test_clone_logs(caplog):
    qb = QueryBuilder().filter(gt("age", 18))
    with caplog.at_level("DEBUG", logger="geo_cql"):
        qb.clone()
    assert "Cloned query builder" in caplog.text
