from types import ModuleType
from typing import Any, Callable, Optional, Self, Union
from urllib.parse import quote

from pydantic import BaseModel, SkipValidation

from geo_cql import conditions
from geo_cql.conditions import Condition, render
from geo_cql.config import Configuration
from geo_cql.context import create_cql_context
from geo_cql.logging import get_logger

logger = get_logger(__name__)


class QueryOptions(BaseModel):
    filter: SkipValidation[Optional[Any]] = None


class QueryBuilder:
    """
    Builds an OGC CQL2 filter string from a condition tree

    Methods:
        - filter: Sets (replaces) the root condition
        - clone: Copies the builder, the root condition itself is shared
        - to_cql: Renders the root condition as CQL text
        - to_cql_url_safe: Renders and percent-encodes for use in a query string

    Example:
        ```
        QueryBuilder().filter(and_(eq("status", "ACTIVE"), gt("age", 18))).to_cql()
        # "(status = 'ACTIVE' AND age > 18)"
        ```
    """

    def __init__(self):
        self.options = QueryOptions()

    def filter(
        self,
        condition: Union[Condition, Callable[[ModuleType], Condition]]
    ) -> Self:
        """
        Sets the filter condition, replacing any previous one. To keep the old filter combine
            it yourself, e.g. `and_(old, new)`

        Args:
            - condition: a condition, or a callable that receives the operator namespace
                (`geo_cql.conditions`) and returns one, e.g. `lambda op: op.eq("a", 1)`
        """
        if callable(condition):
            condition = condition(conditions)
        if self.options.filter is not None:
            logger.debug(f"Replacing filter {self.options.filter!r}")
        self.options = self.options.model_copy(update={"filter": condition})
        return self

    def clone(self) -> Self:
        new_builder = type(self)()
        new_builder.options = self.options.model_copy()
        logger.debug(f"Cloned query builder with filter {self.options.filter!r}")
        return new_builder

    def to_cql(self) -> str:
        """
        Renders the current filter as CQL text, or an empty string when no filter is set
        """
        if self.options.filter is None:
            return ""
        cql = render(self.options.filter, create_cql_context())
        logger.debug(f"Rendered CQL: {cql}")
        return cql

    def to_cql_url_safe(self) -> str:
        """
        Renders the current filter and URL-encodes it (spaces → %20, & → %26, etc.) so it can be
            used directly as a query-string value, e.g. `?filter=...`
        """
        return quote(self.to_cql(), safe=Configuration.url_safe_characters)


def query_builder() -> QueryBuilder:
    return QueryBuilder()
