"""Query execution protocols for the Movies bounded context.

These protocols enable dependency inversion: repositories depend on the
executor abstraction, not on the Neo4j driver.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias

# Values bound to named query placeholders.
QueryParameters: TypeAlias = Mapping[str, str | int | None]


class Row(Protocol):
    """One result row, addressable by column name.

    Satisfied by ``neo4j.Record`` and by plain dicts.
    """

    def get(self, key: str, default: Any = None) -> Any: ...


@dataclass(frozen=True)
class WriteSummary:
    """Counters reported by the server after a write statement."""

    properties_set: int = 0

    @property
    def contains_updates(self) -> bool:
        return self.properties_set > 0


class QueryExecutorProtocol(Protocol):
    """Protocol for executing parameterized Cypher templates.

    Templates are fixed statement text; parameters are always bound by
    the driver and never interpolated into the template.
    """

    async def fetch_one(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> Row | None:
        """Run a read query and return its first row, if any.

        Raises:
            QueryError: If the query is rejected or fails.
        """
        ...

    async def fetch_all(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> list[Row]:
        """Run a read query and materialize every row.

        Raises:
            QueryError: If the query is rejected or fails.
        """
        ...

    def stream(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> AsyncGenerator[Row, None]:
        """Run a read query and yield rows lazily, in order, exactly once.

        Callers that may stop early must ``aclose()`` the generator so the
        session is released immediately.

        Raises:
            QueryError: If the query is rejected or fails at any point
                during iteration.
        """
        ...

    async def run(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> WriteSummary:
        """Run a write statement, discard its rows and return its counters.

        Raises:
            QueryError: If the statement is rejected or fails.
        """
        ...
