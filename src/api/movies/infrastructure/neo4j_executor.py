"""Neo4j implementation of the query executor.

Each call borrows a short-lived session from the shared, pooled driver.
Statements run in auto-commit mode: one statement, no retries.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

from neo4j import READ_ACCESS, WRITE_ACCESS, Query
from neo4j.exceptions import DriverError, Neo4jError

from infrastructure.database.exceptions import QueryError
from movies.infrastructure.observability import (
    DefaultQueryExecutorProbe,
    QueryExecutorProbe,
)
from movies.ports.protocols import QueryParameters, Row, WriteSummary

if TYPE_CHECKING:
    from neo4j import AsyncDriver, AsyncResult, AsyncSession


class Neo4jQueryExecutor:
    """Runs parameterized Cypher templates through the async driver.

    Example:
        executor = Neo4jQueryExecutor(driver, database="movies")

        row = await executor.fetch_one(
            "MATCH (m:Movie {title: $t}) RETURN m", {"t": "Heat"}
        )

        async for row in executor.stream("MATCH (m:Movie) RETURN m.title AS title"):
            ...
    """

    def __init__(
        self,
        driver: AsyncDriver,
        database: str,
        timeout_seconds: float | None = None,
        probe: QueryExecutorProbe | None = None,
    ):
        self._driver = driver
        self._database = database
        self._timeout = timeout_seconds
        self._probe = probe or DefaultQueryExecutorProbe()

    @property
    def database(self) -> str:
        """The name of the database queries are sent to."""
        return self._database

    def _session(self, access_mode: str) -> AsyncSession:
        return self._driver.session(
            database=self._database,
            default_access_mode=access_mode,
        )

    def _query(self, template: str) -> Query:
        return Query(template, timeout=self._timeout)

    async def _run(
        self,
        session: AsyncSession,
        template: str,
        parameters: QueryParameters | None,
    ) -> AsyncResult:
        return await session.run(self._query(template), dict(parameters or {}))

    def _query_error(self, template: str, error: Exception) -> QueryError:
        self._probe.query_failed(query=template, error=error)
        return QueryError(f"Query execution failed: {error}", query=template)

    async def fetch_one(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> Row | None:
        """Run a read query and return its first row, if any."""
        try:
            async with self._session(READ_ACCESS) as session:
                result = await self._run(session, template, parameters)
                records = await result.fetch(1)
                await result.consume()
        except (Neo4jError, DriverError) as e:
            raise self._query_error(template, e) from e

        return records[0] if records else None

    async def fetch_all(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> list[Row]:
        """Run a read query and materialize every row."""
        try:
            async with self._session(READ_ACCESS) as session:
                result = await self._run(session, template, parameters)
                return [record async for record in result]
        except (Neo4jError, DriverError) as e:
            raise self._query_error(template, e) from e

    async def stream(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> AsyncGenerator[Row, None]:
        """Run a read query and yield its rows as they arrive.

        The session stays open until the stream is exhausted or closed.
        """
        row_count = 0
        try:
            async with self._session(READ_ACCESS) as session:
                result = await self._run(session, template, parameters)
                async for record in result:
                    row_count += 1
                    yield record
        except (Neo4jError, DriverError) as e:
            raise self._query_error(template, e) from e

        self._probe.stream_completed(query=template, row_count=row_count)

    async def run(
        self,
        template: str,
        parameters: QueryParameters | None = None,
    ) -> WriteSummary:
        """Run a write statement and return only its counters."""
        try:
            async with self._session(WRITE_ACCESS) as session:
                result = await self._run(session, template, parameters)
                summary = await result.consume()
        except (Neo4jError, DriverError) as e:
            raise self._query_error(template, e) from e

        properties_set = summary.counters.properties_set
        self._probe.write_executed(query=template, properties_set=properties_set)
        return WriteSummary(properties_set=properties_set)
