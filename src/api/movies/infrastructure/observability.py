"""Domain probes for Movies query execution observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class QueryExecutorProbe(Protocol):
    """Domain probe for Cypher execution against Neo4j."""

    def query_failed(self, query: str, error: Exception) -> None:
        """Record that a query was rejected or failed mid-execution."""
        ...

    def stream_completed(self, query: str, row_count: int) -> None:
        """Record that a row stream was consumed to the end."""
        ...

    def write_executed(self, query: str, properties_set: int) -> None:
        """Record that a write statement completed."""
        ...

    def with_context(self, context: ObservationContext) -> QueryExecutorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultQueryExecutorProbe:
    """Default implementation of QueryExecutorProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, str | None]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultQueryExecutorProbe:
        """Create a new probe with observation context bound."""
        return DefaultQueryExecutorProbe(logger=self._logger, context=context)

    def query_failed(self, query: str, error: Exception) -> None:
        self._logger.error(
            "movies_query_failed",
            query=query,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def stream_completed(self, query: str, row_count: int) -> None:
        self._logger.debug(
            "movies_stream_completed",
            query=query,
            row_count=row_count,
            **self._get_context_kwargs(),
        )

    def write_executed(self, query: str, properties_set: int) -> None:
        self._logger.debug(
            "movies_write_executed",
            query=query,
            properties_set=properties_set,
            **self._get_context_kwargs(),
        )
