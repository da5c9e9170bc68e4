"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DriverProbe(Protocol):
    """Domain probe for Neo4j driver lifecycle observability.

    Captures events related to the application-scoped driver (and its
    connection pool) without exposing logging implementation details.
    """

    def driver_created(self, uri: str, database: str, max_pool_size: int) -> None:
        """Record that the driver and its pool were created."""
        ...

    def driver_creation_failed(self, uri: str, error: Exception) -> None:
        """Record that the driver could not be created."""
        ...

    def connectivity_verified(self, uri: str) -> None:
        """Record that the server answered a connectivity check."""
        ...

    def connectivity_check_failed(self, uri: str, error: Exception) -> None:
        """Record that a connectivity check failed."""
        ...

    def driver_closed(self) -> None:
        """Record that the driver and its pool were closed."""
        ...

    def with_context(self, context: ObservationContext) -> DriverProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDriverProbe:
    """Default implementation of DriverProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultDriverProbe:
        """Create a new probe with observation context bound."""
        return DefaultDriverProbe(logger=self._logger, context=context)

    def driver_created(self, uri: str, database: str, max_pool_size: int) -> None:
        self._logger.info(
            "neo4j_driver_created",
            uri=uri,
            database=database,
            max_pool_size=max_pool_size,
            **self._get_context_kwargs(),
        )

    def driver_creation_failed(self, uri: str, error: Exception) -> None:
        self._logger.error(
            "neo4j_driver_creation_failed",
            uri=uri,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def connectivity_verified(self, uri: str) -> None:
        self._logger.debug(
            "neo4j_connectivity_verified",
            uri=uri,
            **self._get_context_kwargs(),
        )

    def connectivity_check_failed(self, uri: str, error: Exception) -> None:
        self._logger.warning(
            "neo4j_connectivity_check_failed",
            uri=uri,
            error=str(error),
            **self._get_context_kwargs(),
        )

    def driver_closed(self) -> None:
        self._logger.info(
            "neo4j_driver_closed",
            **self._get_context_kwargs(),
        )
