"""Default implementation of movie service probe.

Provides a structlog-based implementation of the MovieServiceProbe protocol
for observability at the use-case level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from movies.application.observability.movie_service_probe import MovieServiceProbe

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class DefaultMovieServiceProbe(MovieServiceProbe):
    """Default implementation of MovieServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultMovieServiceProbe:
        return DefaultMovieServiceProbe(logger=self._logger, context=context)

    def movie_fetched(self, title: str, found: bool, cast_size: int) -> None:
        self._logger.info(
            "movie_fetched",
            title=title,
            found=found,
            cast_size=cast_size,
            **self._get_context_kwargs(),
        )

    def movie_voted(self, title: str, updates: int) -> None:
        self._logger.info(
            "movie_voted",
            title=title,
            updates=updates,
            **self._get_context_kwargs(),
        )

    def movies_searched(self, query: str, result_count: int) -> None:
        self._logger.info(
            "movies_searched",
            query=query,
            result_count=result_count,
            **self._get_context_kwargs(),
        )

    def subgraph_browsed(self, limit: int, node_count: int, link_count: int) -> None:
        self._logger.info(
            "movies_subgraph_browsed",
            limit=limit,
            node_count=node_count,
            link_count=link_count,
            **self._get_context_kwargs(),
        )

    def browse_limit_rejected(self, limit: object) -> None:
        self._logger.warning(
            "movies_browse_limit_rejected",
            limit=repr(limit),
            **self._get_context_kwargs(),
        )
