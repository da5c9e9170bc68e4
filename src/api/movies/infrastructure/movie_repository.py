"""Neo4j-backed repository for the Movies bounded context."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import aclosing

from movies.domain.value_objects import CastRow, Movie, MovieResult
from movies.infrastructure import queries
from movies.infrastructure.row_decoder import (
    decode_cast_row,
    decode_movie,
    decode_movie_result,
)
from movies.ports.protocols import QueryExecutorProtocol
from movies.ports.repositories import IMovieRepository


class MovieRepository(IMovieRepository):
    """Movie reads and writes composed from the executor and row decoder.

    Single lookups use next-or-none retrieval; search and browse consume
    row streams; the vote uses a write that only reports counters.
    """

    def __init__(self, executor: QueryExecutorProtocol):
        """Initialize the repository.

        Args:
            executor: Executor bound to the movies database.
        """
        self._executor = executor

    async def find_by_title(self, title: str) -> Movie | None:
        row = await self._executor.fetch_one(
            queries.FIND_MOVIE_BY_TITLE, {"title": title}
        )
        if row is None:
            return None
        return decode_movie(row)

    async def increment_votes(self, title: str) -> int:
        summary = await self._executor.run(queries.VOTE_FOR_MOVIE, {"title": title})
        return 1 if summary.contains_updates else 0

    async def search_by_title(self, fragment: str) -> list[MovieResult]:
        stream = self._executor.stream(
            queries.SEARCH_MOVIES_BY_TITLE, {"part": fragment}
        )
        async with aclosing(stream) as rows:
            return [decode_movie_result(row) async for row in rows]

    async def stream_cast_rows(self, limit: int) -> AsyncIterator[CastRow]:
        stream = self._executor.stream(queries.BROWSE_ACTED_IN, {"limit": limit})
        async with aclosing(stream) as rows:
            async for row in rows:
                yield decode_cast_row(row)
