"""Repository interfaces (ports) for the Movies bounded context."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable

from movies.domain.value_objects import CastRow, Movie, MovieResult


@runtime_checkable
class IMovieRepository(Protocol):
    """Data access for movies, their cast and the actor/movie subgraph."""

    async def find_by_title(self, title: str) -> Movie | None:
        """Find a movie by exact title, with its cast.

        Returns:
            The movie, or None when no movie has that title.
        """
        ...

    async def increment_votes(self, title: str) -> int:
        """Add one vote to the movie with this exact title.

        Returns:
            Number of movies updated (0 or 1).
        """
        ...

    async def search_by_title(self, fragment: str) -> list[MovieResult]:
        """Find movies whose title contains ``fragment``, ignoring case."""
        ...

    def stream_cast_rows(self, limit: int) -> AsyncIterator[CastRow]:
        """Yield at most ``limit`` (movie, actor names) rows, lazily."""
        ...
