"""Movie service: the use cases exposed to the HTTP layer.

Application service composing the repository (query execution and row
decoding) with the subgraph assembler.
"""

from __future__ import annotations

from movies.application.observability import (
    DefaultMovieServiceProbe,
    MovieServiceProbe,
)
from movies.domain.graph_assembler import assemble_subgraph
from movies.domain.value_objects import (
    DEFAULT_BROWSE_LIMIT,
    MAX_BROWSE_LIMIT,
    BrowseResponse,
    InvalidBrowseLimitError,
    Movie,
    MovieResult,
    Voted,
)
from movies.ports.repositories import IMovieRepository


class MovieService:
    """Application service for movie lookups, votes, search and browsing.

    Holds no per-request state: every call allocates its own results, so
    one instance may serve concurrent requests.
    """

    def __init__(
        self,
        repository: IMovieRepository,
        probe: MovieServiceProbe | None = None,
        default_browse_limit: int = DEFAULT_BROWSE_LIMIT,
    ):
        """Initialize the service.

        Args:
            repository: The movie repository for data access.
            probe: Optional domain probe for observability.
            default_browse_limit: Rows visited by browse when no limit is given.
        """
        self._repository = repository
        self._probe = probe or DefaultMovieServiceProbe()
        self._default_browse_limit = default_browse_limit

    async def fetch_movie(self, title: str) -> Movie:
        """Look up a movie and its cast by exact title.

        Returns:
            The movie, or a Movie with every field empty when there is
            no match. A missing movie is not an error.
        """
        movie = await self._repository.find_by_title(title)
        self._probe.movie_fetched(
            title=title,
            found=movie is not None,
            cast_size=len(movie.cast or []) if movie is not None else 0,
        )
        if movie is None:
            return Movie()
        return movie

    async def vote(self, title: str) -> Voted:
        """Add one vote to a movie, starting from 0 if it has none.

        Returns:
            Voted with ``updates`` 1 when the movie exists, 0 otherwise.
        """
        updates = await self._repository.increment_votes(title)
        self._probe.movie_voted(title=title, updates=updates)
        return Voted(updates=updates)

    async def search(self, query: str) -> list[MovieResult]:
        """Find movies whose title contains ``query``, ignoring case.

        An empty query matches every movie.
        """
        results = await self._repository.search_by_title(query)
        self._probe.movies_searched(query=query, result_count=len(results))
        return results

    async def browse(self, limit: int | None = None) -> BrowseResponse:
        """Build the deduplicated actor/movie subgraph.

        Args:
            limit: Maximum number of movies visited (default 100).

        Raises:
            InvalidBrowseLimitError: If limit is not an integer between 1
                and MAX_BROWSE_LIMIT.
        """
        if limit is None:
            limit = self._default_browse_limit
        if (
            isinstance(limit, bool)
            or not isinstance(limit, int)
            or not 1 <= limit <= MAX_BROWSE_LIMIT
        ):
            self._probe.browse_limit_rejected(limit=limit)
            raise InvalidBrowseLimitError(limit)

        response = await assemble_subgraph(self._repository.stream_cast_rows(limit))
        self._probe.subgraph_browsed(
            limit=limit,
            node_count=len(response.nodes),
            link_count=len(response.links),
        )
        return response
