"""HTTP routes for the Movies bounded context."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from infrastructure.database.exceptions import QueryError
from movies.application.services import MovieService
from movies.dependencies import get_movie_service
from movies.domain.value_objects import (
    BrowseResponse,
    InvalidBrowseLimitError,
    Movie,
    MovieResult,
    Voted,
)
from movies.infrastructure.row_decoder import DecodeError

router = APIRouter(tags=["movies"])


def _server_fault(error: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Something went wrong: {error}",
    )


@router.get("/movie/{title}", response_model=Movie)
async def get_movie(
    title: str,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Get a movie and its cast by exact title.

    Returns a movie with every field null when no movie has that title.
    """
    try:
        return await service.fetch_movie(title)
    except (QueryError, DecodeError) as e:
        raise _server_fault(e) from e


@router.post("/movie/vote/{title}", response_model=Voted)
async def vote_for_movie(
    title: str,
    service: MovieService = Depends(get_movie_service),
) -> Voted:
    """Add one vote to a movie.

    Returns:
        {"updates": 1} when the movie exists, {"updates": 0} otherwise.
    """
    try:
        return await service.vote(title)
    except QueryError as e:
        raise _server_fault(e) from e


@router.get("/search", response_model=list[MovieResult])
async def search_movies(
    q: str,
    service: MovieService = Depends(get_movie_service),
) -> list[MovieResult]:
    """Search movies by case-insensitive title fragment.

    Query parameter:
        q: Title fragment; an empty value matches every movie
    """
    try:
        return await service.search(q)
    except (QueryError, DecodeError) as e:
        raise _server_fault(e) from e


@router.get("/graph", response_model=BrowseResponse)
async def browse_graph(
    limit: int | None = None,
    service: MovieService = Depends(get_movie_service),
) -> BrowseResponse:
    """Get the actor/movie subgraph for visualization.

    Query parameter:
        limit: Maximum number of movies visited (default 100)

    Returns:
        {
            "nodes": [{"title": ..., "label": "movie" | "actor"}, ...],
            "links": [{"source": <node index>, "target": <node index>}, ...]
        }
    """
    try:
        return await service.browse(limit)
    except InvalidBrowseLimitError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e
    except (QueryError, DecodeError) as e:
        raise _server_fault(e) from e
