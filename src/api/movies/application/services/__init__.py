"""Application services for the Movies bounded context."""

from movies.application.services.movie_service import MovieService

__all__ = [
    "MovieService",
]
