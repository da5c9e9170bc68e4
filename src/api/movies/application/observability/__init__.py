"""Domain probes for Movies application layer."""

from movies.application.observability.movie_service_probe import MovieServiceProbe
from movies.application.observability.default_movie_service_probe import (
    DefaultMovieServiceProbe,
)

__all__ = [
    "MovieServiceProbe",
    "DefaultMovieServiceProbe",
]
