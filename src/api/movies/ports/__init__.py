"""Ports for the Movies bounded context."""

from movies.ports.protocols import (
    QueryExecutorProtocol,
    QueryParameters,
    Row,
    WriteSummary,
)
from movies.ports.repositories import IMovieRepository

__all__ = [
    "IMovieRepository",
    "QueryExecutorProtocol",
    "QueryParameters",
    "Row",
    "WriteSummary",
]
