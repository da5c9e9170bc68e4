"""Decoding of raw result rows into Movies domain records.

A row is anything exposing ``get(column)``: a ``neo4j.Record``, a nested
map value, a ``neo4j.graph.Node`` or a plain dict. Missing and null
optional columns decode to ``None``; a value of the wrong type raises
``DecodeError`` naming the column.
"""

from __future__ import annotations

from typing import Any

from movies.domain.value_objects import CastRow, Movie, MovieResult, Person
from movies.ports.protocols import Row


class DecodeError(Exception):
    """Raised when a result column does not have the expected shape."""

    def __init__(self, column: str, expected: str, value: Any = None):
        super().__init__(
            f"Column {column!r}: expected {expected}, got {type(value).__name__}"
        )
        self.column = column
        self.expected = expected


def derive_job(relationship_type: str) -> str:
    """Turn a relationship type into a job classifier.

    ``"ACTED_IN"`` becomes ``"acted"``, ``"DIRECTED_BY"`` becomes
    ``"directed"``.
    """
    return relationship_type.lower().split("_", 1)[0]


def decode_movie(row: Row, prefix: str = "") -> Movie:
    """Decode a movie from title/released/tagline/votes/cast columns.

    Args:
        row: The row or nested map to read.
        prefix: Column path prepended to names in error messages.
    """
    raw_cast = _optional_list(row, "cast", prefix)
    cast = None
    if raw_cast is not None:
        cast = [
            decode_person(value, f"{prefix}cast[{i}]")
            for i, value in enumerate(raw_cast)
        ]

    return Movie(
        released=_optional_int(row, "released", prefix),
        title=_optional_str(row, "title", prefix),
        tagline=_optional_str(row, "tagline", prefix),
        votes=_optional_int(row, "votes", prefix),
        cast=cast,
    )


def decode_person(value: Any, column: str) -> Person:
    """Decode one ``{name, type, roles}`` map collected into a cast list."""
    person = _as_row(value, column)
    prefix = f"{column}."

    name = _optional_str(person, "name", prefix)
    if name is None:
        raise DecodeError(f"{prefix}name", "str")
    relationship_type = _optional_str(person, "type", prefix)
    if relationship_type is None:
        raise DecodeError(f"{prefix}type", "str")

    roles = _optional_list(person, "roles", prefix)
    if roles is not None:
        for i, role in enumerate(roles):
            if not isinstance(role, str):
                raise DecodeError(f"{prefix}roles[{i}]", "str", role)

    return Person(name=name, job=derive_job(relationship_type), role=roles)


def decode_movie_result(row: Row) -> MovieResult:
    """Decode a search row whose ``movie`` column holds a map or node."""
    value = row.get("movie")
    if value is None:
        raise DecodeError("movie", "map")
    return MovieResult(movie=decode_movie(_as_row(value, "movie"), prefix="movie."))


def decode_cast_row(row: Row) -> CastRow:
    """Decode a browse row: ``movie`` title and ``cast`` name list."""
    movie = row.get("movie")
    if not isinstance(movie, str):
        raise DecodeError("movie", "str", movie)

    cast = row.get("cast")
    if not isinstance(cast, (list, tuple)):
        raise DecodeError("cast", "list[str]", cast)
    for i, name in enumerate(cast):
        if not isinstance(name, str):
            raise DecodeError(f"cast[{i}]", "str", name)

    return CastRow(movie=movie, cast=list(cast))


def _as_row(value: Any, column: str) -> Row:
    if isinstance(value, (str, bytes)) or not callable(getattr(value, "get", None)):
        raise DecodeError(column, "map", value)
    return value


def _optional_str(row: Row, name: str, prefix: str) -> str | None:
    value = row.get(name)
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"{prefix}{name}", "str", value)
    return value


def _optional_int(row: Row, name: str, prefix: str) -> int | None:
    value = row.get(name)
    if value is None:
        return None
    # bool is an int subclass but never a valid count or year
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{prefix}{name}", "int", value)
    return value


def _optional_list(row: Row, name: str, prefix: str) -> list[Any] | None:
    value = row.get(name)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"{prefix}{name}", "list", value)
    return list(value)
