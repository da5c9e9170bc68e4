"""Domain value objects for the Movies bounded context.

These are immutable data structures built from query results and
discarded after serialization. Field names are the wire names.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BROWSE_LIMIT = 100
# Largest value a Cypher integer parameter can carry.
MAX_BROWSE_LIMIT = 2**63 - 1


class InvalidBrowseLimitError(ValueError):
    """Raised when a browse limit is not a positive 64-bit integer."""

    def __init__(self, limit: object):
        super().__init__(
            f"Browse limit must be a positive integer no greater than "
            f"{MAX_BROWSE_LIMIT}, got {limit!r}"
        )
        self.limit = limit


class NodeLabel(str, Enum):
    """Kind of entity a subgraph node stands for."""

    MOVIE = "movie"
    ACTOR = "actor"


class Person(BaseModel):
    """A person connected to a movie.

    Attributes:
        name: The person's name
        job: Classifier derived from the relationship type (e.g. "acted")
        role: Character names played, when the relationship carries them
    """

    model_config = ConfigDict(frozen=True)

    name: str
    job: str
    role: list[str] | None = None


class Movie(BaseModel):
    """A movie and, when fetched by title, its cast.

    Every field is optional: a lookup with no match yields ``Movie()``.
    """

    model_config = ConfigDict(frozen=True)

    released: int | None = None
    title: str | None = None
    tagline: str | None = None
    votes: int | None = None
    cast: list[Person] | None = None


class MovieResult(BaseModel):
    """One search hit."""

    model_config = ConfigDict(frozen=True)

    movie: Movie


class Voted(BaseModel):
    """Outcome of a vote: how many movies had their vote count updated."""

    model_config = ConfigDict(frozen=True)

    updates: int


class CastRow(BaseModel):
    """One decoded browse row: a movie title and the names of its actors."""

    model_config = ConfigDict(frozen=True)

    movie: str
    cast: list[str] = Field(default_factory=list)


class Node(BaseModel):
    """A subgraph node. Its identity is its index in ``BrowseResponse.nodes``."""

    model_config = ConfigDict(frozen=True)

    title: str
    label: NodeLabel


class Link(BaseModel):
    """A directed pair of node indices: ``source`` appears in ``target``."""

    model_config = ConfigDict(frozen=True)

    source: int
    target: int


class BrowseResponse(BaseModel):
    """Deduplicated node/link subgraph for visualization."""

    model_config = ConfigDict(frozen=True)

    nodes: list[Node] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list)
