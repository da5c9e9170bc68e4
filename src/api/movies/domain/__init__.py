"""Movies domain module.

Contains value objects and the subgraph assembler for the Movies
bounded context.
"""

from movies.domain.graph_assembler import SubgraphBuilder, assemble_subgraph
from movies.domain.value_objects import (
    DEFAULT_BROWSE_LIMIT,
    MAX_BROWSE_LIMIT,
    BrowseResponse,
    CastRow,
    InvalidBrowseLimitError,
    Link,
    Movie,
    MovieResult,
    Node,
    NodeLabel,
    Person,
    Voted,
)

__all__ = [
    "DEFAULT_BROWSE_LIMIT",
    "MAX_BROWSE_LIMIT",
    "BrowseResponse",
    "CastRow",
    "InvalidBrowseLimitError",
    "Link",
    "Movie",
    "MovieResult",
    "Node",
    "NodeLabel",
    "Person",
    "SubgraphBuilder",
    "Voted",
    "assemble_subgraph",
]
