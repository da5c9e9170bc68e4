"""Protocol for movie service observability.

Defines the interface for domain probes that capture application-level
domain events for movie service operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class MovieServiceProbe(Protocol):
    """Domain probe for movie service operations."""

    def movie_fetched(self, title: str, found: bool, cast_size: int) -> None:
        """Record that a movie was looked up by title."""
        ...

    def movie_voted(self, title: str, updates: int) -> None:
        """Record that a vote was cast for a movie."""
        ...

    def movies_searched(self, query: str, result_count: int) -> None:
        """Record that a title search was performed."""
        ...

    def subgraph_browsed(self, limit: int, node_count: int, link_count: int) -> None:
        """Record that the actor/movie subgraph was assembled."""
        ...

    def browse_limit_rejected(self, limit: object) -> None:
        """Record that a browse request carried an invalid limit."""
        ...

    def with_context(self, context: ObservationContext) -> MovieServiceProbe:
        """Create a new probe with observation context bound."""
        ...
