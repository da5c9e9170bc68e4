"""Assembly of the actor/movie subgraph from streamed cast rows.

Nodes live in one append-only list and are addressed by index. Actors are
coalesced by exact name through a lookup map that is private to a single
assembly; movies are never coalesced, so a title seen twice yields two
nodes.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, Iterable

from movies.domain.value_objects import (
    BrowseResponse,
    CastRow,
    Link,
    Node,
    NodeLabel,
)


class SubgraphBuilder:
    """Accumulates nodes and links one row at a time.

    Usage:
        builder = SubgraphBuilder()
        builder.add_row("The Matrix", ["Keanu Reeves", "Carrie-Anne Moss"])
        response = builder.build()
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._actors: dict[str, int] = {}

    def add_row(self, movie: str, cast: Iterable[str]) -> int:
        """Append a movie node and link every cast member to it.

        Returns:
            The index of the new movie node.
        """
        target = self._append(Node(title=movie, label=NodeLabel.MOVIE))

        for actor in cast:
            source = self._actors.get(actor)
            if source is None:
                source = self._append(Node(title=actor, label=NodeLabel.ACTOR))
                self._actors[actor] = source
            self._links.append(Link(source=source, target=target))

        return target

    def build(self) -> BrowseResponse:
        return BrowseResponse(nodes=list(self._nodes), links=list(self._links))

    def _append(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1


async def assemble_subgraph(rows: AsyncIterable[CastRow]) -> BrowseResponse:
    """Consume a cast row stream and return the deduplicated subgraph.

    The stream is trusted to be already bounded by the query. Any error
    raised while iterating propagates; nothing partial is returned.
    """
    builder = SubgraphBuilder()
    async for row in rows:
        builder.add_row(row.movie, row.cast)
    return builder.build()
