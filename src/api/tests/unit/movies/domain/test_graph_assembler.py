"""Unit tests for actor/movie subgraph assembly."""

import pytest

from movies.domain.graph_assembler import SubgraphBuilder, assemble_subgraph
from movies.domain.value_objects import CastRow, Link, Node, NodeLabel


async def _rows(*rows: CastRow):
    for row in rows:
        yield row


class TestSubgraphBuilder:
    """Tests for the append-only node/link builder."""

    def test_empty_builder_produces_empty_graph(self):
        """No rows should give no nodes and no links."""
        response = SubgraphBuilder().build()

        assert response.nodes == []
        assert response.links == []

    def test_movie_then_actors_example(self):
        """Shared actors should be coalesced and links point at their index."""
        builder = SubgraphBuilder()
        builder.add_row("M1", ["A", "B"])
        builder.add_row("M2", ["B"])

        response = builder.build()

        assert response.nodes == [
            Node(title="M1", label=NodeLabel.MOVIE),
            Node(title="A", label=NodeLabel.ACTOR),
            Node(title="B", label=NodeLabel.ACTOR),
            Node(title="M2", label=NodeLabel.MOVIE),
        ]
        assert response.links == [
            Link(source=1, target=0),
            Link(source=2, target=0),
            Link(source=2, target=3),
        ]

    def test_add_row_returns_movie_index(self):
        """add_row should return the index of the appended movie node."""
        builder = SubgraphBuilder()

        assert builder.add_row("M1", ["A", "B"]) == 0
        assert builder.add_row("M2", []) == 3

    def test_repeated_movie_title_is_not_deduplicated(self):
        """Each row gets a fresh movie node even when the title repeats."""
        builder = SubgraphBuilder()
        builder.add_row("Same", ["A"])
        builder.add_row("Same", ["A"])

        response = builder.build()

        movies = [n for n in response.nodes if n.label == NodeLabel.MOVIE]
        actors = [n for n in response.nodes if n.label == NodeLabel.ACTOR]
        assert len(movies) == 2
        assert len(actors) == 1
        assert response.links == [Link(source=1, target=0), Link(source=1, target=2)]

    def test_duplicate_actor_within_row_links_twice(self):
        """Duplicates in one cast produce one node but one link each."""
        builder = SubgraphBuilder()
        builder.add_row("M1", ["A", "A"])

        response = builder.build()

        assert len(response.nodes) == 2
        assert response.links == [Link(source=1, target=0), Link(source=1, target=0)]

    def test_actor_names_are_case_sensitive(self):
        """Names differing only in case are distinct actors."""
        builder = SubgraphBuilder()
        builder.add_row("M1", ["Tom Hanks", "tom hanks"])

        response = builder.build()

        assert [n.title for n in response.nodes] == ["M1", "Tom Hanks", "tom hanks"]

    def test_movie_title_matching_actor_name_is_separate_node(self):
        """Movie and actor nodes never share identity."""
        builder = SubgraphBuilder()
        builder.add_row("Cher", ["Cher"])

        response = builder.build()

        assert response.nodes == [
            Node(title="Cher", label=NodeLabel.MOVIE),
            Node(title="Cher", label=NodeLabel.ACTOR),
        ]

    def test_build_does_not_share_lists_with_later_rows(self):
        """A built response should not change when more rows are added."""
        builder = SubgraphBuilder()
        builder.add_row("M1", ["A"])
        first = builder.build()

        builder.add_row("M2", ["B"])

        assert len(first.nodes) == 2
        assert len(first.links) == 1


class TestAssembleSubgraph:
    """Tests for assembling a subgraph from an async row stream."""

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        """An empty stream is valid and yields an empty graph."""
        response = await assemble_subgraph(_rows())

        assert response.nodes == []
        assert response.links == []

    @pytest.mark.asyncio
    async def test_counts_match_rows_and_distinct_actors(self):
        """nodes = rows + distinct actors; links = total cast entries."""
        rows = [
            CastRow(movie="M1", cast=["A", "B", "C"]),
            CastRow(movie="M2", cast=["B", "D"]),
            CastRow(movie="M3", cast=[]),
            CastRow(movie="M4", cast=["A", "D", "E"]),
        ]

        response = await assemble_subgraph(_rows(*rows))

        distinct_actors = {name for row in rows for name in row.cast}
        assert len(response.nodes) == len(rows) + len(distinct_actors)
        assert len(response.links) == sum(len(row.cast) for row in rows)

    @pytest.mark.asyncio
    async def test_every_link_references_existing_nodes(self):
        """Links point from an actor node to a movie node."""
        rows = [
            CastRow(movie="M1", cast=["A", "B"]),
            CastRow(movie="M2", cast=["B", "C"]),
        ]

        response = await assemble_subgraph(_rows(*rows))

        for link in response.links:
            assert response.nodes[link.source].label == NodeLabel.ACTOR
            assert response.nodes[link.target].label == NodeLabel.MOVIE

    @pytest.mark.asyncio
    async def test_actor_in_two_rows_uses_same_source(self):
        """Both rows' links reference the single node for a shared actor."""
        rows = [
            CastRow(movie="M1", cast=["Keanu Reeves"]),
            CastRow(movie="M2", cast=["Keanu Reeves"]),
        ]

        response = await assemble_subgraph(_rows(*rows))

        assert [n.title for n in response.nodes].count("Keanu Reeves") == 1
        assert response.links[0].source == response.links[1].source

    @pytest.mark.asyncio
    async def test_stream_failure_propagates(self):
        """An error while iterating aborts assembly."""

        async def failing_rows():
            yield CastRow(movie="M1", cast=["A"])
            raise RuntimeError("connection reset")

        with pytest.raises(RuntimeError, match="connection reset"):
            await assemble_subgraph(failing_rows())

    @pytest.mark.asyncio
    async def test_serializes_with_wire_field_names(self):
        """Serialized output uses nodes/links and title/label/source/target."""
        response = await assemble_subgraph(_rows(CastRow(movie="M1", cast=["A"])))

        assert response.model_dump(mode="json") == {
            "nodes": [
                {"title": "M1", "label": "movie"},
                {"title": "A", "label": "actor"},
            ],
            "links": [{"source": 1, "target": 0}],
        }
