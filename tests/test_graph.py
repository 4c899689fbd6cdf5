"""
FrameGraph construction, degree and conversion tests
"""

import logging

import polars as pl
import pytest
from polars.testing import assert_frame_equal

from framegraph import (
    Edge,
    FrameGraph,
    GraphConfigurationError,
    PropertyGraph,
    create_test_config,
)


class TestConstruction:

    def test_missing_vertex_id(self, chain_edges):
        with pytest.raises(GraphConfigurationError, match="which has columns: name"):
            FrameGraph(pl.DataFrame({"name": ["a"]}), chain_edges)

    def test_missing_source(self, chain_vertices):
        with pytest.raises(GraphConfigurationError, match="Source vertex ID column 'src'"):
            FrameGraph(chain_vertices, pl.DataFrame({"from": [1], "dst": [2]}))

    def test_missing_destination(self, chain_vertices):
        with pytest.raises(GraphConfigurationError, match="Destination vertex ID column 'dst'"):
            FrameGraph(chain_vertices, pl.DataFrame({"src": [1], "to": [2]}))

    def test_configuration_error_is_value_error(self, chain_edges):
        with pytest.raises(ValueError):
            FrameGraph(pl.DataFrame({"vid": [1]}), chain_edges)

    def test_schemas(self):
        graph = FrameGraph(
            pl.DataFrame({"name": ["a"], "id": [1]}),
            pl.DataFrame({"src": [1], "dst": [1], "weight": [0.5]}),
        )

        assert graph.vertex_schema == ("name", "id")
        assert graph.vertex_schema_map == {"name": 0, "id": 1}
        assert graph.edge_schema == ("src", "dst", "weight")
        assert graph.edge_schema_map["weight"] == 2


class TestDegrees:

    def test_out_degrees(self, cycle_graph):
        result = cycle_graph.out_degrees.sort("id").collect()

        assert result.columns == ["id", "outDeg"]
        assert result.schema["outDeg"] == pl.Int32
        assert result.rows() == [(1, 1), (2, 2)]

    def test_in_degrees(self, cycle_graph):
        result = cycle_graph.in_degrees.sort("id").collect()

        assert result.columns == ["id", "inDeg"]
        assert result.rows() == [(1, 1), (2, 1), (3, 1)]

    def test_degrees(self, cycle_graph):
        result = cycle_graph.degrees.sort("id").collect()

        assert result.columns == ["id", "deg"]
        assert result.rows() == [(1, 2), (2, 3), (3, 1)]

    def test_degree_sums_match_edge_count(self, cycle_graph):
        edge_count = cycle_graph.edges.collect().height

        assert cycle_graph.out_degrees.collect()["outDeg"].sum() == edge_count
        assert cycle_graph.in_degrees.collect()["inDeg"].sum() == edge_count
        assert cycle_graph.degrees.collect()["deg"].sum() == 2 * edge_count

    def test_isolated_vertices_are_absent(self):
        graph = FrameGraph(pl.DataFrame({"id": [1, 2, 9]}), pl.DataFrame({"src": [1], "dst": [2]}))

        assert 9 not in graph.degrees.collect()["id"].to_list()


class TestPropertyGraphConversion:

    @pytest.fixture
    def people(self):
        vertices = pl.DataFrame({"id": [1, 2, 3], "name": ["Alice", "Bob", "Charlie"]},
                                schema_overrides={"id": pl.Int32})
        edges = pl.DataFrame({"src": [1, 2], "dst": [2, 3], "relationship": ["knows", "manages"]},
                             schema_overrides={"src": pl.Int32, "dst": pl.Int32})
        return FrameGraph(vertices, edges)

    def test_integral_ids_are_kept(self, people):
        graph = people.to_property_graph()

        assert sorted(graph.vertices) == [(1, (1, "Alice")), (2, (2, "Bob")), (3, (3, "Charlie"))]
        assert sorted(graph.edges) == [
            Edge(1, 2, (1, 2, "knows")),
            Edge(2, 3, (2, 3, "manages")),
        ]
        assert graph.vertex_schema == ("id", "name")
        assert graph.edge_schema == ("src", "dst", "relationship")

    def test_integral_round_trip(self, people):
        back = FrameGraph.from_property_graph(people.to_property_graph())

        assert back.vertex_schema == ("id", "attr")
        assert back.edge_schema == ("src", "dst", "attr")
        assert_frame_equal(
            back.vertices.select(pl.col("attr").struct.unnest()).sort("id").collect(),
            people.vertices.sort("id").collect(),
            check_dtypes=False,
        )
        assert_frame_equal(
            back.edges.select(pl.col("attr").struct.unnest()).sort("src").collect(),
            people.edges.sort("src").collect(),
            check_dtypes=False,
        )

    def test_non_integral_ids_are_indexed(self):
        original = FrameGraph(
            pl.DataFrame({"id": ["a", "b", "c"], "score": [0.1, 0.2, 0.3]}),
            pl.DataFrame({"src": ["a", "b"], "dst": ["b", "c"]}),
        )
        graph = original.to_property_graph()

        assert sorted(vid for vid, _ in graph.vertices) == [0, 1, 2]
        old_ids = {vid: attr[0] for vid, attr in graph.vertices}
        assert {(old_ids[e.src], old_ids[e.dst]) for e in graph.edges} == {("a", "b"), ("b", "c")}
        assert {e.attr for e in graph.edges} == {("a", "b"), ("b", "c")}

    def test_uint64_ids_are_indexed(self):
        big = 2**63 + 5
        original = FrameGraph(
            pl.DataFrame({"id": [big, 1]}, schema={"id": pl.UInt64}),
            pl.DataFrame({"src": [big], "dst": [1]}, schema={"src": pl.UInt64, "dst": pl.UInt64}),
        )
        graph = original.to_property_graph()

        assert sorted(graph.vertices) == [(0, (big,)), (1, (1,))]
        assert graph.edges == [Edge(0, 1, (big, 1))]

    def test_uint32_ids_are_kept(self):
        original = FrameGraph(
            pl.DataFrame({"id": [7, 9]}, schema={"id": pl.UInt32}),
            pl.DataFrame({"src": [7], "dst": [9]}, schema={"src": pl.UInt32, "dst": pl.UInt32}),
        )
        graph = original.to_property_graph()

        assert sorted(vid for vid, _ in graph.vertices) == [7, 9]
        assert graph.edges == [Edge(7, 9, (7, 9))]

    def test_non_integral_round_trip_preserves_connectivity(self):
        original = FrameGraph(
            pl.DataFrame({"id": ["a", "b", "c"]}),
            pl.DataFrame({"src": ["a", "b", "c"], "dst": ["b", "c", "a"]}),
        )
        back = FrameGraph.from_property_graph(original.to_property_graph())
        found = back.find("(x)-[]->(y)").collect()

        pairs = zip(
            found["x"].struct.field("attr").struct.field("id").to_list(),
            found["y"].struct.field("attr").struct.field("id").to_list(),
        )
        assert sorted(pairs) == [("a", "b"), ("b", "c"), ("c", "a")]

    def test_from_property_graph(self):
        graph = PropertyGraph(
            vertices=[(10, ("x",)), (20, ("y",))],
            edges=[(10, 20, (7,))],
            vertex_schema=("label",),
            edge_schema=("weight",),
        )
        frames = FrameGraph.from_property_graph(graph)

        assert frames.vertices.collect().to_dicts() == [
            {"id": 10, "attr": {"label": "x"}},
            {"id": 20, "attr": {"label": "y"}},
        ]
        assert frames.edges.collect().to_dicts() == [{"src": 10, "dst": 20, "attr": {"weight": 7}}]


class TestLogging:

    def test_plan_logging(self, chain_vertices, chain_edges, caplog):
        graph = FrameGraph(chain_vertices, chain_edges, config=create_test_config())

        with caplog.at_level(logging.DEBUG, logger="framegraph"):
            graph.find("(a)-[e]->(b)")

        assert "Motif plan" in caplog.text
        assert "has columns ['a', 'e', 'b']" in caplog.text

    def test_non_integral_conversion_logs(self, caplog):
        graph = FrameGraph(pl.DataFrame({"id": ["a"]}), pl.DataFrame({"src": ["a"], "dst": ["a"]}))

        with caplog.at_level(logging.INFO, logger="framegraph"):
            graph.to_property_graph()

        assert "generating Long IDs" in caplog.text
