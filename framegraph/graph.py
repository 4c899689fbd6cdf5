"""
FrameGraph: a graph whose vertices and edges are stored as polars frames

The vertex frame must contain a column named "id" holding unique vertex IDs.
The edge frame must contain columns "src" and "dst" holding source and
destination vertex IDs. All other columns are attributes.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple, Union

import polars as pl

from .ast_nodes import Pattern
from .config import FrameGraphConfig
from .exceptions import GraphConfigurationError
from .motif import MotifFinder
from .naming import ATTR, DST, ID, SRC
from .parser import parse_pattern
from .property_graph import Edge, PropertyGraph
from .utils import format_plan_summary, framegraph_measure_time

logger = logging.getLogger(__name__)

FrameLike = Union[pl.DataFrame, pl.LazyFrame]

# Index columns used when vertex IDs have to be replaced with Long IDs
NEW_ID = "new_id"
OLD_ID = "old_id"

# ID types that cast to Int64 without loss; anything else (UInt64 included) gets generated IDs
LONG_COMPATIBLE_IDS = (pl.Int8, pl.Int16, pl.Int32, pl.Int64, pl.UInt8, pl.UInt16, pl.UInt32)


def _as_lazy(frame: FrameLike) -> pl.LazyFrame:
    return frame.lazy() if isinstance(frame, pl.DataFrame) else frame


class FrameGraph:
    """
    Graph with vertex and edge frames, supporting motif finding, degree
    metrics and conversion to and from :class:`PropertyGraph`.
    """

    def __init__(self, vertices: FrameLike, edges: FrameLike, config: Optional[FrameGraphConfig] = None):
        self.config = config or FrameGraphConfig()
        self.vertices = _as_lazy(vertices)
        self.edges = _as_lazy(edges)

        vertex_columns = self.vertices.collect_schema().names()
        edge_columns = self.edges.collect_schema().names()
        if ID not in vertex_columns:
            raise GraphConfigurationError(
                f"Vertex ID column '{ID}' missing from vertex frame, which has columns: "
                + ",".join(vertex_columns)
            )
        if SRC not in edge_columns:
            raise GraphConfigurationError(
                f"Source vertex ID column '{SRC}' missing from edge frame, which has columns: "
                + ",".join(edge_columns)
            )
        if DST not in edge_columns:
            raise GraphConfigurationError(
                f"Destination vertex ID column '{DST}' missing from edge frame, which has columns: "
                + ",".join(edge_columns)
            )

        self._vertex_schema = tuple(vertex_columns)
        self._edge_schema = tuple(edge_columns)
        self._motif_finder = MotifFinder(self.vertices, self.edges)

    def __repr__(self) -> str:
        return f"FrameGraph(vertices={list(self._vertex_schema)}, edges={list(self._edge_schema)})"

    # ============================ Degree metrics =======================================

    @property
    def out_degrees(self) -> pl.LazyFrame:
        """
        Out-degree of each vertex as columns "id" and "outDeg" (Int32).
        Vertices with no out-edges are not returned.
        """
        return self.edges.group_by(pl.col(SRC).alias(ID)).agg(pl.len().cast(pl.Int32).alias("outDeg"))

    @property
    def in_degrees(self) -> pl.LazyFrame:
        """
        In-degree of each vertex as columns "id" and "inDeg" (Int32).
        Vertices with no in-edges are not returned.
        """
        return self.edges.group_by(pl.col(DST).alias(ID)).agg(pl.len().cast(pl.Int32).alias("inDeg"))

    @property
    def degrees(self) -> pl.LazyFrame:
        """
        Degree of each vertex as columns "id" and "deg" (Int32).
        Every edge counts once for each endpoint; vertices with no edges are not returned.
        """
        return (
            self.edges.select(pl.concat_list([SRC, DST]).alias(ID))
            .explode(ID)
            .group_by(ID)
            .agg(pl.len().cast(pl.Int32).alias("deg"))
        )

    # ============================ Motif finding ========================================

    @framegraph_measure_time
    def find(self, pattern: Union[str, Sequence[Pattern]]) -> pl.LazyFrame:
        """
        Motif finding.

        The pattern is a ';'-separated list of vertices "(a)", edges
        "(a)-[e]->(b)" and negated edges "!(a)-[]->(b)". Names may be left
        out to match anonymously: "()-[]->(b)".

        Returns a lazy frame with one struct column per declared name, in
        the order the names first appear, holding the matched vertex or
        edge row.
        """
        patterns = parse_pattern(pattern) if isinstance(pattern, str) else list(pattern)
        result = self._motif_finder.find(patterns)

        if self.config.DEVELOPMENT_MODE:
            # Resolving the schema surfaces join key type mismatches here instead of at collect()
            logger.debug(f"Motif {format_plan_summary(patterns)!r} has columns {result.collect_schema().names()}")

        if self.config.ENABLE_PLAN_LOGGING:
            logger.debug(f"Motif plan:\n{result.explain()}")

        return result

    # ============================ Conversions ========================================

    @framegraph_measure_time
    def to_property_graph(self) -> PropertyGraph:
        """
        Materialize this graph as a :class:`PropertyGraph`.

        Vertex and edge attributes are the full original rows, ordered by
        :attr:`vertex_schema` and :attr:`edge_schema`. Integer vertex IDs that
        fit in Int64 are cast to it; any other ID type, UInt64 included, is
        replaced by a generated Int64 index (an expensive extra pair of joins
        over the edges).
        """
        integral_ids = self.vertices.collect_schema()[ID] in LONG_COMPATIBLE_IDS
        v_attr = pl.struct([pl.col(c) for c in self._vertex_schema]).alias(ATTR)
        e_attr = pl.struct([pl.col(c) for c in self._edge_schema]).alias(ATTR)

        if integral_ids:
            vv = self.vertices.select(pl.col(ID).cast(pl.Int64), v_attr)
            ee = self.edges.select(pl.col(SRC).cast(pl.Int64), pl.col(DST).cast(pl.Int64), e_attr)
        else:
            logger.info(f"Vertex IDs are not integral; generating Long IDs for {self!r}")
            indexed_vertices = (
                self.vertices.select(v_attr)
                .with_row_index(NEW_ID)
                .with_columns(pl.col(NEW_ID).cast(pl.Int64))
            )
            new_index = indexed_vertices.select(
                pl.col(NEW_ID), pl.col(ATTR).struct.field(ID).alias(OLD_ID)
            )
            vv = indexed_vertices.select(pl.col(NEW_ID).alias(ID), pl.col(ATTR))
            indexed_source_edges = (
                self.edges.select(pl.col(SRC), pl.col(DST), e_attr)
                .join(new_index, left_on=SRC, right_on=OLD_ID, how="inner")
                .select(pl.col(NEW_ID).alias(SRC), pl.col(DST), pl.col(ATTR))
            )
            ee = (
                indexed_source_edges
                .join(new_index, left_on=DST, right_on=OLD_ID, how="inner")
                .select(pl.col(SRC), pl.col(NEW_ID).alias(DST), pl.col(ATTR))
            )

        vertex_rows = [
            (vid, self._ordered(attr, self._vertex_schema))
            for vid, attr in vv.collect().iter_rows()
        ]
        edge_rows = [
            Edge(src, dst, self._ordered(attr, self._edge_schema))
            for src, dst, attr in ee.collect().iter_rows()
        ]
        return PropertyGraph(vertex_rows, edge_rows, self._vertex_schema, self._edge_schema)

    @staticmethod
    def _ordered(record: Dict, schema: Tuple[str, ...]) -> Tuple:
        return tuple(record[name] for name in schema)

    @classmethod
    def from_property_graph(cls, graph: PropertyGraph, config: Optional[FrameGraphConfig] = None) -> "FrameGraph":
        """
        Convert a :class:`PropertyGraph` into a FrameGraph.

        The vertex frame has columns "id" and "attr", the edge frame "src",
        "dst" and "attr"; "attr" is a struct keyed by the graph's schemas.
        """
        vertices = pl.DataFrame(
            {
                ID: [vid for vid, _ in graph.vertices],
                ATTR: [dict(zip(graph.vertex_schema, attr)) for _, attr in graph.vertices],
            },
            schema_overrides={ID: pl.Int64},
        )
        edges = pl.DataFrame(
            {
                SRC: [e.src for e in graph.edges],
                DST: [e.dst for e in graph.edges],
                ATTR: [dict(zip(graph.edge_schema, e.attr)) for e in graph.edges],
            },
            schema_overrides={SRC: pl.Int64, DST: pl.Int64},
        )
        return cls(vertices, edges, config=config)

    @property
    def vertex_schema(self) -> Tuple[str, ...]:
        """Column ordering of vertex attributes in :meth:`to_property_graph`"""
        return self._vertex_schema

    @property
    def vertex_schema_map(self) -> Dict[str, int]:
        """Version of :attr:`vertex_schema` which maps column names to indices"""
        return {name: i for i, name in enumerate(self._vertex_schema)}

    @property
    def edge_schema(self) -> Tuple[str, ...]:
        """Column ordering of edge attributes in :meth:`to_property_graph`"""
        return self._edge_schema

    @property
    def edge_schema_map(self) -> Dict[str, int]:
        return {name: i for i, name in enumerate(self._edge_schema)}
