# framegraph/property_graph.py

"""
Generic property graph with Long vertex IDs and schema-ordered attribute records
Adjacency lists for traversal, plus an optional GraphBLAS adjacency matrix view
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Tuple

import numpy as np

try:
    import graphblas as gb
    from graphblas import Matrix
except ImportError as e:
    gb = None
    Matrix = None
    import_error = str(e)

from .exceptions import FrameGraphGraphBLASError

logger = logging.getLogger(__name__)


class Edge(NamedTuple):
    src: int
    dst: int
    attr: Tuple[Any, ...]


@dataclass
class PropertyGraph:
    """
    Directed multigraph keyed by 64-bit vertex IDs.

    Vertex attributes are tuples ordered by ``vertex_schema`` and edge
    attributes are tuples ordered by ``edge_schema``.
    """
    vertices: List[Tuple[int, Tuple[Any, ...]]]
    edges: List[Edge]
    vertex_schema: Tuple[str, ...] = ()
    edge_schema: Tuple[str, ...] = ()

    _attrs: Dict[int, Tuple[Any, ...]] = field(default_factory=dict, init=False, repr=False)
    _out: Dict[int, List[int]] = field(default_factory=dict, init=False, repr=False)
    _in: Dict[int, List[int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self):
        self.vertices = list(self.vertices)
        self.edges = [Edge(*e) for e in self.edges]
        self.vertex_schema = tuple(self.vertex_schema)
        self.edge_schema = tuple(self.edge_schema)

        for vid, attr in self.vertices:
            self._attrs[vid] = attr
            self._out.setdefault(vid, [])
            self._in.setdefault(vid, [])
        for e in self.edges:
            self._out.setdefault(e.src, []).append(e.dst)
            self._in.setdefault(e.dst, []).append(e.src)

    @property
    def num_vertices(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def out_neighbors(self, vid: int) -> List[int]:
        return list(self._out.get(vid, []))

    def in_neighbors(self, vid: int) -> List[int]:
        return list(self._in.get(vid, []))

    def vertex_attr(self, vid: int, name: str) -> Any:
        """Single attribute of a vertex, looked up through ``vertex_schema``"""
        return self._attrs[vid][self.vertex_schema.index(name)]

    def adjacency_matrix(self) -> "Matrix":
        """
        Boolean GraphBLAS adjacency matrix.

        Rows and columns follow the order of ``vertices``; edges whose
        endpoints are not vertices of the graph are left out.
        """
        if gb is None:
            raise FrameGraphGraphBLASError(
                f"Python GraphBLAS not available: {import_error}\n"
                "Install with: pip install python-graphblas"
            )

        position = {vid: i for i, (vid, _) in enumerate(self.vertices)}
        pairs = [(position[e.src], position[e.dst]) for e in self.edges
                 if e.src in position and e.dst in position]
        if len(pairs) < len(self.edges):
            logger.debug(f"Skipped {len(self.edges) - len(pairs)} dangling edge(s) in adjacency matrix")

        rows = np.array([p[0] for p in pairs], dtype=np.int64)
        cols = np.array([p[1] for p in pairs], dtype=np.int64)
        n = len(self.vertices)
        return Matrix.from_coo(
            rows, cols, True, dtype=bool, nrows=n, ncols=n, dup_op=gb.binary.lor
        )
