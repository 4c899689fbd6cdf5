"""Shared fixtures for FrameGraph tests"""

import polars as pl
import pytest

from framegraph import FrameGraph


@pytest.fixture
def chain_vertices():
    return pl.DataFrame({"id": [1, 2, 3]})


@pytest.fixture
def chain_edges():
    return pl.DataFrame({"src": [1, 2], "dst": [2, 3], "w": ["x", "y"]})


@pytest.fixture
def chain_graph(chain_vertices, chain_edges):
    """1 -> 2 -> 3"""
    return FrameGraph(chain_vertices, chain_edges)


@pytest.fixture
def cycle_graph(chain_vertices):
    """1 -> 2 -> 3 plus the reverse edge 2 -> 1"""
    edges = pl.DataFrame({"src": [1, 2, 2], "dst": [2, 3, 1], "w": ["x", "y", "z"]})
    return FrameGraph(chain_vertices, edges)
