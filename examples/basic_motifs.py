# ==========================================
# examples/basic_motifs.py
# ==========================================

"""
Basic Motif Examples for FrameGraph
"""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import polars as pl

from framegraph import FrameGraph, FrameGraphError


def run_basic_examples():
    """Run basic motif examples"""

    print("Basic Motif Examples")
    print("=" * 50)

    vertices = pl.DataFrame({
        "id": ["u1", "u2", "u3", "u4"],
        "country": ["USA", "USA", "France", "Japan"],
    })
    edges = pl.DataFrame({
        "src": ["u1", "u2", "u2", "u3", "u4"],
        "dst": ["u2", "u1", "u3", "u4", "u9"],
        "since": [2019, 2020, 2021, 2018, 2022],
    })
    graph = FrameGraph(vertices, edges)

    examples = [
        ("Mutual follows", "(a)-[e1]->(b); (b)-[e2]->(a)"),
        ("One-way follows", "(a)-[e]->(b); !(b)-[]->(a)"),
        ("Followed users (dangling kept)", "()-[e]->(b)"),
        ("Two hops", "(a)-[]->(b); (b)-[]->(c)"),
    ]

    for title, motif in examples:
        print(f"\n{title}")
        print(f"Motif: {motif}")
        print("-" * 40)

        try:
            print(graph.find(motif).collect())
        except FrameGraphError as e:
            print(f"Error: {e}")

    print("\nConversion with generated Long IDs")
    print("-" * 40)
    property_graph = graph.to_property_graph()
    for vid, attr in property_graph.vertices:
        print(f"{vid}: {attr} -> {property_graph.out_neighbors(vid)}")


if __name__ == "__main__":
    run_basic_examples()
