# main.py

"""Main demo runner for motif finding"""

import polars as pl

from framegraph import (
    FrameGraph,
    FrameGraphConfig,
    FrameGraphError,
    format_plan_summary,
    parse_pattern,
    setup_framegraph_logging,
)


def build_demo_graph(config: FrameGraphConfig) -> FrameGraph:
    vertices = pl.DataFrame({
        "id": [1, 2, 3, 4],
        "name": ["Alice", "Bob", "Charlie", "Diana"],
    })
    edges = pl.DataFrame({
        "src": [1, 2, 3, 2],
        "dst": [2, 3, 1, 1],
        "relationship": ["knows", "knows", "manages", "follows"],
    })
    return FrameGraph(vertices, edges, config=config)


def main():
    config = FrameGraphConfig()
    setup_framegraph_logging(config.LOG_LEVEL)

    print("Motif Finding Demo")
    print("=" * 40)

    graph = build_demo_graph(config)

    motifs = [
        "(a)",
        "(a)-[e]->(b)",
        "(a)-[e1]->(b); (b)-[e2]->(c)",
        "(a)-[e]->(b); !(b)-[]->(a)",
        "(a)-[]->(b); (b)-[]->(c); (c)-[]->(a)",
        "(b)<-[e]-(a)",
    ]

    for i, motif in enumerate(motifs, 1):
        print(f"\nMotif {i}: {motif}")
        print("-" * 40)

        try:
            print(format_plan_summary(parse_pattern(motif)))
            print(graph.find(motif).collect())
        except FrameGraphError as e:
            print(f"Error: {e}")

    print("\nDegrees")
    print("-" * 40)
    print(graph.degrees.sort("id").collect())


if __name__ == "__main__":
    main()
