#!/usr/bin/env python3
"""
Graph Engine CLI - build a graph and run one algorithm on it.

Usage:
    python scripts/run_algorithms.py --vertices 4 --edge 0 1 1 --edge 1 2 2 --algorithm bfs
    python scripts/run_algorithms.py --vertices 4 --edge 0 1 1 --edge 1 2 2 --edge 0 2 4 \\
        --edge 2 3 1 --algorithm prims
    python scripts/run_algorithms.py --vertices 3 --edge 0 1 4 --edge 0 2 1 --edge 2 1 1 \\
        --algorithm dijkstra --json
    python scripts/run_algorithms.py --vertices 5 --edge 0 1 1 --edge 0 2 1 --algorithm dfs --trace

Algorithms:
    bfs       - Breadth-first visitation order
    dfs       - Depth-first visitation order (iterative, stack based)
    prims     - Minimum spanning tree (weighted graphs only)
    dijkstra  - Shortest distances from the start (weighted graphs only)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from graph_engine import GraphEngineError, GraphSession  # noqa: E402
from graph_engine.config import configure_logging  # noqa: E402
from graph_engine.graph import (  # noqa: E402
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a graph algorithm on a small undirected graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--vertices",
        "-n",
        type=int,
        required=True,
        help="Number of vertices (ids 0..n-1)",
    )
    parser.add_argument(
        "--edge",
        type=int,
        nargs=3,
        action="append",
        default=[],
        metavar=("U", "V", "W"),
        help="Undirected edge u-v with weight w (repeatable)",
    )
    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default="bfs",
        choices=["bfs", "dfs", "prims", "dijkstra"],
        help="Algorithm to run (default: bfs)",
    )
    parser.add_argument(
        "--start",
        "-s",
        type=int,
        default=0,
        help="Start vertex (default: 0)",
    )
    parser.add_argument(
        "--unweighted",
        action="store_true",
        help="Ignore supplied weights and use weight 1 for every edge",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the queue/stack trace of BFS or DFS",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def print_traversal(result: TraversalResult, trace: bool) -> None:
    print(f"{result.algorithm.upper()} order from {result.start}:")
    print("  " + " -> ".join(str(v) for v in result.order))
    if trace:
        print("\nTrace:")
        for step in result.steps:
            target = f" {step.target}" if step.target is not None else ""
            vertex = "-" if step.vertex is None else step.vertex
            print(f"  [{vertex}] {step.action}{target:<4} frontier={list(step.frontier)}")


def print_spanning_tree(result: SpanningTreeResult) -> None:
    print(f"Minimum spanning tree from {result.start}:")
    for parent, child, weight in result.edges:
        print(f"  {parent} - {child}  (w:{weight})")
    print(f"Total weight: {result.total_weight}")
    if not result.spans_all:
        print("Graph is disconnected: tree covers only the start's component")


def print_shortest_paths(result: ShortestPathResult) -> None:
    print(f"Shortest paths from {result.start}:")
    print(f"  {'Node':>4}  {'Distance':>8}  Path")
    for vertex in range(len(result.distances)):
        path = result.path_to(vertex)
        route = " -> ".join(str(v) for v in path) if path else "-"
        print(f"  {vertex:>4}  {result.format_distance(vertex):>8}  {route}")


def main() -> int:
    """Main entry point."""
    args = parse_args()
    configure_logging("DEBUG" if args.verbose else "WARNING")

    session = GraphSession()
    try:
        session.init_graph(args.vertices, weighted=not args.unweighted)
        for u, v, w in args.edge:
            session.add_edge(u, v, w)
        result = session.run(args.algorithm, args.start)
    except GraphEngineError as e:
        logging.getLogger(__name__).debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    elif isinstance(result, TraversalResult):
        print_traversal(result, args.trace)
    elif isinstance(result, SpanningTreeResult):
        print_spanning_tree(result)
    else:
        print_shortest_paths(result)

    if not session.is_connected(args.start):
        print(f"\nNote: not every vertex is reachable from {args.start}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
