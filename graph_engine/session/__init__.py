"""
Session module.

Provides GraphSession, the single-graph boundary used by the front end:
init_graph, add_edge, run_bfs/run_dfs/run_prims/run_dijkstra and
get_result_buffer.
"""

from graph_engine.session.session import GraphSession

__all__ = ["GraphSession"]
