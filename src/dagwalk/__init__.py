"""dagwalk -- DFS, BFS, topological order and path costs on DAGs.

Re-exports the public API for convenient access:
    from dagwalk import Graph, dfs, topological_sort, path_extreme_between
"""
from dagwalk.graph import (
    Edge,
    Graph,
    Node,
    NodeNotFoundError,
    NotReachableError,
    PathMode,
    Signal,
    TraversalOrder,
    VisitTracker,
    bfs,
    dfs,
    path_extreme_between,
    path_extremes,
    topological_sort,
    topological_sort_graph,
    traverse,
)

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeNotFoundError",
    "NotReachableError",
    "PathMode",
    "Signal",
    "TraversalOrder",
    "VisitTracker",
    "bfs",
    "dfs",
    "path_extreme_between",
    "path_extremes",
    "topological_sort",
    "topological_sort_graph",
    "traverse",
]
