"""Graph traversal and path analysis over weighted DAGs."""

from dagwalk.graph.model import Edge, Graph, Node, NodeNotFoundError
from dagwalk.graph.paths import (
    NotReachableError,
    PathMode,
    path_extreme_between,
    path_extremes,
)
from dagwalk.graph.topological import topological_sort, topological_sort_graph
from dagwalk.graph.tracker import VisitTracker
from dagwalk.graph.traversal import Signal, TraversalOrder, bfs, dfs, traverse

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
