"""Topological sort via DFS reverse postorder.

A node is finished (its on_exit fires) only after everything reachable
from it has finished, so prepending nodes as they finish gives an order
in which every edge points forward.

The engine already skips visited nodes, so the enter callback has
nothing to do; all the work happens on exit.

Only nodes reachable from the root are ordered.  topological_sort_graph
covers the whole graph by walking from every root under one tracker.

Cyclic input is outside the contract.  The visited checks keep the
walk finite, but the result is then not a valid ordering.
"""
from __future__ import annotations

import logging
from collections import deque

from dagwalk.graph.model import Graph, Node
from dagwalk.graph.tracker import VisitTracker
from dagwalk.graph.traversal import Signal, _dfs

log = logging.getLogger(__name__)


def _on_enter(node: Node, acc: deque[Node]) -> Signal:
    return Signal.CONTINUE


def _on_exit(node: Node, acc: deque[Node]) -> Signal:
    acc.appendleft(node)
    return Signal.CONTINUE


def topological_sort(start: Node | None) -> list[Node]:
    """Return the nodes reachable from *start*, sources before targets.

    Repeated calls on an unmodified graph return the same list.
    """
    if start is None:
        return []
    acc: deque[Node] = deque()
    with VisitTracker() as tracker:
        _dfs(start, _on_enter, _on_exit, acc, tracker)
    log.debug("topological_sort from %r: %d node(s)", start, len(acc))
    return list(acc)


def topological_sort_graph(graph: Graph) -> list[Node]:
    """Order every node in *graph*.

    Roots are walked first, in insertion order; any node left unvisited
    after that (only possible when the input has a cycle) seeds a further
    walk.  Later walks are prepended, which keeps every edge pointing
    forward across components.
    """
    acc: deque[Node] = deque()
    with VisitTracker() as tracker:
        for seed in [*graph.roots(), *graph.nodes()]:
            if not seed.visited:
                _dfs(seed, _on_enter, _on_exit, acc, tracker)
    log.debug("topological_sort_graph: %d node(s)", len(acc))
    return list(acc)
