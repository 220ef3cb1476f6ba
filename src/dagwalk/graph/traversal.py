"""Depth-first and breadth-first traversal with callback control signals.

Both orders share one contract.  The caller supplies an ``on_enter``
callback (and optionally ``on_exit``); each has the signature
``callback(node, env)`` and returns a Signal.  ``env`` is passed through
untouched so callers can accumulate whatever they like.

Signals:
  CONTINUE -- carry on.  Returning None means the same thing.
  STOP     -- local to the current node.  From on_enter: the node stays
              visited but is not expanded and gets no on_exit.  Siblings
              and the rest of the frontier are unaffected.
  ABORT    -- end the whole traversal now, from any depth.  No further
              callback fires.  This is a normal return, not an error.

The engine owns the visited flags.  A node is marked just before its
on_enter fires, so callbacks never see a node twice.  A start node that
is already visited (a walk launched from inside another walk's callback)
makes the call a no-op.  All marks are undone by a VisitTracker when the
call returns, including when a callback raises.

DFS keeps an explicit stack of (node, edge iterator) frames instead of
recursing, so deep chains are not limited by the recursion limit.  The
observable order is the same as the recursive formulation: pre-order
enter, post-order exit, neighbours in edge insertion order.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum, auto
from typing import Any, Callable, Optional

from dagwalk.graph.model import Edge, Node
from dagwalk.graph.tracker import VisitTracker

log = logging.getLogger(__name__)


class Signal(Enum):
    CONTINUE = auto()
    STOP = auto()
    ABORT = auto()


class TraversalOrder(Enum):
    DEPTH_FIRST = auto()
    BREADTH_FIRST = auto()


Callback = Callable[[Node, Any], Optional[Signal]]


def _enter(
    node: Node, on_enter: Callback, env: Any, tracker: VisitTracker
) -> Signal:
    tracker.mark(node)
    return on_enter(node, env) or Signal.CONTINUE


def _dfs(
    start: Node,
    on_enter: Callback,
    on_exit: Callback | None,
    env: Any,
    tracker: VisitTracker,
) -> bool:
    """Run DFS from *start* using *tracker*.  Returns True on ABORT."""
    if start.visited:
        return False
    sig = _enter(start, on_enter, env, tracker)
    if sig is Signal.ABORT:
        return True
    if sig is Signal.STOP:
        return False

    stack: list[tuple[Node, Iterator[Edge]]] = [(start, iter(start.outgoing))]
    while stack:
        node, edges = stack[-1]
        for edge in edges:
            target = edge.target
            if target.visited:
                continue
            sig = _enter(target, on_enter, env, tracker)
            if sig is Signal.ABORT:
                return True
            if sig is Signal.STOP:
                continue
            stack.append((target, iter(target.outgoing)))
            break
        else:
            # all neighbours done
            stack.pop()
            if on_exit is not None and on_exit(node, env) is Signal.ABORT:
                return True
    return False


def _bfs(
    start: Node,
    on_enter: Callback,
    on_exit: Callback | None,
    env: Any,
    tracker: VisitTracker,
) -> bool:
    """Run BFS from *start* using *tracker*.  Returns True on ABORT."""
    if start.visited:
        return False
    sig = _enter(start, on_enter, env, tracker)
    if sig is Signal.ABORT:
        return True
    if sig is Signal.STOP:
        return False

    frontier = [start]
    while frontier:
        next_frontier: list[Node] = []
        for node in frontier:
            for edge in node.outgoing:
                target = edge.target
                if target.visited:
                    continue
                sig = _enter(target, on_enter, env, tracker)
                if sig is Signal.ABORT:
                    return True
                if sig is Signal.STOP:
                    continue
                next_frontier.append(target)
            if on_exit is not None and on_exit(node, env) is Signal.ABORT:
                return True
        frontier = next_frontier
    return False


def dfs(
    start: Node | None,
    on_enter: Callback,
    on_exit: Callback | None = None,
    env: Any = None,
) -> None:
    """Depth-first traversal from *start*.

    on_enter fires when a node is first reached, on_exit once all of its
    unvisited neighbours have been fully explored.  A None start is a
    no-op.
    """
    if start is None:
        return
    with VisitTracker() as tracker:
        if _dfs(start, on_enter, on_exit, env, tracker):
            log.debug("dfs from %r aborted after %d node(s)", start, len(tracker))


def bfs(
    start: Node | None,
    on_enter: Callback,
    on_exit: Callback | None = None,
    env: Any = None,
) -> None:
    """Breadth-first (level-order) traversal from *start*.

    on_enter fires when a node is discovered and queued, so every node at
    distance k is entered before any node at distance k+1.  on_exit fires
    when a frontier node has finished expanding its neighbours.  A None
    start is a no-op.
    """
    if start is None:
        return
    with VisitTracker() as tracker:
        if _bfs(start, on_enter, on_exit, env, tracker):
            log.debug("bfs from %r aborted after %d node(s)", start, len(tracker))


def traverse(
    start: Node | None,
    on_enter: Callback,
    on_exit: Callback | None = None,
    env: Any = None,
    order: TraversalOrder = TraversalOrder.DEPTH_FIRST,
) -> None:
    """Dispatch to dfs() or bfs() according to *order*."""
    if order is TraversalOrder.BREADTH_FIRST:
        bfs(start, on_enter, on_exit, env)
    else:
        dfs(start, on_enter, on_exit, env)
