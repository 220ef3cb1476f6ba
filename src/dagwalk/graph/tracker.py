"""Per-traversal bookkeeping of visited nodes.

Every node a traversal marks is recorded here so the flags can be
cleared afterwards, whichever way the traversal ends.  Used as a
context manager, reset() runs on normal return, on ABORT, and when a
callback raises.
"""
from __future__ import annotations

from types import TracebackType

from dagwalk.graph.model import Node


class VisitTracker:
    """Records nodes marked visited during one traversal call."""

    __slots__ = ("_marked",)

    def __init__(self) -> None:
        self._marked: dict[Node, None] = {}

    def mark(self, node: Node) -> bool:
        """Mark *node* visited.  Returns False if it already was."""
        if node.visited:
            return False
        node.visited = True
        self._marked[node] = None
        return True

    def is_visited(self, node: Node) -> bool:
        return node.visited

    def reset(self) -> None:
        """Clear the flag on every recorded node.  Safe to call twice."""
        for node in self._marked:
            node.visited = False
        self._marked.clear()

    def __enter__(self) -> VisitTracker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.reset()

    def __contains__(self, node: Node) -> bool:
        return node in self._marked

    def __len__(self) -> int:
        return len(self._marked)
