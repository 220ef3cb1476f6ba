"""Node/edge model and the graph that owns them.

A Node is a handle: it carries its key, an opaque payload, its
outgoing and incoming edge lists, and a transient ``visited`` flag that
only the traversal engine touches.  Edges point at nodes but do not own
them -- the Graph does.

The graph keeps a dict[key, Node] for lookups and preserves insertion
order everywhere, because edge order is the tie-break for DFS descent
and BFS expansion.  Both directions are stored on the nodes so that
in-degree queries are O(1) instead of requiring a full scan.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Hashable, Iterable, Iterator, Union

if TYPE_CHECKING:
    from decimal import Decimal
    from fractions import Fraction

    # anything closed under + and ordered against +-inf
    Weight = Union[int, float, Fraction, Decimal]


class NodeNotFoundError(LookupError):
    """Raised when a key is not present in the graph."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Node {key!r} not found")


class Node:
    """A vertex handle.

    Identity is the object itself: two nodes with equal keys in
    different graphs are different nodes.
    """

    __slots__ = ("_key", "payload", "visited", "outgoing", "incoming")

    def __init__(self, key: Hashable, payload: Any = None) -> None:
        self._key = key
        self.payload = payload
        self.visited = False
        self.outgoing: list[Edge] = []
        self.incoming: list[Edge] = []

    @property
    def key(self) -> Hashable:
        return self._key

    def successors(self) -> list[Node]:
        """Targets of outgoing edges, in insertion order."""
        return [e.target for e in self.outgoing]

    def predecessors(self) -> list[Node]:
        return [e.source for e in self.incoming]

    @property
    def in_degree(self) -> int:
        return len(self.incoming)

    @property
    def out_degree(self) -> int:
        return len(self.outgoing)

    def __repr__(self) -> str:
        return f"Node({self._key!r})"


@dataclass(slots=True, eq=False)
class Edge:
    """Directed, weighted edge.  Weight is only read by path analysis."""
    source: Node
    target: Node
    weight: Weight = 0.0


class Graph:
    """Directed graph of Node handles, keyed by a hashable identity."""

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[Hashable, Node] = {}

    # ---- construction ----------------------------------------------------

    def add_node(self, key: Hashable, payload: Any = None) -> Node:
        """Return the node for *key*, creating it if missing.

        An existing node keeps its payload unless a new one is given.
        """
        node = self._nodes.get(key)
        if node is None:
            node = Node(key, payload)
            self._nodes[key] = node
        elif payload is not None:
            node.payload = payload
        return node

    def add_nodes(self, records: Iterable[tuple[Hashable, Any]]) -> list[Node]:
        """Add a batch of ``(key, payload)`` records, in order."""
        return [self.add_node(key, payload) for key, payload in records]

    def connect(self, src: Hashable, dst: Hashable, weight: Weight = 0.0) -> Edge:
        """Add a directed edge src -> dst.

        Creates both nodes if they are missing.  Duplicate edges are
        allowed; each one is traversed and relaxed on its own.
        """
        source = self.add_node(src)
        target = self.add_node(dst)
        edge = Edge(source, target, weight)
        source.outgoing.append(edge)
        target.incoming.append(edge)
        return edge

    # ---- queries ---------------------------------------------------------

    def node(self, key: Hashable) -> Node:
        """Look up a node by key.  Raises NodeNotFoundError if absent."""
        try:
            return self._nodes[key]
        except KeyError:
            raise NodeNotFoundError(key) from None

    def get(self, key: Hashable) -> Node | None:
        return self._nodes.get(key)

    def has_node(self, key: Hashable) -> bool:
        return key in self._nodes

    def nodes(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def edges(self) -> Iterator[Edge]:
        for node in self._nodes.values():
            yield from node.outgoing

    def roots(self) -> list[Node]:
        """Nodes with no incoming edges, in insertion order."""
        return [n for n in self._nodes.values() if not n.incoming]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(n.outgoing) for n in self._nodes.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, key: Hashable) -> bool:
        return key in self._nodes

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
