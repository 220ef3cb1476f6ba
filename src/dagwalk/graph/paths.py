"""Single-source shortest and longest path cost on a weighted DAG.

Algorithm:
  1.  Topologically sort the nodes reachable from the source.
  2.  Start every node at +inf (shortest) or -inf (longest), and the
      source at 0.
  3.  Walk nodes in topological order.  For each node v, for each edge
      v -> w with weight c, relax: if dist[v] + c beats dist[w], update
      dist[w].

When v is reached in step 3 all of its predecessors have already been
processed, so dist[v] is final before it is used.  One pass is enough,
negative weights are fine, and longest path is the same loop with the
comparison flipped.  O(V + E).

Weights may be int, float, Fraction or Decimal; sums stay in the
weights' own type because the source starts at int 0.

Distances live in a dict owned by the call; node payloads are never
touched, so nested or repeated queries cannot interfere.
"""
from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import TYPE_CHECKING

from dagwalk.graph.model import Node
from dagwalk.graph.topological import topological_sort

if TYPE_CHECKING:
    from dagwalk.graph.model import Weight

log = logging.getLogger(__name__)


class PathMode(Enum):
    SHORTEST = auto()
    LONGEST = auto()


class NotReachableError(LookupError):
    """Raised when the target has no path from the source."""

    def __init__(self, source: Node, target: Node) -> None:
        self.source = source
        self.target = target
        super().__init__(f"{target!r} is not reachable from {source!r}")


def path_extremes(
    start: Node | None, mode: PathMode = PathMode.SHORTEST
) -> dict[Node, Weight]:
    """Return the extreme path cost from *start* to every reachable node.

    The mapping is in topological order and always contains *start*
    with cost 0.  A None start gives an empty mapping.
    """
    order = topological_sort(start)
    if not order:
        return {}

    longest = mode is PathMode.LONGEST
    dist: dict[Node, Weight] = dict.fromkeys(order, -math.inf if longest else math.inf)
    # int zero keeps the sum in the weights' own type
    dist[start] = 0  # type: ignore[index]

    relaxed = 0
    for node in order:
        base = dist[node]
        for edge in node.outgoing:
            candidate = base + edge.weight
            current = dist[edge.target]
            if (candidate > current) if longest else (candidate < current):
                dist[edge.target] = candidate
                relaxed += 1

    log.debug(
        "path_extremes %s from %r: %d node(s), %d relaxation(s)",
        mode.name, start, len(order), relaxed,
    )
    return dist


def path_extreme_between(
    source: Node, target: Node, mode: PathMode = PathMode.SHORTEST
) -> Weight:
    """Extreme path cost from *source* to *target*.

    Raises NotReachableError if *target* is not reachable from *source*.
    """
    dist = path_extremes(source, mode)
    try:
        return dist[target]
    except KeyError:
        raise NotReachableError(source, target) from None
