"""dagwalk CLI entry point.

Usage: dagwalk [-v] <command> -e SRC DST [WEIGHT] ... [options]

The graph is given inline, one ``-e`` flag per edge, in the order the
edges should be traversed.
"""
import argparse
import logging
import sys

from dagwalk.graph.model import Graph, NodeNotFoundError
from dagwalk.graph.paths import NotReachableError, PathMode, path_extreme_between, path_extremes
from dagwalk.graph.topological import topological_sort, topological_sort_graph
from dagwalk.graph.traversal import Signal, TraversalOrder, traverse


def _add_edge_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-e", "--edge", action="append", nargs="+", default=[],
        metavar="NODE",
        help="Edge as SRC DST [WEIGHT] (repeatable, weight defaults to 0)",
    )


def _add_walk_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("walk", help="Print nodes in traversal order.")
    _add_edge_argument(p)
    p.add_argument("--root", required=True, help="Start node")
    p.add_argument(
        "--order", choices=("dfs", "bfs"), default="dfs",
        help="Traversal order (default: dfs)",
    )


def _add_topo_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("topo", help="Print a topological order.")
    _add_edge_argument(p)
    p.add_argument(
        "--root", default=None,
        help="Order only nodes reachable from ROOT (default: whole graph)",
    )


def _add_path_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("path", help="Print shortest or longest path costs.")
    _add_edge_argument(p)
    p.add_argument("--source", required=True, help="Source node")
    p.add_argument(
        "--target", default=None,
        help="Print only the cost to TARGET (default: every reachable node)",
    )
    p.add_argument(
        "--longest", action="store_true",
        help="Longest instead of shortest path cost.",
    )


def _build_graph(parser: argparse.ArgumentParser, specs: list[list[str]]) -> Graph:
    g = Graph()
    for spec in specs:
        if len(spec) not in (2, 3):
            parser.error(f"--edge takes SRC DST [WEIGHT], got {' '.join(spec)!r}")
        weight = 0.0
        if len(spec) == 3:
            try:
                weight = float(spec[2])
            except ValueError:
                parser.error(f"invalid edge weight {spec[2]!r}")
        g.connect(spec[0], spec[1], weight)
    return g


def _format_cost(value) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _run_walk(g: Graph, args: argparse.Namespace) -> None:
    order = TraversalOrder.BREADTH_FIRST if args.order == "bfs" else TraversalOrder.DEPTH_FIRST

    def on_enter(node, out):
        out.append(node.key)
        return Signal.CONTINUE

    seen: list[str] = []
    traverse(g.node(args.root), on_enter, env=seen, order=order)
    for key in seen:
        print(key)


def _run_topo(g: Graph, args: argparse.Namespace) -> None:
    if args.root is None:
        nodes = topological_sort_graph(g)
    else:
        nodes = topological_sort(g.node(args.root))
    for node in nodes:
        print(node.key)


def _run_path(g: Graph, args: argparse.Namespace) -> None:
    mode = PathMode.LONGEST if args.longest else PathMode.SHORTEST
    source = g.node(args.source)
    if args.target is not None:
        print(_format_cost(path_extreme_between(source, g.node(args.target), mode)))
        return
    for node, cost in path_extremes(source, mode).items():
        print(f"{node.key}\t{_format_cost(cost)}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="dagwalk",
        description="Traversal, topological order and path costs on a DAG.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_walk_parser(subparsers)
    _add_topo_parser(subparsers)
    _add_path_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    g = _build_graph(parser, args.edge)
    runners = {"walk": _run_walk, "topo": _run_topo, "path": _run_path}
    try:
        runners[args.command](g, args)
    except (NodeNotFoundError, NotReachableError) as exc:
        print(f"dagwalk: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
