"""Shared fixtures for graph traversal tests."""
from __future__ import annotations

import pytest

from dagwalk.graph.model import Graph


@pytest.fixture
def empty_graph() -> Graph:
    return Graph()


@pytest.fixture
def linear_graph() -> Graph:
    """A -> B -> C -> D"""
    g = Graph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.connect(src, dst)
    return g


@pytest.fixture
def task_graph() -> Graph:
    """
    task1 -> task2 -> task4
    task1 -> task3 -> task4
    """
    g = Graph()
    g.add_nodes([(f"task{i}", None) for i in range(1, 5)])
    for src, dst in [
        ("task1", "task2"), ("task1", "task3"),
        ("task2", "task4"), ("task3", "task4"),
    ]:
        g.connect(src, dst)
    return g


@pytest.fixture
def weighted_graph() -> Graph:
    """
    t1 -2-> t2 -3-> t4 -3-> t7
    t1 -2-> t3 -2-> t4
    t1 -6-> t5 -4-> t6 -7-> t7
    """
    g = Graph()
    g.add_nodes([(f"t{i}", None) for i in range(1, 8)])
    for src, dst, w in [
        ("t1", "t2", 2), ("t1", "t3", 2), ("t2", "t4", 3), ("t3", "t4", 2),
        ("t4", "t7", 3), ("t1", "t5", 6), ("t5", "t6", 4), ("t6", "t7", 7),
    ]:
        g.connect(src, dst, w)
    return g


@pytest.fixture
def wide_dag() -> Graph:
    """Root with 10 children, each with 2 grandchildren (all leaves)."""
    g = Graph()
    for i in range(10):
        child = f"L1_{i}"
        g.connect("root", child)
        for j in range(2):
            g.connect(child, f"L2_{i}_{j}")
    return g


def keys(nodes) -> list:
    return [n.key for n in nodes]


def assert_all_unvisited(g: Graph) -> None:
    leaked = [n.key for n in g.nodes() if n.visited]
    assert leaked == [], f"visited flags left set: {leaked}"
