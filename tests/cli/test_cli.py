"""Tests for the dagwalk command line."""
from __future__ import annotations

import pytest

from dagwalk.cli import main

TASK_EDGES = [
    "-e", "task1", "task2",
    "-e", "task1", "task3",
    "-e", "task2", "task4",
    "-e", "task3", "task4",
]

WEIGHTED_EDGES = [
    "-e", "t1", "t2", "2", "-e", "t1", "t3", "2",
    "-e", "t2", "t4", "3", "-e", "t3", "t4", "2",
    "-e", "t4", "t7", "3", "-e", "t1", "t5", "6",
    "-e", "t5", "t6", "4", "-e", "t6", "t7", "7",
]


def _lines(capsys) -> list[str]:
    return capsys.readouterr().out.splitlines()


def test_no_command_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 0
    assert "usage: dagwalk" in capsys.readouterr().out


def test_walk_dfs(capsys) -> None:
    main(["walk", *TASK_EDGES, "--root", "task1"])
    assert _lines(capsys) == ["task1", "task2", "task4", "task3"]


def test_walk_bfs(capsys) -> None:
    main(["walk", *TASK_EDGES, "--root", "task1", "--order", "bfs"])
    assert _lines(capsys) == ["task1", "task2", "task3", "task4"]


def test_topo_from_root(capsys) -> None:
    main(["topo", *WEIGHTED_EDGES, "--root", "t1"])
    assert _lines(capsys) == ["t1", "t5", "t6", "t3", "t2", "t4", "t7"]


def test_topo_whole_graph(capsys) -> None:
    main(["topo", "-e", "A", "B", "-e", "C", "D"])
    out = _lines(capsys)
    assert sorted(out) == ["A", "B", "C", "D"]
    assert out.index("A") < out.index("B")
    assert out.index("C") < out.index("D")


def test_path_shortest_target(capsys) -> None:
    main(["path", *WEIGHTED_EDGES, "--source", "t1", "--target", "t7"])
    assert _lines(capsys) == ["7"]


def test_path_longest_target(capsys) -> None:
    main(["path", *WEIGHTED_EDGES, "--source", "t1", "--target", "t7", "--longest"])
    assert _lines(capsys) == ["17"]


def test_path_all(capsys) -> None:
    main(["path", *WEIGHTED_EDGES, "--source", "t5"])
    assert _lines(capsys) == ["t5\t0", "t6\t4", "t7\t11"]


def test_path_fractional_weight(capsys) -> None:
    main(["path", "-e", "A", "B", "1.5", "--source", "A", "--target", "B"])
    assert _lines(capsys) == ["1.5"]


def test_path_unreachable_exits_1(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["path", *WEIGHTED_EDGES, "--source", "t5", "--target", "t2"])
    assert exc_info.value.code == 1
    assert "not reachable" in capsys.readouterr().err


def test_unknown_node_exits_1(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["walk", *TASK_EDGES, "--root", "ghost"])
    assert exc_info.value.code == 1
    assert "'ghost' not found" in capsys.readouterr().err


def test_bad_edge_arity(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["topo", "-e", "A"])
    assert exc_info.value.code == 2
    assert "SRC DST [WEIGHT]" in capsys.readouterr().err


def test_bad_weight(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["topo", "-e", "A", "B", "heavy"])
    assert exc_info.value.code == 2
    assert "invalid edge weight" in capsys.readouterr().err
