"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest

import main


RESOURCES = Path(__file__).resolve().parent.parent / "resources"


@pytest.mark.parametrize("frontier", ["heap", "scan"])
def test_prints_graph_and_shortest_path(capsys, frontier):
    status = main.main([str(RESOURCES / "simple_graph.txt"), "--frontier", frontier])

    out = capsys.readouterr().out
    assert status == 0
    assert "Node: 1\n" in out
    assert "Edge: 1 - 6, weight: 10\n" in out
    assert "Expected path: 1 -> 2 -> 3 -> 4 -> 5 -> 6" in out
    assert (
        "Shortest path from node 1 to node 6: 1 -> 2 -> 3 -> 4 -> 5 -> 6 (total weight 6)"
        in out
    )


def test_yaml_instance(capsys):
    status = main.main([str(RESOURCES / "simple_graph.yaml")])

    assert status == 0
    assert "(total weight 6)" in capsys.readouterr().out


def test_no_path_message(capsys):
    status = main.main([str(RESOURCES / "not_connected_graph.txt")])

    captured = capsys.readouterr()
    assert status == 0
    assert "No path from node 1 to node 5." in captured.out
    assert captured.err == ""


def test_missing_argument_exits_non_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main.main([])

    assert excinfo.value.code != 0
    assert "path" in capsys.readouterr().err


def test_missing_file_reports_error(capsys, tmp_path):
    status = main.main([str(tmp_path / "absent.txt")])

    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("Error: Unable to read graph file")
    assert captured.out == ""


def test_malformed_file_never_runs_engine(capsys, tmp_path, monkeypatch):
    calls = []

    class RecordingDijkstra:
        def __init__(self, frontier="heap"):
            calls.append(frontier)

        def find_shortest_path(self, graph, start, end):
            calls.append((start, end))
            return None

    monkeypatch.setattr(main, "Dijkstra", RecordingDijkstra)
    path = tmp_path / "broken.txt"
    path.write_text("# Nodes\n1\n2\n# ShortestPath\n1 2\n", encoding="utf-8")

    status = main.main([str(path)])

    assert status == 1
    assert "Missing section(s): # Edges" in capsys.readouterr().err
    assert calls == []


def test_empty_expected_path_reports_error(capsys, tmp_path):
    path = tmp_path / "empty_path.txt"
    path.write_text("# Nodes\n1\n# Edges\n# ShortestPath\n", encoding="utf-8")

    status = main.main([str(path)])

    assert status == 1
    assert "No start or end node provided" in capsys.readouterr().err


def test_format_path():
    assert main.format_path([1, 2, 3]) == "1 -> 2 -> 3"
    assert main.format_path([4]) == "4"
    assert main.format_path([]) == ""


def test_non_utf8_yaml_reports_error(capsys, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_bytes(
        b"graph:\n  nodes: [1]\n  edges: []\nshortest_path: [1]\n# \xff\xfe\n"
    )

    status = main.main([str(path)])

    captured = capsys.readouterr()
    assert status == 1
    assert captured.err.startswith("Error: Graph file")
    assert "not UTF-8 text" in captured.err
