import io
import sys

import pytest

from daakit.backtracking import graph_coloring
from daakit.cli import main
from daakit.graphs import dijkstra
from daakit.huffman import build_huffman, huffman_codes


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out, captured.err


@pytest.mark.parametrize("algorithm", ["selection", "insertion", "merge", "quick", "heap"])
def test_sort_reads_values(monkeypatch, capsys, algorithm):
    values = [9, 3, 7, 3, 1, 8]
    text = f"{len(values)}\n" + " ".join(map(str, values))
    code, out, _ = _run(monkeypatch, capsys, ["sort", "--algorithm", algorithm], text)
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Sorted array:"
    assert lines[1] == " ".join(map(str, sorted(values)))
    assert lines[2].startswith("Time taken: ")
    assert lines[2].endswith(" seconds")


def test_sort_random_values(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["sort", "--algorithm", "quick", "--random", "25"], "")
    numbers = [int(token) for token in out.splitlines()[1].split()]
    assert code == 0
    assert len(numbers) == 25
    assert numbers == sorted(numbers)
    assert all(0 <= n < 1000 for n in numbers)


def test_sort_unknown_algorithm(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["sort", "--algorithm", "bogo"])


def test_sort_missing_elements(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, ["sort"], "3\n1 2")
    assert code == 1
    assert "missing element" in err
    assert out == ""


def test_sort_bad_integer(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["sort"], "2\n1 x")
    assert code == 1
    assert "'x'" in err


GRAPH = [
    [0, 4, 7, 0],
    [4, 0, 1, 0],
    [7, 1, 0, 0],
    [0, 0, 0, 0],
]


def _matrix_text(graph):
    return f"{len(graph)}\n" + "\n".join(" ".join(map(str, row)) for row in graph)


def test_dijkstra_table(monkeypatch, capsys):
    text = _matrix_text(GRAPH) + "\n0\n"
    code, out, _ = _run(monkeypatch, capsys, ["dijkstra"], text)
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Vertex\tDistance from Source"
    expected = dijkstra(GRAPH, 0)
    for line, (vertex, distance) in zip(lines[1:], enumerate(expected)):
        shown = "inf" if distance == float("inf") else str(distance)
        assert line == f"{vertex}\t{shown}"
    assert lines[-1] == "3\tinf"
    assert len(lines) == 1 + len(GRAPH)


def test_dijkstra_source_out_of_range(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["dijkstra"], _matrix_text(GRAPH) + "\n9\n")
    assert code == 1
    assert "error" in err


def test_huffman_codes(monkeypatch, capsys):
    symbols = ["a", "b", "c", "d", "e", "f"]
    freqs = [5, 9, 12, 13, 16, 45]
    text = f"6\n{' '.join(symbols)}\n{' '.join(map(str, freqs))}\n"
    code, out, _ = _run(monkeypatch, capsys, ["huffman"], text)
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Huffman Codes:"
    expected = [f"{s}: {c}" for s, c in huffman_codes(build_huffman(symbols, freqs))]
    assert lines[1 : 1 + len(expected)] == expected
    assert lines[-2] == "Best-case complexity: O(n log n)"
    assert lines[-1] == "Worst-case complexity: O(n log n)"


def test_huffman_rejects_multi_character_symbol(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, ["huffman"], "2\nab c\n1 2\n")
    assert code == 1
    assert "single character" in err


TRIANGLE = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]


def test_color_solution(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["color"], _matrix_text(TRIANGLE) + "\n3\n")
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Solution exists:"
    expected = graph_coloring(TRIANGLE, 3)
    assert lines[1:] == [f"Vertex {v} -> Color {c}" for v, c in enumerate(expected)]


def test_color_no_solution(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, ["color"], _matrix_text(TRIANGLE) + "\n2\n")
    assert code == 0
    assert out.splitlines() == ["No solution exists"]


def test_command_is_required(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main([])