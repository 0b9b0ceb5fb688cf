"""Command-line front end reading whitespace-separated input from stdin."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Iterable, Sequence

from daakit import sorting
from daakit.backtracking import graph_coloring
from daakit.graphs import dijkstra
from daakit.huffman import build_huffman, huffman_codes

__all__ = ["main"]

SORTS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "selection": sorting.selection_sort,
    "insertion": sorting.insertion_sort,
    "merge": sorting.merge_sort,
    "quick": sorting.quick_sort,
    "heap": sorting.heap_sort,
}


class _InputError(ValueError):
    """Raised when stdin does not hold the expected input."""


class _Tokens:
    """Whitespace-separated tokens read in order."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self, what: str) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise _InputError(f"missing {what}") from None

    def integer(self, what: str) -> int:
        token = self.word(what)
        try:
            return int(token)
        except ValueError:
            raise _InputError(f"expected an integer for {what}, got {token!r}") from None

    def count(self, what: str) -> int:
        value = self.integer(what)
        if value < 0:
            raise _InputError(f"{what} must not be negative")
        return value

    def matrix(self) -> list[list[int]]:
        size = self.count("number of vertices")
        return [
            [self.integer("matrix entry") for _ in range(size)] for _ in range(size)
        ]


def _run_sort(args: argparse.Namespace, tokens: _Tokens) -> None:
    if args.random is not None:
        if args.random < 0:
            raise _InputError("number of elements must not be negative")
        values = [random.randrange(1000) for _ in range(args.random)]
    else:
        count = tokens.count("number of elements")
        values = [tokens.integer("element") for _ in range(count)]
    result, elapsed = sorting.timed_sort(SORTS[args.algorithm], values)
    print("Sorted array:")
    print(" ".join(map(str, result)))
    print(f"Time taken: {elapsed:f} seconds")


def _run_dijkstra(args: argparse.Namespace, tokens: _Tokens) -> None:
    graph = tokens.matrix()
    source = tokens.integer("source vertex")
    distances = dijkstra(graph, source, args.prefer_last)
    print("Vertex\tDistance from Source")
    for vertex, distance in enumerate(distances):
        shown = "inf" if distance == math.inf else str(distance)
        print(f"{vertex}\t{shown}")


def _run_huffman(args: argparse.Namespace, tokens: _Tokens) -> None:
    count = tokens.count("number of characters")
    symbols = []
    for _ in range(count):
        symbol = tokens.word("character")
        if len(symbol) != 1:
            raise _InputError(f"expected a single character, got {symbol!r}")
        symbols.append(symbol)
    frequencies = [tokens.integer("frequency") for _ in range(count)]
    root = build_huffman(symbols, frequencies)
    print("Huffman Codes:")
    for symbol, code in huffman_codes(root):
        print(f"{symbol}: {code}")
    print()
    print("Best-case complexity: O(n log n)")
    print("Worst-case complexity: O(n log n)")


def _run_color(args: argparse.Namespace, tokens: _Tokens) -> None:
    graph = tokens.matrix()
    colors = tokens.integer("number of colors")
    coloring = graph_coloring(graph, colors)
    if coloring is None:
        print("No solution exists")
        return
    print("Solution exists:")
    for vertex, color in enumerate(coloring):
        print(f"Vertex {vertex} -> Color {color}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daakit", description="Run classic algorithms on input read from stdin."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sort = commands.add_parser("sort", help="sort integers and time the sort")
    sort.add_argument("--algorithm", choices=sorted(SORTS), default="selection")
    sort.add_argument(
        "--random",
        type=int,
        metavar="COUNT",
        help="sort COUNT random values in 0..999 instead of reading input",
    )
    sort.set_defaults(handler=_run_sort)

    short = commands.add_parser("dijkstra", help="single-source shortest paths")
    short.add_argument(
        "--prefer-last",
        action="store_true",
        help="break distance ties in favour of the highest vertex",
    )
    short.set_defaults(handler=_run_dijkstra)

    huff = commands.add_parser("huffman", help="Huffman codes for characters")
    huff.set_defaults(handler=_run_huffman)

    color = commands.add_parser("color", help="m-colouring of a graph")
    color.set_defaults(handler=_run_color)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the chosen command on stdin and return an exit code."""
    args = _build_parser().parse_args(argv)
    tokens = _Tokens(sys.stdin.read())
    try:
        args.handler(args, tokens)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())