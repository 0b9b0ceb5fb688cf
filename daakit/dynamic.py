"""Dynamic-programming solutions to classic optimisation problems."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from itertools import accumulate

__all__ = [
    "matrix_chain_order",
    "optimal_bst_cost",
    "knapsack_01",
    "lcs_length",
]


def matrix_chain_order(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a matrix chain.

    ``dims`` has one more entry than there are matrices: matrix ``i`` is
    ``dims[i-1] x dims[i]``.
    """
    if len(dims) < 2:
        raise ValueError("dims must describe at least one matrix")
    count = len(dims) - 1
    # cost[i][j]: best cost for matrices i..j (0-based, inclusive)
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def optimal_bst_cost(frequencies: Sequence[int]) -> int:
    """Return the search cost of an optimal binary search tree.

    ``frequencies`` gives the access counts of the keys in sorted key order.
    """
    count = len(frequencies)
    if count == 0:
        raise ValueError("at least one key is required")
    prefix = [0, *accumulate(frequencies)]
    cost = [[0] * count for _ in range(count)]
    for i, freq in enumerate(frequencies):
        cost[i][i] = freq
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            weight = prefix[j + 1] - prefix[i]
            cost[i][j] = weight + min(
                (cost[i][r - 1] if r > i else 0) + (cost[r + 1][j] if r < j else 0)
                for r in range(i, j + 1)
            )
    return cost[0][count - 1]


def knapsack_01(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best total value of items fitting in ``capacity``; each item once."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs_length(first: Sequence[Hashable], second: Sequence[Hashable]) -> int:
    """Return the length of the longest common subsequence of two sequences."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]