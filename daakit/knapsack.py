"""Fractional knapsack by greedy choice and 0/1 knapsack by branch and bound."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Item", "fractional_knapsack", "branch_and_bound_knapsack"]


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: int
    weight: int

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def _by_ratio(items: Iterable[Item | tuple[int, int]]) -> list[Item]:
    parsed = [item if isinstance(item, Item) else Item(*item) for item in items]
    return sorted(parsed, key=Item.ratio, reverse=True)


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def fractional_knapsack(items: Iterable[Item | tuple[int, int]], capacity: int) -> float:
    """Return the best value when items may be taken in fractions."""
    _check_capacity(capacity)
    total = 0.0
    for item in _by_ratio(items):
        if capacity >= item.weight:
            capacity -= item.weight
            total += item.value
        else:
            total += item.ratio() * capacity
            break
    return total


@dataclass(frozen=True)
class _Node:
    level: int
    profit: int
    weight: int


def _bound(node: _Node, items: Sequence[Item], capacity: int) -> float:
    if node.weight >= capacity:
        return 0.0
    bound = float(node.profit)
    weight = node.weight
    index = node.level + 1
    while index < len(items) and weight + items[index].weight <= capacity:
        weight += items[index].weight
        bound += items[index].value
        index += 1
    if index < len(items):
        bound += (capacity - weight) * items[index].ratio()
    return bound


def branch_and_bound_knapsack(
    items: Iterable[Item | tuple[int, int]], capacity: int
) -> int:
    """Return the best 0/1 knapsack value by breadth-first branch and bound."""
    _check_capacity(capacity)
    ordered = _by_ratio(items)
    count = len(ordered)
    best = 0
    queue = deque([_Node(-1, 0, 0)])
    while queue:
        node = queue.popleft()
        if node.level == count - 1:
            continue
        level = node.level + 1
        item = ordered[level]

        taken = _Node(level, node.profit + item.value, node.weight + item.weight)
        if taken.weight <= capacity and taken.profit > best:
            best = taken.profit
        if _bound(taken, ordered, capacity) > best:
            queue.append(taken)

        skipped = _Node(level, node.profit, node.weight)
        if _bound(skipped, ordered, capacity) > best:
            queue.append(skipped)
    return best