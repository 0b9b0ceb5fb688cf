import pytest

from daakit.dynamic import knapsack_01
from daakit.knapsack import Item, branch_and_bound_knapsack, fractional_knapsack

VALUES = [60, 100, 120]
WEIGHTS = [10, 20, 30]
ITEMS = [Item(v, w) for v, w in zip(VALUES, WEIGHTS)]


def test_item_ratio():
    assert Item(60, 10).ratio() == 6


def test_item_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        Item(5, 0)


def test_fractional_classic_example():
    assert fractional_knapsack(ITEMS, 50) == pytest.approx(240.0)


def test_fractional_accepts_tuples():
    assert fractional_knapsack(list(zip(VALUES, WEIGHTS)), 50) == fractional_knapsack(ITEMS, 50)


def test_fractional_takes_everything_when_it_fits():
    assert fractional_knapsack(ITEMS, sum(WEIGHTS) + 5) == sum(VALUES)


def test_fractional_zero_capacity():
    assert fractional_knapsack(ITEMS, 0) == 0.0


def test_fractional_at_least_integral():
    for capacity in range(0, 70, 5):
        assert fractional_knapsack(ITEMS, capacity) >= knapsack_01(WEIGHTS, VALUES, capacity)


def test_fractional_negative_capacity_raises():
    with pytest.raises(ValueError):
        fractional_knapsack(ITEMS, -1)


@pytest.mark.parametrize("capacity", [0, 5, 10, 25, 30, 50, 60, 100])
def test_branch_and_bound_matches_dynamic(capacity):
    assert branch_and_bound_knapsack(ITEMS, capacity) == knapsack_01(WEIGHTS, VALUES, capacity)


@pytest.mark.parametrize(
    "values, weights, capacity",
    [
        ([10, 40, 30, 50], [5, 4, 6, 3], 10),
        ([1, 4, 5, 7], [1, 3, 4, 5], 7),
        ([3, 3, 3, 3], [2, 2, 2, 2], 5),
        ([20, 5, 10, 40, 15, 25], [1, 2, 3, 8, 7, 4], 10),
    ],
)
def test_branch_and_bound_various(values, weights, capacity):
    items = list(zip(values, weights))
    assert branch_and_bound_knapsack(items, capacity) == knapsack_01(weights, values, capacity)


def test_branch_and_bound_empty_items():
    assert branch_and_bound_knapsack([], 10) == 0


def test_branch_and_bound_negative_capacity_raises():
    with pytest.raises(ValueError):
        branch_and_bound_knapsack(ITEMS, -3)