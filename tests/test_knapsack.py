import pytest

from algolab.knapsack import greedy_knapsack, knapsack_01


def test_knapsack_01_classic_instance():
    assert knapsack_01(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_01_zero_capacity_gives_nothing():
    assert knapsack_01(0, [1, 2, 3], [10, 20, 30]) == 0


def test_knapsack_01_everything_fits():
    assert knapsack_01(100, [5, 10, 15], [20, 25, 8]) == 20 + 25 + 8


def test_knapsack_01_no_items():
    assert knapsack_01(10, [], []) == 0


def test_knapsack_01_monotone_in_capacity():
    weights = [3, 4, 5, 9, 4]
    values = [3, 4, 4, 10, 4]
    results = [knapsack_01(c, weights, values) for c in range(0, 26)]
    assert results == sorted(results)


def test_knapsack_01_item_too_heavy_is_ignored():
    assert knapsack_01(4, [5], [100]) == 0


def test_knapsack_01_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_01(10, [1, 2], [3])


def test_knapsack_01_rejects_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_01(-1, [1], [1])


def test_knapsack_01_rejects_negative_weight():
    with pytest.raises(ValueError):
        knapsack_01(5, [-1], [1])


def test_greedy_knapsack_worked_example():
    assert greedy_knapsack(16, [5, 10, 15], [20, 25, 8]) == pytest.approx(45.533333, abs=1e-5)


def test_greedy_knapsack_everything_fits():
    assert greedy_knapsack(100, [5, 10, 15], [20, 25, 8]) == pytest.approx(53.0)


def test_greedy_knapsack_zero_capacity():
    assert greedy_knapsack(0, [5, 10], [20, 25]) == 0.0


def test_greedy_knapsack_order_of_items_does_not_matter():
    a = greedy_knapsack(16, [5, 10, 15], [20, 25, 8])
    b = greedy_knapsack(16, [15, 5, 10], [8, 20, 25])
    assert a == pytest.approx(b)


@pytest.mark.parametrize("capacity", [0, 3, 7, 12, 20, 30])
def test_greedy_fractional_bounds_exact_answer(capacity):
    weights = [3, 4, 5, 9, 4]
    values = [3, 4, 4, 10, 4]
    assert greedy_knapsack(capacity, weights, values) >= knapsack_01(capacity, weights, values)


def test_greedy_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        greedy_knapsack(10, [0, 1], [5, 5])


def test_greedy_knapsack_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        greedy_knapsack(10, [1, 2], [5])