import pytest

from algolab.subsets import sum_of_subsets


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(any(x == y for y in it) for x in part)


def test_known_instance():
    assert sum_of_subsets([1, 2, 5, 6, 8], 9) == [[1, 2, 6], [1, 8]]


@pytest.mark.parametrize(
    "values,target",
    [([1, 2, 5, 6, 8], 9), ([3, 5, 6, 7], 15), ([1, 2, 3, 4, 5], 7), ([2, 4, 6, 8], 10)],
)
def test_every_subset_sums_to_target(values, target):
    found = sum_of_subsets(values, target)
    assert found
    for subset in found:
        assert sum(subset) == target
        assert _is_subsequence(subset, values)


def test_subsets_are_distinct_for_distinct_values():
    found = sum_of_subsets([1, 2, 3, 4, 5], 7)
    assert len({tuple(s) for s in found}) == len(found)


def test_whole_set_when_target_is_total():
    assert sum_of_subsets([1, 2, 3], 6) == [[1, 2, 3]]


def test_single_element_match():
    assert sum_of_subsets([4], 4) == [[4]]


def test_target_above_total_gives_nothing():
    assert sum_of_subsets([1, 2, 3], 100) == []


def test_smallest_above_target_gives_nothing():
    assert sum_of_subsets([5, 6, 7], 4) == []


def test_empty_values_give_nothing():
    assert sum_of_subsets([], 3) == []


def test_rejects_unsorted_values():
    with pytest.raises(ValueError):
        sum_of_subsets([3, 1, 2], 3)


def test_rejects_non_positive_values():
    with pytest.raises(ValueError):
        sum_of_subsets([0, 1, 2], 3)