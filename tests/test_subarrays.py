from itertools import combinations

import pytest

from cptricks.subarrays import (
    count_subarrays_with_sum,
    find_pair_with_sum,
    max_absolute_difference,
    max_subarray_sum,
    max_subset_sum_at_most,
    mex,
)


def test_max_absolute_difference_example():
    assert max_absolute_difference([1, 3, -1]) == 5


def test_max_absolute_difference_single():
    assert max_absolute_difference([42]) == 0


@pytest.mark.parametrize("a,b", [(3, 9), (9, 3), (-4, 4), (0, 0)])
def test_max_absolute_difference_two_elements(a, b):
    assert max_absolute_difference([a, b]) == abs(a - b) + 1


def test_max_absolute_difference_empty():
    with pytest.raises(ValueError):
        max_absolute_difference([])


def test_max_subarray_sum_all_negative_is_zero():
    assert max_subarray_sum([-3, -1, -7]) == 0


@pytest.mark.parametrize("vals", [[1, 2, 3], [5], [4, 4, 4, 4]])
def test_max_subarray_sum_positive_tail(vals):
    assert max_subarray_sum([0, *vals]) == sum(vals)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_count_subarrays_example():
    assert count_subarrays_with_sum([1, 1, 1], 2) == 2


def test_count_subarrays_no_match():
    assert count_subarrays_with_sum([1, 2, 3], 100) == 0


def test_count_subarrays_all_zero_length_pairs():
    values = [0, 0, 0]
    n = len(values)
    assert count_subarrays_with_sum(values, 0) == n * (n + 1) // 2


def test_find_pair_with_sum_found():
    values = [8, 1, 5, 11, 3]
    pair = find_pair_with_sum(values, 16)
    assert pair is not None
    a, b = pair
    assert a + b == 16 and a <= b and a in values and b in values


def test_find_pair_with_sum_missing():
    assert find_pair_with_sum([1, 2, 4], 100) is None


def test_find_pair_uses_distinct_positions():
    assert find_pair_with_sum([5], 10) is None


@pytest.mark.parametrize(
    "values,limit",
    [([1, 2, 4], 7), ([10, 20, 30, 40, 50], 60), ([7, 3, 9, 2, 8, 6], 17)],
)
def test_max_subset_sum_reaches_reachable_limit(values, limit):
    assert max_subset_sum_at_most(values, limit) == limit


def test_max_subset_sum_respects_limit():
    values = [13, 29, 41, 7, 19, 33, 5]
    for limit in range(0, 160, 11):
        result = max_subset_sum_at_most(values, limit)
        assert result <= limit
        reachable = {
            sum(c) for r in range(len(values) + 1) for c in combinations(values, r)
        }
        assert result in reachable
        assert not any(result < s <= limit for s in reachable)


def test_max_subset_sum_nothing_fits():
    assert max_subset_sum_at_most([50, 60], 10) == 0


def test_mex_full_range():
    assert mex(range(5)) == 5


def test_mex_missing_zero():
    assert mex([1, 2]) == 0


def test_mex_gap():
    values = [0, 1, 2, 4]
    result = mex(values)
    assert result not in values
    assert all(i in values for i in range(result))