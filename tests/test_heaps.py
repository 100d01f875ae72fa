from collections import Counter

import pytest

from algokit.heaps import k_smallest_pairs, kth_largest, least_interval, top_k_frequent


def test_kth_largest_example():
    assert kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_kth_largest_matches_sorted_order(k):
    nums = [7, -3, 7, 0, 12, 4]
    assert kth_largest(nums, k) == sorted(nums, reverse=True)[k - 1]


def test_kth_largest_k_beyond_length_gives_minimum():
    assert kth_largest([4, 9, 2], 10) == 2


def test_kth_largest_rejects_bad_input():
    with pytest.raises(ValueError):
        kth_largest([1, 2], 0)
    with pytest.raises(ValueError):
        kth_largest([], 1)


def test_top_k_frequent_orders_by_count():
    nums = [1, 1, 1, 2, 2, 3]
    assert top_k_frequent(nums, 2) == [1, 2]


def test_top_k_frequent_counts_are_non_increasing():
    nums = [5, 3, 5, 9, 9, 9, 3, 5, 5, 1]
    counts = Counter(nums)
    result = top_k_frequent(nums, 4)
    assert sorted(result) == sorted(counts)
    freqs = [counts[v] for v in result]
    assert freqs == sorted(freqs, reverse=True)


def test_top_k_frequent_non_positive_k():
    assert top_k_frequent([1, 2, 2], 0) == []
    assert top_k_frequent([1, 2, 2], -3) == []


def test_k_smallest_pairs_sums_are_smallest():
    nums1, nums2, k = [1, 7, 11], [2, 4, 6], 5
    result = k_smallest_pairs(nums1, nums2, k)
    assert len(result) == k
    sums = [a + b for a, b in result]
    assert sums == sorted(sums)
    all_sums = sorted(a + b for a in nums1 for b in nums2)
    assert sums == all_sums[:k]
    assert all(a in nums1 and b in nums2 for a, b in result)


def test_k_smallest_pairs_returns_all_when_k_large():
    result = k_smallest_pairs([1, 2], [3], 10)
    assert sorted(result) == [(1, 3), (2, 3)]


@pytest.mark.parametrize("nums1, nums2, k", [([], [1], 2), ([1], [], 2), ([1], [2], 0)])
def test_k_smallest_pairs_empty_cases(nums1, nums2, k):
    assert k_smallest_pairs(nums1, nums2, k) == []


def test_least_interval_example():
    assert least_interval("AAABBB", 2) == 8


def test_least_interval_without_cooldown_is_task_count():
    tasks = list("AABCCCD")
    assert least_interval(tasks, 0) == len(tasks)


def test_least_interval_single_task_kind():
    # three A's with a gap of 2 between each: A _ _ A _ _ A
    assert least_interval("AAA", 2) == 3 + 2 * 2


def test_least_interval_bounds():
    tasks = "AAAABBCD"
    result = least_interval(tasks, 3)
    assert result >= len(tasks)
    assert result >= (4 - 1) * (3 + 1) + 1


def test_least_interval_empty():
    assert least_interval([], 5) == 0