from collections import Counter

import pytest

from algokit.heap_problems import (
    ListNode,
    MedianStream,
    kth_greatest,
    kth_smallest,
    merge_k_sorted_arrays,
    merge_k_sorted_lists,
    min_stone_sum,
    reorganize_string,
    running_medians,
    sort_pairs,
)


def _linked(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def test_running_medians_source_example():
    assert running_medians([5, 7, 2, 9, 3, 8]) == [5, 6, 5, 6, 5, 6]


def test_median_stream_starts_at_zero_and_tracks_latest():
    stream = MedianStream()
    assert stream.median() == 0.0
    returned = stream.add(4)
    assert returned == stream.median() == 4.0
    assert len(stream) == 1


def test_running_medians_of_equal_values():
    assert running_medians([3, 3, 3, 3]) == [3.0, 3.0, 3.0, 3.0]


def test_sort_pairs_ordering_invariant():
    pairs = [(3, 1), (1, 2), (3, 5), (1, 9), (2, 0)]
    result = sort_pairs(pairs)
    assert sorted(result) == sorted(pairs)
    for a, b in zip(result, result[1:]):
        assert a[0] < b[0] or (a[0] == b[0] and a[1] >= b[1])


def test_min_stone_sum_zero_operations_keeps_total():
    assert min_stone_sum([5, 4, 9], 0) == 18


def test_min_stone_sum_never_increases_with_more_operations():
    piles = [5, 4, 9, 17]
    totals = [min_stone_sum(piles, k) for k in range(6)]
    assert all(a >= b for a, b in zip(totals, totals[1:]))
    assert totals[-1] < totals[0]


def test_min_stone_sum_piles_of_one_stay():
    assert min_stone_sum([1, 1], 3) == 2


@pytest.mark.parametrize("text", ["aab", "aabb", "aaabbc", "vvvlo", "z"])
def test_reorganize_string_valid(text):
    result = reorganize_string(text)
    assert Counter(result) == Counter(text)
    assert all(a != b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("text", ["aaab", "aa", "aaaabc"])
def test_reorganize_string_impossible(text):
    assert reorganize_string(text) == ""


def test_kth_smallest_and_greatest_source_example():
    values = [10, 5, 20, 4, 15]
    assert kth_smallest(values, 3) == 10
    assert kth_greatest(values, 3) == 10


def test_kth_extremes_match_min_and_max():
    values = [7, -2, 11, 3]
    assert kth_smallest(values, 1) == min(values)
    assert kth_greatest(values, 1) == max(values)
    assert kth_smallest(values, len(values)) == max(values)


@pytest.mark.parametrize("k", [0, 6])
def test_kth_rejects_bad_k(k):
    with pytest.raises(ValueError):
        kth_smallest([1, 2, 3, 4, 5], k)
    with pytest.raises(ValueError):
        kth_greatest([1, 2, 3, 4, 5], k)


def test_merge_k_sorted_arrays_source_example():
    arrays = [[2, 4, 6, 8], [1, 3, 5, 7], [0, 9, 10, 11]]
    merged = merge_k_sorted_arrays(arrays)
    assert merged == sorted(x for row in arrays for x in row)


def test_merge_k_sorted_arrays_ragged_and_empty():
    assert merge_k_sorted_arrays([[], [3], [1, 2, 5]]) == [1, 2, 3, 5]
    assert merge_k_sorted_arrays([]) == []


def test_merge_k_sorted_lists():
    lists = [_linked([1, 4, 5]), _linked([1, 3, 4]), _linked([2, 6]), None]
    head = merge_k_sorted_lists(lists)
    assert _values(head) == [1, 1, 2, 3, 4, 4, 5, 6]


def test_merge_k_sorted_lists_all_empty():
    assert merge_k_sorted_lists([None, None]) is None
    assert merge_k_sorted_lists([]) is None