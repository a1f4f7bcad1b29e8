import pytest

from leetkit.linked import (
    detect_cycle,
    get_intersection_node,
    has_cycle,
    is_palindrome,
    merge_two_lists,
    remove_nth_from_end,
    reverse_list,
)
from leetkit.listnode import build_list, get_node_at, list_to_values


def create_cycle(values, pos):
    """Build a list whose tail links back to the node at pos (-1 for none)."""
    head = build_list(values)
    if head is None or pos == -1:
        return head, None
    entry = get_node_at(head, pos)
    tail = get_node_at(head, len(values) - 1)
    tail.next = entry
    return head, entry


@pytest.mark.parametrize(
    "values, pos, want_val",
    [
        ([1, 2, 3, 4], -1, None),
        ([], -1, None),
        ([1], -1, None),
        ([3, 2, 0, -4], 0, 3),
        ([3, 2, 0, -4], 1, 2),
        ([1, 2], 1, 2),
        ([1, 2], 0, 1),
        ([1, 2, 3, 4, 5], 2, 3),
    ],
)
def test_detect_cycle(values, pos, want_val):
    head, entry = create_cycle(values, pos)
    got = detect_cycle(head)
    if want_val is None:
        assert got is None
    else:
        assert got is entry
        assert got.val == want_val


def test_detect_cycle_self_loop():
    head, entry = create_cycle([7], 0)
    assert detect_cycle(head) is entry


def test_detect_cycle_long_list():
    head, entry = create_cycle(list(range(1000)), 500)
    assert detect_cycle(head) is entry


@pytest.mark.parametrize(
    "values, pos, want",
    [
        ([3, 2, 0, -4], 1, True),
        ([1, 2], 0, True),
        ([1], 0, True),
        ([1], -1, False),
        ([], -1, False),
        ([1, 2, 3, 4, 5], -1, False),
    ],
)
def test_has_cycle(values, pos, want):
    head, _ = create_cycle(values, pos)
    assert has_cycle(head) == want


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]),
        ([1, 2], [2, 1]),
        ([1, 2, 3], [3, 2, 1]),
        ([1], [1]),
    ],
)
def test_reverse_list(values, expected):
    assert list_to_values(reverse_list(build_list(values))) == expected


def test_reverse_list_empty():
    assert reverse_list(None) is None


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 3, 4, 5], False),
        ([1, 1], True),
        ([1, 2], False),
    ],
)
def test_is_palindrome_restores_list(values, expected):
    head = build_list(values)
    assert is_palindrome(head) == expected
    assert list_to_values(head) == values


def test_is_palindrome_trivial():
    assert is_palindrome(None)
    assert is_palindrome(build_list([9]))


@pytest.mark.parametrize(
    "values, n, expected",
    [
        ([1, 2, 3, 4, 5], 2, [1, 2, 3, 5]),
        ([1], 1, []),
        ([1, 2], 1, [1]),
        ([1, 2], 2, [2]),
    ],
)
def test_remove_nth_from_end(values, n, expected):
    assert list_to_values(remove_nth_from_end(build_list(values), n)) == expected


@pytest.mark.parametrize("n", [0, 4])
def test_remove_nth_from_end_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2, 3]), n)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([1, 2, 4], [1, 3, 4], [1, 1, 2, 3, 4, 4]),
        ([], [], []),
        ([], [0], [0]),
        ([5], [], [5]),
    ],
)
def test_merge_two_lists(a, b, expected):
    assert list_to_values(merge_two_lists(build_list(a), build_list(b))) == expected


def test_merge_two_lists_ties_take_second_first():
    first = build_list([1])
    second = build_list([1])
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_get_intersection_node():
    common = build_list([8, 4, 5])
    head_a = build_list([4, 1])
    get_node_at(head_a, 1).next = common
    head_b = build_list([5, 6, 1])
    get_node_at(head_b, 2).next = common
    assert get_intersection_node(head_a, head_b) is common
    assert get_intersection_node(head_b, head_a) is common


def test_get_intersection_node_disjoint():
    assert get_intersection_node(build_list([2, 6, 4]), build_list([1, 5])) is None
    assert get_intersection_node(None, build_list([1])) is None


def test_get_intersection_node_same_list():
    head = build_list([1, 2, 3])
    assert get_intersection_node(head, head) is head