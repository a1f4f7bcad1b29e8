"""Singly linked list node and helpers for building and inspecting lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list from values; an empty input gives None."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def list_equal(l1: Optional[ListNode], l2: Optional[ListNode]) -> bool:
    """Tell whether two lists hold the same values in the same order."""
    while l1 is not None and l2 is not None:
        if l1.val != l2.val:
            return False
        l1, l2 = l1.next, l2.next
    return l1 is None and l2 is None


def format_list(head: Optional[ListNode]) -> str:
    """Render a list as ``[a -> b -> c]``, or ``[]`` when empty."""
    return "[" + " -> ".join(str(v) for v in list_to_values(head)) + "]"


def print_list(head: Optional[ListNode]) -> None:
    """Print a list in the form produced by format_list."""
    print(format_list(head))


def get_length(head: Optional[ListNode]) -> int:
    """Return the number of nodes in a list."""
    return sum(1 for _ in _nodes(head))


def get_node_at(head: Optional[ListNode], index: int) -> Optional[ListNode]:
    """Return the node at a 0-based index, or None past the end.

    A negative index gives the head itself.
    """
    if index <= 0:
        return head
    return next(islice(_nodes(head), index, None), None)