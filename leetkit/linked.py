"""Linked list problems: removal, merging, cycles, intersections and reversal."""

from __future__ import annotations

from typing import Optional

from leetkit.listnode import ListNode, get_length, get_node_at


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node from the end (1-based) and return the new head."""
    if n < 1:
        raise ValueError(f"position {n} must be at least 1")
    dummy = ListNode(0, head)
    lead = dummy
    for _ in range(n):
        lead = lead.next
        if lead is None:
            raise ValueError(f"position {n} is past the length of the list")
    trail = dummy
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one; on equal values list2's node comes first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val >= list2.val:
            tail.next, list2 = list2, list2.next
        else:
            tail.next, list1 = list1, list1.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following next pointers from head loops forever."""
    if head is None:
        return False
    slow, fast = head, head.next
    while fast is not None:
        if slow is fast:
            return True
        slow = slow.next
        fast = fast.next
        if fast is not None:
            fast = fast.next
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where a cycle begins, or None if there is no cycle."""
    if head is None or head.next is None:
        return None
    slow, fast = head.next, head.next.next
    while slow is not fast:
        if fast is None or fast.next is None:
            return None
        slow = slow.next
        fast = fast.next.next
    fast = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by two lists, or None."""
    len_a, len_b = get_length(head_a), get_length(head_b)
    if len_a < len_b:
        longer, shorter = head_b, head_a
    else:
        longer, shorter = head_a, head_b
    longer = get_node_at(longer, abs(len_a - len_b))
    while longer is not shorter:
        longer = longer.next
        shorter = shorter.next
    return longer


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    previous: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether a list reads the same both ways; the list is left unchanged."""
    if head is None or head.next is None:
        return True
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head
    while fast is not None:
        slow = slow.next
        fast = fast.next
        if fast is not None:
            fast = fast.next
    last_half = reverse_list(slow)
    try:
        return all(a == b for a, b in zip(head, last_half or ()))
    finally:
        reverse_list(last_half)