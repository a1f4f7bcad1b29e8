# leetkit

Solutions to classic algorithm exercises on arrays, strings and singly linked
lists. It also has small helpers for building and inspecting linked lists and
binary trees. It has no dependencies outside the standard library.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Modules

### `leetkit.listnode`

- `ListNode(val=0, next=None)`: a list node. Nodes compare by identity.
  Iterating over a node yields the values from that node to the end of the list.
- `build_list(values)`: builds a list from any iterable. An empty input gives `None`.
- `list_to_values(head)`: returns the values as a Python list.
- `list_equal(l1, l2)`: tells whether two lists hold the same values in the same order.
- `format_list(head)`: returns `"[1 -> 2 -> 3]"`, or `"[]"` for an empty list.
  `print_list(head)` prints that text.
- `get_length(head)`: returns the number of nodes.
- `get_node_at(head, index)`: returns the node at a 0-based index. It returns
  `None` past the end, and the head for a negative index.

### `leetkit.treenode`

- `TreeNode(val=0, left=None, right=None)`: a binary tree node. Nodes compare by identity.
- `build_tree(values)`: builds a tree from a level-order list. `-1` marks a
  missing node.
- `tree_to_values(root)`: returns the level-order list, with `-1` for gaps and
  trailing gaps dropped.
- `tree_equal(t1, t2)`: tells whether two trees have the same shape and values.
- `tree_levels(root)`: returns each level as a list of strings, with `"null"`
  for gaps.
- `print_tree(root)`: prints lines such as `Level 0: [1]`. For an empty tree it
  prints `Empty tree`.
- `get_height(root)` and `count_nodes(root)`: return the number of levels and
  the number of nodes.

### `leetkit.arrays`

- `two_sum(nums, target)`: returns the indices of two numbers that add up to
  `target`, or `None`.
- `remove_duplicates(nums)`: compacts a sorted list in place so that its first
  `k` items are unique, and returns `k`.
- `remove_element(nums, val)`: moves every item other than `val` to the front
  in place, keeping their order, and returns how many there are.
- `majority_element(nums)`: returns the majority element found by a voting
  scan. It raises `ValueError` for an empty input.
- `contains_nearby_duplicate(nums, k)`: tells whether a value repeats while at
  most `k` values are remembered. When the remembered set grows past `k`, the
  entry equal to `index - k` is dropped from it.
- `missing_number(nums)`: returns the one number of `0..n` that is missing.
- `move_zeroes(nums)`: moves zeros to the end in place, keeping the order of
  the other items.
- `find_lhs(nums)`: returns the length of the longest subsequence whose largest
  and smallest values differ by exactly 1. It returns 0 when there is none.
- `find_max_average(nums, k)`: returns the greatest average of `k` consecutive
  numbers. It raises `ValueError` unless `1 <= k <= len(nums)`.
- `decrypt(code, k)`: replaces each number by the sum of the next `k` numbers,
  or of the previous `-k` numbers, around the circle. A `k` of 0 gives all
  zeros. It raises `ValueError` when `abs(k)` is longer than the code.

### `leetkit.strings`

- `roman_to_int(s)`: converts a Roman numeral to an integer. Unknown characters
  count as 0.
- `longest_common_prefix(strs)`: returns the prefix shared by all strings, or
  `""` when there are no strings.
- `str_str(haystack, needle)`: returns the index of the first occurrence of
  `needle`, or `-1`.
- `length_of_last_word(s)`: returns the length of the last space-separated word.
- `is_anagram(s, t)`: tells whether `t` is a rearrangement of `s`.
- `is_subsequence(s, t)`: tells whether deleting characters from `t` can give `s`.

### `leetkit.linked`

- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end, counting
  from 1, and returns the new head. It raises `ValueError` when `n` is below 1
  or greater than the length of the list.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one. When two
  values are equal, the node from `list2` comes first.
- `has_cycle(head)`: tells whether the list loops.
- `detect_cycle(head)`: returns the node where a cycle begins, or `None`.
- `get_intersection_node(head_a, head_b)`: returns the first node that both
  lists share, or `None`.
- `reverse_list(head)`: reverses the list in place and returns the new head.
- `is_palindrome(head)`: tells whether the list reads the same both ways. It
  leaves the list as it found it.

## Examples

```python
from leetkit.arrays import two_sum, move_zeroes
from leetkit.strings import roman_to_int
from leetkit.listnode import build_list, list_to_values
from leetkit.linked import reverse_list
from leetkit.treenode import build_tree, tree_to_values

two_sum([2, 7, 11, 15], 9)          # [0, 1]

nums = [0, 1, 0, 3, 12]
move_zeroes(nums)                   # works in place
nums                                # [1, 3, 12, 0, 0]

roman_to_int("MCMXCIV")             # 1994

head = build_list([1, 2, 3])
list_to_values(reverse_list(head))  # [3, 2, 1]

tree_to_values(build_tree([1, 2, 3, -1, -1, 4, 5]))  # [1, 2, 3, -1, -1, 4, 5]
```

## What it does not do

This is a library only. It has no command-line tool and no runner for
selecting or timing single exercises. Import the functions and call them
directly.

## Tests

```
pytest
```