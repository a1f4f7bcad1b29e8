"""Array problems: lookups, in-place compaction, counting and sliding windows."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int] | None:
    """Return the indices of two numbers adding up to target, or None."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return [partner, index]
        seen[num] = index
    return None


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place so its first k items are unique; return k."""
    if not nums:
        return 0
    kept = 1
    for value in nums[1:]:
        if value != nums[kept - 1]:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: list[int], val: int) -> int:
    """Move every item other than val to the front, in place; return their count."""
    kept = 0
    for value in list(nums):
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority element using a voting scan."""
    values = iter(nums)
    try:
        candidate = next(values)
    except StopIteration:
        raise ValueError("majority_element() needs at least one number") from None
    count = 1
    for value in values:
        count += 1 if value == candidate else -1
        if count < 0:
            candidate, count = value, 0
    return candidate


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether a value repeats while at most k values are remembered.

    Once the set of remembered values grows past k, the entry equal to
    ``index - k`` is dropped from it.
    """
    seen: set[int] = set()
    for index, num in enumerate(nums):
        if num in seen:
            return True
        seen.add(num)
        if len(seen) > k:
            seen.discard(index - k)
    return False


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..n that is absent from nums."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the others."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def find_lhs(nums: Sequence[int]) -> int:
    """Return the length of the longest subsequence whose max and min differ by 1."""
    counts = Counter(nums)
    return max(
        (count + counts[value + 1] for value, count in counts.items() if value + 1 in counts),
        default=0,
    )


def find_max_average(nums: Sequence[int], k: int) -> float:
    """Return the greatest average of k consecutive numbers."""
    if k < 1 or k > len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} numbers")
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each number by the sum of the next k (or previous -k) in a circle."""
    n = len(code)
    if abs(k) > n:
        raise ValueError(f"key {k} is longer than the code of length {n}")
    if k == 0:
        return [0] * n
    doubled = list(code) * 2
    if k > 0:
        return [sum(doubled[i + 1 : i + 1 + k]) for i in range(n)]
    return [sum(doubled[i + n + k : i + n]) for i in range(n)]