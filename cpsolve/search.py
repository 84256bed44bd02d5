"""Binary search over a sorted sequence."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(arr: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``arr``, or None."""
    lo, hi = 0, len(arr)
    while lo < hi:
        mid = lo + (hi - lo) // 2
        value = arr[mid]
        if value < target:
            lo = mid + 1
        elif value > target:
            hi = mid
        else:
            return mid
    return None