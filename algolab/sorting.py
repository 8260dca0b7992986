"""In-place quick sort and heap sort, plus a copying merge sort."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _partition(arr: list[int], low: int, high: int) -> int:
    """Lomuto partition around the last element; return the pivot's final index."""
    pivot = arr[high]
    boundary = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            boundary += 1
            arr[boundary], arr[j] = arr[j], arr[boundary]
    arr[boundary + 1], arr[high] = arr[high], arr[boundary + 1]
    return boundary + 1


def quick_sort(arr: list[int]) -> None:
    """Sort ``arr`` in place with quick sort (last element as pivot)."""
    if len(arr) <= 1:
        return
    pending = [(0, len(arr) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(arr, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))


def _sift_down(arr: list[int], size: int, root: int) -> None:
    """Restore the max-heap property for the subtree rooted at ``root``."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and arr[left] > arr[largest]:
            largest = left
        if right < size and arr[right] > arr[largest]:
            largest = right
        if largest == root:
            return
        arr[root], arr[largest] = arr[largest], arr[root]
        root = largest


def heap_sort(arr: list[int]) -> None:
    """Sort ``arr`` in place with heap sort."""
    n = len(arr)
    for root in reversed(range(n // 2)):
        _sift_down(arr, n, root)
    for end in reversed(range(1, n)):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)


def _merge(left: list[int], right: list[int]) -> list[int]:
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a new sorted list built by merge sort; ``arr`` is left unchanged."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _format_list(values: Sequence[int]) -> str:
    return "[" + " ".join(str(v) for v in values) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Sort two sample arrays with quick sort and print them before and after."""
    del argv
    out = sys.stdout
    arr = [64, 34, 25, 12, 22, 11, 90, 5]
    print("Original array:", _format_list(arr), file=out)
    quick_sort(arr)
    print("Sorted array:  ", _format_list(arr), file=out)

    arr2 = [3, 6, 8, 10, 1, 2, 1]
    print("\nOriginal array:", _format_list(arr2), file=out)
    quick_sort(arr2)
    print("Sorted array:  ", _format_list(arr2), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())