"""Small exercises: non-adjacent maximum sum, a sliding vote window, an arrow."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_WINDOW = 5


def max_non_adjacent_sum(nums: list[int]) -> int:
    """Largest sum of elements with no two adjacent; needs at least three numbers."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    best = [nums[0], max(nums[0], nums[1]), max(nums[0] + nums[2], nums[1])]
    for value in nums[3:]:
        best.append(max(best[-1], best[-2] + value))
    return best[-1]


@dataclass
class SlidingWindow:
    """Running count of the last five 0/1 samples with a hysteresis result."""

    number: int = 0
    index: int = 0
    slots: list[int] = field(default_factory=lambda: [0] * _WINDOW)

    def append(self, old_result: int, value: int) -> int:
        """Push ``value``; return 1 when all five are set, 0 below four, else ``old_result``."""
        self.index = (self.index + 1) % _WINDOW
        self.number += value - self.slots[self.index]
        self.slots[self.index] = value
        if self.number == _WINDOW:
            return 1
        if self.number < _WINDOW - 1:
            return 0
        return old_result


def window_results(values: Iterable[int]) -> list[int]:
    """Feed ``values`` through a fresh window and collect each result."""
    window = SlidingWindow()
    result = 0
    results = []
    for value in values:
        result = window.append(result, value)
        results.append(result)
    return results


def arrow_pattern() -> list[str]:
    """Return 25 lines of dashes and a star forming a left-pointing arrow."""
    return [
        "-" * (12 - i if i < 12 else i - 12) + "*"
        for i in range(25)
    ]