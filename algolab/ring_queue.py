"""A double-ended queue that prints as an arrow-joined chain."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


def _to_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class RingQueue:
    """Queue with additions at the back and removal from either end."""

    def __init__(self, *values: Any) -> None:
        self._items: deque[Any] = deque(values)

    def add(self, value: Any) -> None:
        """Append ``value`` at the back."""
        self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the back value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " -> ".join(_to_string(v) for v in self._items)