"""Thread-safe counters, sample lookup tables and a reusable record pool."""

from __future__ import annotations

import threading
from dataclasses import dataclass


class FenceCounters:
    """Per-key counters that may be incremented from many threads."""

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}
        self._lock = threading.Lock()

    def increment(self, n: int) -> int:
        """Add one to the counter for ``n`` and return its new value."""
        with self._lock:
            value = self._counts.get(n, 0) + 1
            self._counts[n] = value
            return value

    def count(self, n: int) -> int:
        """Current value of the counter for ``n``; zero if never incremented."""
        with self._lock:
            return self._counts.get(n, 0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


_ENTRIES = tuple((str(j), str(j)) for j in range(100, 105))
_TABLE = dict(_ENTRIES)


def lookup_list(tag: str) -> str:
    """Find ``tag`` by scanning the sample entries."""
    found = next((value for key, value in _ENTRIES if key == tag), None)
    if found is None:
        raise KeyError(tag)
    return found


def lookup_set(tag: str) -> str:
    """Find ``tag`` in the sample table."""
    return _TABLE[tag]


@dataclass
class SNodeRedirectData:
    """A redirect record."""

    node_key: str = ""
    cover: str = ""
    view: str = ""
    region: str = ""
    s_node_name: str = ""
    kind: int = 0
    value: int = 0

    def reset(self) -> None:
        """Clear every field back to its empty value."""
        self.node_key = ""
        self.cover = ""
        self.view = ""
        self.region = ""
        self.s_node_name = ""
        self.kind = 0
        self.value = 0


class RedirectDataPool:
    """Thread-safe pool of reusable ``SNodeRedirectData`` records."""

    def __init__(self) -> None:
        self._free: list[SNodeRedirectData] = []
        self._lock = threading.Lock()

    def get(self) -> SNodeRedirectData:
        """Take a pooled record, or a new one if the pool is empty."""
        with self._lock:
            if self._free:
                return self._free.pop()
        return SNodeRedirectData()

    def put(self, data: SNodeRedirectData) -> None:
        """Return a record slot: ``data`` is dropped and a fresh record pooled."""
        del data
        with self._lock:
            self._free.append(SNodeRedirectData())

    def put_reset(self, data: SNodeRedirectData) -> None:
        """Clear ``data`` and pool it for reuse."""
        data.reset()
        with self._lock:
            self._free.append(data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._free)