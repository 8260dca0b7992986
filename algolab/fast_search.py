"""Consistent hash ring with a windowed lookup that reuses a nearby index."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence

from algolab.consistent import EmptyCircleError, StrMsg, _fill, _hash_key, _search

_WINDOW = 250
_FENCE_HOSTS = (
    "lt-henan-xuchang-sn7-172-31-134-35",
    "lt-henan-kaifeng-sn8-172-31-121-45",
    "lt-henan-kaifeng-sn8-172-31-121-55",
    "lt-henan-xinyang-sn17-172-31-76-203",
)
_FENCE_REPLICAS = 20
_FENCE_COPIES = 20
_FENCE_WEIGHT = 50


class FastConsistentStr:
    """Ring whose lookups also report the index of the point that was hit.

    A ring finalized with exactly one member answers every lookup with it.
    """

    def __init__(self) -> None:
        self.number_of_replicas = 200
        self.use_fnv = True
        self._one_elt = ""
        self._circle: dict[int, str] = {}
        self._pending: list[StrMsg] = []
        self._sorted: list[int] = []

    @staticmethod
    def _elt_key(elt: str, idx: int, weight: int) -> str:
        return f"{idx * 10000 + weight}{elt}"

    def __len__(self) -> int:
        return len(self._sorted)

    def set_number_of_replicas(self, num: int) -> None:
        """Set the replica count, never below one."""
        self.number_of_replicas = max(num, 1)

    def add(self, elt: str, weight: int) -> None:
        """Queue a member; it takes effect on the next ``finalize``."""
        self._pending.append(StrMsg(elt, weight))

    def add_all(self, nodes: Iterable[StrMsg]) -> None:
        """Replace the queue with ``nodes`` and finalize at once."""
        self._pending = list(nodes)
        self.finalize()

    def finalize(self) -> None:
        """Place all queued members on the ring and clear the queue."""
        self._insert(self._pending)
        self._pending = []

    def _insert(self, nodes: list[StrMsg]) -> None:
        if len(nodes) == 1:
            self._one_elt = nodes[0].key
            return
        _fill(
            self._circle,
            ((msg.key, msg.weight) for msg in nodes),
            self.number_of_replicas,
            self.use_fnv,
            self._elt_key,
        )
        self._sorted = sorted(self._circle)

    def _check(self) -> None:
        if not self._circle:
            raise EmptyCircleError()

    def _at(self, index: int) -> tuple[str, int]:
        return self._circle[self._sorted[index]], index

    def _search_between(self, key: int, low: int, high: int) -> int:
        i = bisect_right(self._sorted, key, low, high)
        return low if i >= high else i

    def get(self, name: str) -> tuple[str, int]:
        """Return the owning member and the index of its point."""
        if self._one_elt:
            return self._one_elt, 0
        self._check()
        return self._at(_search(self._sorted, _hash_key(name, self.use_fnv)))

    def get_with_idx(self, name: str, idx: int) -> tuple[str, int]:
        """Look ``name`` up, searching first within 250 points of ``idx``."""
        if self._one_elt:
            return self._one_elt, 0
        self._check()
        if not 0 <= idx < len(self._sorted):
            raise IndexError(f"index {idx} out of range for ring of {len(self._sorted)} points")
        key = _hash_key(name, self.use_fnv)
        idx_value = self._sorted[idx]
        if idx_value == key:
            return self._at(idx)
        if idx_value > key:
            low = max(idx - _WINDOW, 0)
            if self._sorted[low] > key:
                return self._at(_search(self._sorted, key))
            return self._at(self._search_between(key, low, idx))
        high = min(idx + _WINDOW, len(self._sorted) - 1)
        if self._sorted[high] < key:
            return self._at(_search(self._sorted, key))
        return self._at(self._search_between(key, idx, high))

    def get_not_need_hash(self, key: int) -> str:
        """Return the member owning the first point after an already hashed ``key``."""
        if self._one_elt:
            return self._one_elt
        self._check()
        return self._circle[self._sorted[_search(self._sorted, key)]]


def build_fences() -> list[FastConsistentStr]:
    """Build the four sample rings, one per host, each with twenty copies."""
    fences = []
    for host in _FENCE_HOSTS:
        ring = FastConsistentStr()
        ring.set_number_of_replicas(_FENCE_REPLICAS)
        for i in range(_FENCE_COPIES):
            ring.add(f"{i}{host}", _FENCE_WEIGHT)
        ring.finalize()
        fences.append(ring)
    return fences


def lookup(fences: Sequence[FastConsistentStr], name: str) -> tuple[str, int]:
    """Look ``name`` up in every ring and return the last ring's answer."""
    if not fences:
        raise ValueError("no rings to look up")
    result = ("", 0)
    for fence in fences:
        result = fence.get(name)
    return result


def lookup_with_idx(fences: Sequence[FastConsistentStr], name: str) -> tuple[str, int]:
    """Look ``name`` up in the first ring, then pass each index on to the next ring."""
    if not fences:
        raise ValueError("no rings to look up")
    result = fences[0].get(name)
    for fence in fences[1:]:
        result = fence.get_with_idx(name, result[1])
    return result