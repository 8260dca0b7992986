"""Consistent hashing rings with weighted virtual nodes."""

from __future__ import annotations

import threading
import zlib
from bisect import bisect_right
from collections.abc import Callable, Iterable
from dataclasses import dataclass

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF
_SAMPLE_NODES = 20
_SAMPLE_REPEAT = 50
_SAMPLE_REPLICAS = 20
_SAMPLE_WEIGHT = 1000


class EmptyCircleError(LookupError):
    """Raised when a lookup is made on a ring that holds no points."""

    def __init__(self, message: str = "empty circle") -> None:
        super().__init__(message)


def _fnv32a(data: bytes) -> int:
    """32-bit FNV-1a hash."""
    h = _FNV_OFFSET
    for byte in data:
        h = ((h ^ byte) * _FNV_PRIME) & _MASK32
    return h


def _crc32(data: bytes) -> int:
    """IEEE CRC-32 checksum."""
    return zlib.crc32(data) & _MASK32


def _hash_key(key: str, use_fnv: bool) -> int:
    data = key.encode("utf-8")
    return _fnv32a(data) if use_fnv else _crc32(data)


def _search(sorted_hashes: list[int], key: int) -> int:
    """Index of the first point strictly above ``key``, wrapping to 0."""
    i = bisect_right(sorted_hashes, key)
    return 0 if i >= len(sorted_hashes) else i


def _fill(
    circle: dict[int, str],
    entries: Iterable[tuple[str, int]],
    replicas: int,
    use_fnv: bool,
    elt_key: Callable[[str, int, int], str],
) -> None:
    for name, weight in entries:
        for replica in range(replicas):
            for slot in range(weight):
                circle[_hash_key(elt_key(name, replica, slot), use_fnv)] = name


@dataclass(frozen=True)
class Node:
    """A ring member and how many points per replica it gets."""

    name: str
    weight: int


class Consistent:
    """Thread-safe consistent hash ring; nodes are placed as soon as they are added."""

    def __init__(self) -> None:
        self.number_of_replicas = 200
        self.use_fnv = True
        self._circle: dict[int, str] = {}
        self._sorted: list[int] = []
        self._lock = threading.RLock()

    @staticmethod
    def _elt_key(elt: str, idx: int, weight: int) -> str:
        return f"{idx}{weight}{elt}"

    def set_number_of_replicas(self, num: int) -> None:
        """Set the replica count, never below one."""
        self.number_of_replicas = max(num, 1)

    def add(self, nodes: Iterable[Node]) -> None:
        """Place every node on the ring."""
        with self._lock:
            _fill(
                self._circle,
                ((node.name, node.weight) for node in nodes),
                self.number_of_replicas,
                self.use_fnv,
                self._elt_key,
            )
            self._sorted = sorted(self._circle)

    def get(self, name: str) -> str:
        """Return the member owning the first point after the hash of ``name``."""
        with self._lock:
            if not self._circle:
                raise EmptyCircleError()
            point = self._sorted[_search(self._sorted, _hash_key(name, self.use_fnv))]
            return self._circle[point]


@dataclass(frozen=True)
class StrMsg:
    """A pending ring member: its key and weight."""

    key: str
    weight: int


class ConsistentStr:
    """Consistent hash ring that collects members and places them on ``finalize``."""

    def __init__(self) -> None:
        self.number_of_replicas = 200
        self.use_fnv = True
        self._circle: dict[int, str] = {}
        self._pending: list[StrMsg] = []
        self._sorted: list[int] = []

    @staticmethod
    def _elt_key(elt: str, idx: int, weight: int) -> str:
        return f"{idx * 10000 + weight}{elt}"

    def set_number_of_replicas(self, num: int) -> None:
        """Set the replica count, never below one."""
        self.number_of_replicas = max(num, 1)

    def add(self, elt: str, weight: int) -> None:
        """Queue a member; it takes effect on the next ``finalize``."""
        self._pending.append(StrMsg(elt, weight))

    def finalize(self) -> None:
        """Place all queued members on the ring and clear the queue."""
        _fill(
            self._circle,
            ((msg.key, msg.weight) for msg in self._pending),
            self.number_of_replicas,
            self.use_fnv,
            self._elt_key,
        )
        self._sorted = sorted(self._circle)
        self._pending = []

    def get(self, name: str) -> str:
        """Return the member owning the first point after the hash of ``name``."""
        if not self._circle:
            raise EmptyCircleError()
        point = self._sorted[_search(self._sorted, _hash_key(name, self.use_fnv))]
        return self._circle[point]


def _sample_names() -> list[str]:
    return [str(i) * _SAMPLE_REPEAT for i in range(_SAMPLE_NODES)]


def build_ring() -> Consistent:
    """Build the sample ring: twenty members of weight 1000 at twenty replicas."""
    ring = Consistent()
    ring.set_number_of_replicas(_SAMPLE_REPLICAS)
    ring.add(Node(name, _SAMPLE_WEIGHT) for name in _sample_names())
    return ring


def build_str_ring() -> ConsistentStr:
    """Build the same sample membership on a ``ConsistentStr`` ring."""
    ring = ConsistentStr()
    ring.set_number_of_replicas(_SAMPLE_REPLICAS)
    for name in _sample_names():
        ring.add(name, _SAMPLE_WEIGHT)
    ring.finalize()
    return ring