"""A small Bloom filter over 16 bits with six seeded string hashes."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_SIZE = 16
SEEDS = (7, 11, 13, 31, 37, 61)
_WORD_MASK = (1 << 64) - 1


def _seeded_hash(seed: int, value: str) -> int:
    result = 0
    for byte in value.encode("utf-8"):
        result = (result * seed + byte) & _WORD_MASK
    return result & (DEFAULT_SIZE - 1)


class BloomFilter:
    """Probabilistic set: no false negatives, possible false positives."""

    def __init__(self) -> None:
        self._bits = 0

    def _positions(self, value: str) -> list[int]:
        return [_seeded_hash(seed, value) for seed in SEEDS]

    def add(self, value: str) -> None:
        """Record ``value`` by setting the bit for each of its hashes."""
        for position in self._positions(value):
            self._bits |= 1 << position

    def contains(self, value: str) -> bool:
        """Return False if ``value`` was certainly never added."""
        return all(self._bits >> position & 1 for position in self._positions(value))

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.contains(value)


def main(argv: Sequence[str] | None = None) -> int:
    """Add two sample strings and print membership of three."""
    del argv
    bloom = BloomFilter()
    bloom.add("asd")
    bloom.add("2222")
    for probe in ("asd", "2222", "155343"):
        print(str(bloom.contains(probe)).lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())