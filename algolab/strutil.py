"""String joining and splitting helpers."""

from __future__ import annotations

SAMPLE = "a'a'a'a'b'a'a'a'a'a"
SEPARATOR = "::"


def join_fields(*args: str) -> str:
    """Join the fields with ``::``."""
    return SEPARATOR.join(args)


def split_sample() -> list[str]:
    """Split the sample on every quote."""
    return SAMPLE.split("'")


def split_sample_n() -> list[str]:
    """Split the sample into at most three parts."""
    return SAMPLE.split("'", 2)


def sample_contains_b() -> bool:
    """Whether the sample holds a ``b``."""
    return "b" in SAMPLE