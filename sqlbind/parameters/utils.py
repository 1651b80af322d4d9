"""Utility functions for parameter expansion."""

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

__all__ = ("intersperse", "next_power_of_two_or_zero", "pad_with_last")

T = TypeVar("T")


def next_power_of_two_or_zero(n: int) -> int:
    """Return the smallest power of two that is at least ``n``, or 0 when ``n`` is 0.

    Used to size ``@name`` list expansions so that statements built from lists
    of similar length share the same text, and therefore the same prepared
    statement plan.

    Args:
        n: A non-negative length

    Raises:
        ValueError: If ``n`` is negative

    Returns:
        0, 1, 2, 4, 8, ...
    """
    if n < 0:
        msg = f"Expected a non-negative length, got {n}"
        raise ValueError(msg)
    if n == 0:
        return 0
    return 1 << (n - 1).bit_length()


def intersperse(items: "Iterable[T]", separator: T) -> "Iterator[T]":
    """Yield ``items`` with ``separator`` placed between each consecutive pair."""
    for index, item in enumerate(items):
        if index:
            yield separator
        yield item


def pad_with_last(items: "Sequence[T]", size: int) -> "list[T]":
    """Extend ``items`` to ``size`` by repeating its last element.

    Never truncates; an empty sequence stays empty.

    Args:
        items: Values to pad
        size: Target length

    Returns:
        A new list of at least ``len(items)`` elements
    """
    padded = list(items)
    if padded and len(padded) < size:
        padded.extend([padded[-1]] * (size - len(padded)))
    return padded
