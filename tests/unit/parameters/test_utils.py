"""Unit tests for sqlbind.parameters.utils."""

import pytest

from sqlbind.parameters.utils import intersperse, next_power_of_two_or_zero, pad_with_last


@pytest.mark.parametrize(
    ("n", "expected"),
    [(0, 0), (1, 1), (2, 2), (3, 4), (5, 8), (7, 8), (9, 16), (15, 16), (31, 32), (32, 32), (64, 64), (128, 128)],
)
def test_next_power_of_two_or_zero(n: int, expected: int) -> None:
    assert next_power_of_two_or_zero(n) == expected


def test_next_power_of_two_or_zero_rejects_negative() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        next_power_of_two_or_zero(-1)


def test_intersperse() -> None:
    """Test separators are only placed between items."""
    assert list(intersperse([], -1)) == []
    assert list(intersperse([1], -1)) == [1]
    assert list(intersperse([1, 2], 0)) == [1, 0, 2]
    assert list(intersperse(iter([1, 2, 3]), 0)) == [1, 0, 2, 0, 3]


@pytest.mark.parametrize(
    ("items", "size", "expected"),
    [
        ([], 3, []),
        ([1, 2, 3], 3, [1, 2, 3]),
        ([1, 2, 3], 1, [1, 2, 3]),
        ([1], 3, [1, 1, 1]),
        ([2, 1], 3, [2, 1, 1]),
        ([1, 2, 3], 5, [1, 2, 3, 3, 3]),
        ([4, 5, 4], 6, [4, 5, 4, 4, 4, 4]),
    ],
    ids=["empty", "same_size", "smaller_size", "single", "pair", "triple", "repeated_values"],
)
def test_pad_with_last(items: "list[int]", size: int, expected: "list[int]") -> None:
    assert pad_with_last(items, size) == expected


def test_pad_with_last_returns_new_list() -> None:
    items = [1, 2, 3]
    padded = pad_with_last(items, 4)
    assert padded == [1, 2, 3, 3]
    assert items == [1, 2, 3]
