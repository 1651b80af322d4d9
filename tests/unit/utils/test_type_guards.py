"""Unit tests for sqlbind.utils.type_guards."""

from collections import OrderedDict, deque
from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from sqlbind.utils.type_guards import is_expandable_iterable, is_number


@pytest.mark.parametrize(
    "value",
    [[1, 2], (1,), [], {1, 2}, frozenset({"a"}), deque([1]), range(3), iter([1]), (x for x in "ab")],
    ids=["list", "tuple", "empty_list", "set", "frozenset", "deque", "range", "iterator", "generator"],
)
def test_is_expandable_iterable_true(value: Any) -> None:
    assert is_expandable_iterable(value)


@pytest.mark.parametrize(
    "value",
    ["abc", "", b"abc", bytearray(b"ab"), memoryview(b"ab"), {"a": 1}, OrderedDict(), 1, None, 1.5, object()],
    ids=[
        "str", "empty_str", "bytes", "bytearray", "memoryview", "dict", "ordered_dict", "int", "none", "float", "object"
    ],
)
def test_is_expandable_iterable_false(value: Any) -> None:
    assert not is_expandable_iterable(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, True),
        (-3, True),
        (1.5, True),
        (Decimal("2.50"), True),
        (Fraction(1, 3), True),
        (2j, True),
        (True, False),
        (False, False),
        ("1", False),
        (None, False),
    ],
)
def test_is_number(value: Any, expected: bool) -> None:
    assert is_number(value) is expected
