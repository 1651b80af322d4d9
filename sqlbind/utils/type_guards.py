"""Type guard functions for runtime type checking in sqlbind.

These checks decide how a bound value is treated: expanded into a list of
placeholders, rendered as a bare number, or bound as a single opaque value.
"""

from collections.abc import Iterable, Mapping
from numbers import Number
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing_extensions import TypeGuard

__all__ = ("is_expandable_iterable", "is_number")

_SCALAR_ITERABLES = (str, bytes, bytearray, memoryview)


def is_expandable_iterable(value: Any) -> "TypeGuard[Iterable[Any]]":
    """Check if a bind value should expand into a list of placeholders.

    Strings, binary buffers and mappings are iterable but bind as a single value.

    Args:
        value: The value to check

    Returns:
        True if the value is an iterable of bind values, False otherwise
    """
    return isinstance(value, Iterable) and not isinstance(value, (*_SCALAR_ITERABLES, Mapping))


def is_number(value: Any) -> "TypeGuard[Number]":
    """Check if a value renders as a bare SQL number.

    Args:
        value: The value to check

    Returns:
        True for ints, floats, decimals and other numbers, False for booleans and everything else
    """
    return isinstance(value, Number) and not isinstance(value, bool)
