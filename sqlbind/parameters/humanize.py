"""Literal rendering of bind values for human readers.

The output is meant for logs and debug callbacks only: values are not escaped
and the resulting statement must never be executed.
"""

from typing import TYPE_CHECKING, Final

from sqlbind.utils.type_guards import is_expandable_iterable, is_number

if TYPE_CHECKING:
    from sqlbind.typing import ParameterValue

__all__ = ("NULL_LITERAL", "humanize_value")

NULL_LITERAL: Final = "NULL"


def humanize_value(value: "ParameterValue") -> str:
    """Render a bind value as SQL literal text.

    Args:
        value: ``None``, a number, an iterable of values, or any other object

    Returns:
        ``NULL`` for None, the bare number for numerics, a comma joined list for
        iterables, otherwise the string form of the value in single quotes.
    """
    if value is None:
        return NULL_LITERAL
    if is_number(value):
        return str(value)
    if is_expandable_iterable(value):
        return ",".join(humanize_value(item) for item in value)
    return f"'{value}'"
