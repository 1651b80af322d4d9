from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Union

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from sqlbind.parameters.types import IndexedParameters, NamedParameters

__all__ = (
    "IndexedParameterValues",
    "NamedParameterValues",
    "ParameterSourceLike",
    "ParameterValue",
    "StatementParameters",
)

ParameterValue: TypeAlias = "Union[Any, Iterable[Any], None]"
"""Type alias for a single bind value.

Any opaque driver value, ``None``, or an iterable of values that expands into
a comma separated list of placeholders.
"""
IndexedParameterValues: TypeAlias = "Sequence[Any]"
"""Type alias for values bound by position to ``?`` placeholders."""
NamedParameterValues: TypeAlias = "Mapping[str, ParameterValue]"
"""Type alias for values bound by name to ``:name`` and ``@name`` placeholders."""
ParameterSourceLike: TypeAlias = "Union[IndexedParameters, NamedParameters, None]"
"""Type alias for a resolved parameter source."""
StatementParameters: TypeAlias = "Union[IndexedParameters, NamedParameters, Mapping[str, Any], Sequence[Any], None]"
"""Type alias for statement parameters.

Represents:
- :class:`~sqlbind.parameters.types.IndexedParameters` | :class:`~sqlbind.parameters.types.NamedParameters`
- :type:`Mapping[str, Any]`
- :type:`Sequence[Any]`
- :type:`None`
"""
