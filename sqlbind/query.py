"""Statement and parameter associations.

A :class:`ParamQuery` pairs a statement with the parameters supplied for it.
The three variants mirror how a caller supplied those parameters: not at all,
by position, or by name. Execution layers only need :meth:`ParamQuery.bind`;
logging and debugging hooks use :meth:`ParamQuery.humanize` or
:meth:`ParamQuery.peek`.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import Self

from sqlbind.parameters.binder import ParameterBinder, resolve_parameter_source
from sqlbind.parameters.types import BoundQuery, IndexedParameters, NamedParameters

if TYPE_CHECKING:
    from sqlbind.typing import IndexedParameterValues, NamedParameterValues, ParameterSourceLike, StatementParameters

__all__ = ("IndexedParamQuery", "NamedParamQuery", "NoParamQuery", "ParamQuery", "create_query")

_default_binder = ParameterBinder()


class ParamQuery(ABC):
    """A statement together with the parameters supplied for it."""

    __slots__ = ("binder", "sql")

    def __init__(self, sql: str, binder: "Optional[ParameterBinder]" = None) -> None:
        self.sql = sql
        self.binder = binder or _default_binder

    @property
    @abstractmethod
    def source(self) -> "ParameterSourceLike":
        """The parameter source bound to the statement."""

    def bind(self) -> BoundQuery:
        """Return the normalized statement and its ordered bind values."""
        return self.binder.bind(self.sql, self.source)

    def humanize(self) -> str:
        """Return the statement with values inlined, for display only."""
        return self.binder.humanize(self.sql, self.source)

    def peek(self, callback: "Callable[[str], Any]") -> Self:
        """Hand the humanized statement to ``callback`` and return the query for chaining.

        Example:
            >>> query = ParamQuery.named("SELECT * FROM t WHERE id = :id", {"id": 3})
            >>> query.peek(print).bind()
            SELECT * FROM t WHERE id = 3
            BoundQuery(sql='SELECT * FROM t WHERE id = ?', parameters=(3,))
        """
        callback(self.humanize())
        return self

    def __str__(self) -> str:
        return self.humanize()

    @staticmethod
    def none(sql: str, binder: "Optional[ParameterBinder]" = None) -> "NoParamQuery":
        return NoParamQuery(sql, binder)

    @staticmethod
    def indexed(
        sql: str, values: "IndexedParameterValues", binder: "Optional[ParameterBinder]" = None
    ) -> "IndexedParamQuery":
        return IndexedParamQuery(sql, values, binder)

    @staticmethod
    def named(
        sql: str, values: "NamedParameterValues", binder: "Optional[ParameterBinder]" = None
    ) -> "NamedParamQuery":
        return NamedParamQuery(sql, values, binder)


class NoParamQuery(ParamQuery):
    """Query where no parameters have been supplied.

    The statement is passed through untouched, placeholders included.
    """

    __slots__ = ()

    @property
    def source(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r})"


class IndexedParamQuery(ParamQuery):
    """Query whose values are bound in order to ``?`` placeholders."""

    __slots__ = ("_source",)

    def __init__(self, sql: str, values: "IndexedParameterValues", binder: "Optional[ParameterBinder]" = None) -> None:
        super().__init__(sql, binder)
        self._source = values if isinstance(values, IndexedParameters) else IndexedParameters(tuple(values))

    @property
    def source(self) -> IndexedParameters:
        return self._source

    @property
    def values(self) -> "tuple[Any, ...]":
        return self._source.values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r}, {list(self.values)!r})"


class NamedParamQuery(ParamQuery):
    """Query whose values are bound by name to ``:name`` and ``@name`` placeholders."""

    __slots__ = ("_source",)

    def __init__(self, sql: str, values: "NamedParameterValues", binder: "Optional[ParameterBinder]" = None) -> None:
        super().__init__(sql, binder)
        self._source = values if isinstance(values, NamedParameters) else NamedParameters(values)

    @property
    def source(self) -> NamedParameters:
        return self._source

    @property
    def values(self) -> "Mapping[str, Any]":
        return self._source.values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.sql!r}, {dict(self.values)!r})"


def create_query(
    sql: str,
    parameters: "StatementParameters" = None,
    named_parameters: "Optional[Mapping[str, Any]]" = None,
    /,
    *,
    binder: "Optional[ParameterBinder]" = None,
    **kwargs: Any,
) -> ParamQuery:
    """Pick the query variant that matches the parameters supplied.

    Keyword arguments are merged into the named values. ``sql``, ``parameters`` and
    ``named_parameters`` are positional-only, so they are free to use as parameter
    names. A value named ``binder`` has to go in the ``parameters`` mapping instead.

    Args:
        sql: Statement text
        parameters: Indexed values, named values, or a resolved parameter source
        named_parameters: Named values
        binder: Binder to use instead of the default one
        **kwargs: Further named values

    Raises:
        TypeError: If ``binder`` is not a :class:`ParameterBinder`
        MixedParameterStyleError: If both indexed and named values are populated

    Returns:
        A :class:`NoParamQuery`, :class:`IndexedParamQuery` or :class:`NamedParamQuery`
    """
    if binder is not None and not isinstance(binder, ParameterBinder):
        msg = (
            f"binder must be a ParameterBinder, got {type(binder).__name__}; "
            "pass a value named 'binder' in the parameters mapping"
        )
        raise TypeError(msg)
    if kwargs:
        if isinstance(named_parameters, NamedParameters):
            named_parameters = named_parameters.values
        named_parameters = {**(named_parameters or {}), **kwargs}
    source = resolve_parameter_source(parameters, named_parameters, sql)

    if source is None:
        return NoParamQuery(sql, binder)
    if isinstance(source, IndexedParameters):
        return IndexedParamQuery(sql, source, binder)
    return NamedParamQuery(sql, source, binder)
