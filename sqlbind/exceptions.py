from collections.abc import Sequence
from typing import Any, Optional

__all__ = (
    "ImproperConfigurationError",
    "MismatchedParameterCountError",
    "MixedParameterStyleError",
    "ParameterError",
    "SQLBindError",
    "UnspecifiedParameterError",
)


class SQLBindError(Exception):
    """Base exception class from which all sqlbind exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLBindError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLBindError):
    """Improper Configuration error.

    Raised when a binding configuration is given option values it cannot use.
    """


# -- SQL Parameter Errors --
class ParameterError(SQLBindError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MismatchedParameterCountError(ParameterError):
    """Raised when the number of ``?`` placeholders differs from the values supplied."""

    expected: int
    actual: int
    parameters: "tuple[Any, ...]"

    def __init__(self, sql: str, expected: int, parameters: "Sequence[Any]") -> None:
        self.expected = expected
        self.actual = len(parameters)
        self.parameters = tuple(parameters)
        message = (
            f"Parameters supplied do not correspond to SQL statement: "
            f"expected {expected} positional parameters but {self.actual} were provided {list(self.parameters)!r}"
        )
        super().__init__(message, sql)


class UnspecifiedParameterError(ParameterError):
    """Raised when a named placeholder has no value in the supplied mapping."""

    name: str

    def __init__(self, name: str, sql: Optional[str] = None) -> None:
        self.name = name
        super().__init__(f"Unspecified parameter: {name}", sql)


class MixedParameterStyleError(ParameterError):
    """Raised when indexed and named values are supplied for the same statement."""

    def __init__(self, message: Optional[str] = None, sql: Optional[str] = None) -> None:
        if message is None:
            message = "Unsupported parameter configuration: both indexed and named parameters were supplied."
        super().__init__(message, sql)
