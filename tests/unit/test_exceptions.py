"""Unit tests for sqlbind.exceptions."""

from sqlbind.exceptions import (
    ImproperConfigurationError,
    MismatchedParameterCountError,
    MixedParameterStyleError,
    ParameterError,
    SQLBindError,
    UnspecifiedParameterError,
)


def test_exception_hierarchy() -> None:
    """Test parameter errors share a common base."""
    assert issubclass(MismatchedParameterCountError, ParameterError)
    assert issubclass(UnspecifiedParameterError, ParameterError)
    assert issubclass(MixedParameterStyleError, ParameterError)
    assert issubclass(ParameterError, SQLBindError)
    assert issubclass(ImproperConfigurationError, SQLBindError)


def test_exception_instantiation() -> None:
    exc = SQLBindError("Something failed")
    assert str(exc) == "Something failed"
    assert exc.detail == "Something failed"
    assert repr(exc) == "SQLBindError - Something failed"


def test_parameter_error_includes_sql() -> None:
    exc = ParameterError("Bad parameters", "SELECT ?")
    assert str(exc) == "Bad parameters\nSQL: SELECT ?"
    assert exc.sql == "SELECT ?"


def test_mismatched_parameter_count_error() -> None:
    exc = MismatchedParameterCountError("SELECT ? + ?", 2, [1])
    assert exc.expected == 2
    assert exc.actual == 1
    assert exc.parameters == (1,)
    assert str(exc).startswith("Parameters supplied do not correspond to SQL statement")
    assert "[1]" in str(exc)
    assert str(exc).endswith("SQL: SELECT ? + ?")


def test_unspecified_parameter_error() -> None:
    exc = UnspecifiedParameterError("age")
    assert exc.name == "age"
    assert str(exc) == "Unspecified parameter: age"


def test_mixed_parameter_style_error_default_message() -> None:
    assert "both indexed and named" in str(MixedParameterStyleError())


def test_exception_chaining() -> None:
    try:
        try:
            raise KeyError("age")
        except KeyError as e:
            raise UnspecifiedParameterError("age") from e
    except UnspecifiedParameterError as exc:
        assert isinstance(exc.__cause__, KeyError)
