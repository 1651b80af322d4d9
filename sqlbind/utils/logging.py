# ruff: noqa: PLR6301
"""Logging for sqlbind.

Two loggers matter to users of the library:

- ``sqlbind.parameters.binder`` receives one DEBUG record per bound statement.
  The record carries structured fields (parameter count, statement length,
  source kind, padding) but never the bound values.
- ``sqlbind.statements`` receives the humanized statement, values inlined,
  when :class:`~sqlbind.parameters.config.BindingConfig` enables
  ``log_statements``.

Records are tagged with the correlation ID of the current context, so a bound
statement can be traced back to the request that produced it.
:class:`StructuredFormatter` renders records, and their structured fields, as
JSON lines.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, Final

import msgspec

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "STATEMENT_LOGGER_NAME",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME: Final = "sqlbind"
STATEMENT_LOGGER_NAME: Final = f"{ROOT_LOGGER_NAME}.statements"
SIMPLE_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)

_json_encoder = msgspec.json.Encoder(enc_hook=str)


def set_correlation_id(correlation_id: str | None) -> None:
    """Tag records logged from the current context with ``correlation_id``, or stop tagging with None."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


class StructuredFormatter(logging.Formatter):
    """Render records as one JSON object per line.

    Structured fields passed through :func:`log_with_context` are added at the
    top level, but never replace the standard keys (``message``, ``level``, ...).
    Values msgspec cannot encode natively are written with ``str``.
    """

    def format(self, record: LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            log_entry["correlation_id"] = correlation_id

        for key, value in getattr(record, "extra_fields", {}).items():
            log_entry.setdefault(key, value)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return _json_encoder.encode(log_entry).decode("utf-8")


class CorrelationIDFilter(logging.Filter):
    """Copy the context's correlation ID onto each record passing through a sqlbind logger."""

    def filter(self, record: LogRecord) -> bool:
        if correlation_id := get_correlation_id():
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqlbind`` namespace.

    Args:
        name: Dotted logger name, with or without the ``sqlbind.`` prefix.
            If not provided, returns the root sqlbind logger.

    Returns:
        Logger carrying a :class:`CorrelationIDFilter`
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIDFilter) for f in logger.filters):
        logger.addFilter(CorrelationIDFilter())

    return logger


def configure_logging(
    level: str = "INFO",
    format_style: str = "structured",
    log_statements: bool = False,
    log_to_file: str | None = None,
    extra_handlers: list[logging.Handler] | None = None,
) -> None:
    """Send sqlbind's records to stdout, replacing any handlers installed earlier.

    Humanized statements contain bound values, so the ``sqlbind.statements``
    logger stays at WARNING unless ``log_statements`` is set, whatever ``level`` is.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: "structured" for JSON lines, "simple" for plain text
        log_statements: Let humanized statements through at DEBUG
        log_to_file: Optional file path to also log to, always as JSON lines
        extra_handlers: Additional handlers to add
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    formatter = StructuredFormatter() if format_style == "structured" else logging.Formatter(SIMPLE_FORMAT)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_to_file)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    for handler in extra_handlers or ():
        root_logger.addHandler(handler)

    root_logger.propagate = False
    logging.getLogger(STATEMENT_LOGGER_NAME).setLevel(logging.DEBUG if log_statements else logging.WARNING)

    log_with_context(
        root_logger,
        logging.INFO,
        "sqlbind logging configured",
        level=level,
        format_style=format_style,
        log_statements=log_statements,
        handlers_count=len(root_logger.handlers),
    )


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with structured fields attached as ``record.extra_fields``.

    ``message`` is logged as is, without %-formatting, so statement text
    containing ``%`` is safe to pass.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Fields :class:`StructuredFormatter` adds to the JSON entry
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, "%s", message, extra={"extra_fields": extra_fields}, stacklevel=2)
