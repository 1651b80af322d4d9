"""Parameter binding engine.

Turns a statement written with ``?``, ``:name`` and ``@name`` placeholders
into a :class:`~sqlbind.parameters.types.BoundQuery`: a statement that only
uses positional ``?`` placeholders, plus the values to bind to them in order.

Named values that are iterables expand into one placeholder per element, so
``WHERE id IN (:ids)`` works with a list. ``@name`` placeholders additionally
pad their expansion to a power-of-two length by repeating the last element:
lists of 5, 6, 7 or 8 ids all produce the same statement text, which lets the
driver reuse a cached plan.
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

from mypy_extensions import mypyc_attr

from sqlbind.exceptions import MismatchedParameterCountError, MixedParameterStyleError, UnspecifiedParameterError
from sqlbind.parameters.config import BindingConfig
from sqlbind.parameters.humanize import humanize_value
from sqlbind.parameters.tokenizer import tokenize
from sqlbind.parameters.types import PLACEHOLDER, BoundQuery, IndexedParameters, NamedParameters, Token, TokenType
from sqlbind.parameters.utils import intersperse, next_power_of_two_or_zero, pad_with_last
from sqlbind.utils.logging import STATEMENT_LOGGER_NAME, get_logger, log_with_context
from sqlbind.utils.type_guards import is_expandable_iterable

if TYPE_CHECKING:
    from sqlbind.typing import ParameterSourceLike, StatementParameters

__all__ = ("ParameterBinder", "bind", "humanize", "resolve_parameter_source")

logger = get_logger("parameters.binder")
statement_logger = get_logger(STATEMENT_LOGGER_NAME)


def resolve_parameter_source(
    parameters: "StatementParameters" = None,
    named_parameters: "Optional[Mapping[str, Any]]" = None,
    sql: "Optional[str]" = None,
) -> "ParameterSourceLike":
    """Work out which kind of parameter source a caller supplied.

    Mappings are named sources; any other value is an indexed source, with a
    single non-iterable value treated as a one element list. Named values from
    ``parameters`` and ``named_parameters`` are merged, the latter taking
    precedence.

    Args:
        parameters: Indexed values, named values, or an already resolved source
        named_parameters: Additional named values
        sql: Statement the values are for, used as error context

    Raises:
        MixedParameterStyleError: If both indexed and named values are populated

    Returns:
        ``None``, :class:`IndexedParameters` or :class:`NamedParameters`
    """
    indexed: Optional[tuple[Any, ...]] = None
    named: Optional[dict[str, Any]] = None

    if isinstance(parameters, IndexedParameters):
        indexed = parameters.values
    elif isinstance(parameters, NamedParameters):
        named = dict(parameters.values)
    elif isinstance(parameters, Mapping):
        named = dict(parameters)
    elif parameters is not None:
        indexed = tuple(parameters) if is_expandable_iterable(parameters) else (parameters,)

    if named_parameters is not None:
        extra = named_parameters.values if isinstance(named_parameters, NamedParameters) else named_parameters
        named = {**(named or {}), **extra}

    if indexed and named:
        raise MixedParameterStyleError(sql=sql)
    if named:
        return NamedParameters(named)
    if indexed is not None:
        return IndexedParameters(indexed)
    if named is not None:
        return NamedParameters(named)
    return None


@mypyc_attr(allow_interpreted_subclasses=False)
class ParameterBinder:
    """Binds parameter sources to statements and renders them for humans."""

    __slots__ = ("config",)

    def __init__(self, config: "Optional[BindingConfig]" = None) -> None:
        self.config = config or BindingConfig()

    def bind(
        self,
        sql: str,
        parameters: "StatementParameters" = None,
        named_parameters: "Optional[Mapping[str, Any]]" = None,
    ) -> BoundQuery:
        """Produce the normalized statement and ordered bind values.

        Args:
            sql: Statement text
            parameters: Indexed values, named values, or a resolved parameter source
            named_parameters: Additional named values

        Raises:
            MixedParameterStyleError: If both indexed and named values are supplied
            MismatchedParameterCountError: If the number of ``?`` placeholders differs from the indexed values
            UnspecifiedParameterError: If a named placeholder has no value

        Returns:
            The normalized statement and its values
        """
        source = resolve_parameter_source(parameters, named_parameters, sql)

        tokens: list[Token] = []
        humanized: Optional[str] = None
        padded = 0
        if source is None:
            bound = BoundQuery(sql, ())
            humanized = sql
        elif isinstance(source, IndexedParameters):
            tokens = self._check_indexed(sql, source)
            bound = BoundQuery(sql, source.values)
        else:
            tokens, padded = self._expand_named(sql, source)
            bound = BoundQuery(
                "".join(PLACEHOLDER if token.is_placeholder else token.text for token in tokens),
                tuple(token.value for token in tokens if token.type is TokenType.VALUE_PARAM),
            )
            unbound = sum(1 for token in tokens if token.type is TokenType.INDEXED_PARAM)
            if unbound:
                log_with_context(
                    logger,
                    logging.DEBUG,
                    "Positional placeholder left unbound in named statement",
                    unbound_placeholders=unbound,
                    statement=bound.sql,
                )

        log_with_context(
            logger,
            logging.DEBUG,
            "Bound statement",
            parameter_count=len(bound.parameters),
            statement_length=len(bound.sql),
            source=type(source).__name__,
            padded=padded,
        )
        if self.config.log_statements and statement_logger.isEnabledFor(logging.DEBUG):
            if humanized is None:
                humanized = (
                    self._humanize_indexed(tokens, source.values)
                    if isinstance(source, IndexedParameters)
                    else self._humanize_tokens(tokens)
                )
            log_with_context(statement_logger, logging.DEBUG, humanized, parameter_count=len(bound.parameters))
        return bound

    def humanize(
        self,
        sql: str,
        parameters: "StatementParameters" = None,
        named_parameters: "Optional[Mapping[str, Any]]" = None,
    ) -> str:
        """Render the statement with every placeholder replaced by its literal value.

        The result is for display only and must never be executed.

        Args:
            sql: Statement text
            parameters: Indexed values, named values, or a resolved parameter source
            named_parameters: Additional named values

        Raises:
            MixedParameterStyleError: If both indexed and named values are supplied
            MismatchedParameterCountError: If the number of ``?`` placeholders differs from the indexed values
            UnspecifiedParameterError: If a named placeholder has no value

        Returns:
            Statement text with values inlined
        """
        source = resolve_parameter_source(parameters, named_parameters, sql)

        if source is None:
            return sql
        if isinstance(source, IndexedParameters):
            return self._humanize_indexed(self._check_indexed(sql, source), source.values)
        return self._humanize_tokens(self._expand_named(sql, source)[0])

    def _check_indexed(self, sql: str, source: IndexedParameters) -> "list[Token]":
        tokens = tokenize(sql)
        expected = sum(1 for token in tokens if token.type is TokenType.INDEXED_PARAM)
        if expected != len(source):
            raise MismatchedParameterCountError(sql, expected, source.values)
        return tokens

    def _expand_named(self, sql: str, source: NamedParameters) -> "tuple[list[Token], int]":
        """Replace every named token with the value tokens it binds to.

        Returns:
            The expanded tokens and the number of values added by ``@name`` padding
        """
        resolved: dict[str, Any] = {}
        expanded: list[Token] = []
        padded = 0

        for token in tokenize(sql):
            if not token.is_named:
                expanded.append(token)
                continue

            name = token.name or ""
            if name not in resolved:
                if name not in source:
                    raise UnspecifiedParameterError(name, sql)
                resolved[name] = self._materialize(source[name])
            value = resolved[name]

            if self.config.expand_iterables and is_expandable_iterable(value):
                unpadded = list(value)
                items = self._pad(token, unpadded)
                padded += len(items) - len(unpadded)
                expanded.extend(intersperse((Token.value_param(item, name) for item in items), Token.punctuation(",")))
            else:
                expanded.append(Token.value_param(value, name))

        return expanded, padded

    def _materialize(self, value: Any) -> Any:
        # One-shot iterators must yield the same elements to every occurrence of a name,
        # and to the humanized statement as well as the bound values.
        if isinstance(value, Iterator):
            return tuple(value)
        if self.config.expand_iterables and is_expandable_iterable(value) and not isinstance(value, Sequence):
            return tuple(value)
        return value

    def _pad(self, token: Token, items: "list[Any]") -> "list[Any]":
        if token.type is TokenType.OPTIMISED_PARAM and self.config.pad_optimised_lists:
            return pad_with_last(items, next_power_of_two_or_zero(len(items)))
        return items

    @staticmethod
    def _humanize_tokens(tokens: "list[Token]") -> str:
        return "".join(
            humanize_value(token.value) if token.type is TokenType.VALUE_PARAM else token.text for token in tokens
        )

    @staticmethod
    def _humanize_indexed(tokens: "list[Token]", values: "tuple[Any, ...]") -> str:
        remaining = iter(values)
        return "".join(
            humanize_value(next(remaining)) if token.type is TokenType.INDEXED_PARAM else token.text for token in tokens
        )


_binder = ParameterBinder()


def bind(
    sql: str, parameters: "StatementParameters" = None, named_parameters: "Optional[Mapping[str, Any]]" = None
) -> BoundQuery:
    """Bind parameters to a statement using the default configuration.

    This is a convenience function using the module-level binder.

    Args:
        sql: Statement text
        parameters: Indexed values, named values, or a resolved parameter source
        named_parameters: Additional named values

    Returns:
        The normalized statement and its values
    """
    return _binder.bind(sql, parameters, named_parameters)


def humanize(
    sql: str, parameters: "StatementParameters" = None, named_parameters: "Optional[Mapping[str, Any]]" = None
) -> str:
    """Render a statement with its values inlined, using the default configuration.

    This is a convenience function using the module-level binder.

    Args:
        sql: Statement text
        parameters: Indexed values, named values, or a resolved parameter source
        named_parameters: Additional named values

    Returns:
        Statement text with values inlined
    """
    return _binder.humanize(sql, parameters, named_parameters)
