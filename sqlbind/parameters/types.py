"""Core parameter types used throughout sqlbind.

A statement is broken into :class:`Token` values, each tagged with a
:class:`TokenType`. Binding consumes those tokens together with a parameter
source (:class:`IndexedParameters` or :class:`NamedParameters`) and produces a
:class:`BoundQuery`.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final, NamedTuple, Optional

__all__ = (
    "NAMED_PARAMETER_TYPES",
    "PLACEHOLDER",
    "PUNCTUATION_CHARACTERS",
    "BoundQuery",
    "IndexedParameters",
    "NamedParameters",
    "Token",
    "TokenType",
)

PLACEHOLDER: Final = "?"
PUNCTUATION_CHARACTERS: Final = frozenset("()[]{},.;=<>+-*/%!")


class TokenType(str, Enum):
    """Token classification with string values."""

    WORD = "word"
    QUOTED_WORD = "quoted_word"
    QUOTE = "quote"
    SPACE = "space"
    NEWLINE = "newline"
    PUNCTUATION = "punctuation"
    INDEXED_PARAM = "indexed_param"
    NAMED_PARAM = "named_param"
    OPTIMISED_PARAM = "optimised_param"
    VALUE_PARAM = "value_param"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


NAMED_PARAMETER_TYPES: Final = frozenset({TokenType.NAMED_PARAM, TokenType.OPTIMISED_PARAM})


@dataclass(frozen=True, slots=True)
class Token:
    """Immutable classified span of a statement.

    ``text`` is always the exact source text of the span, so joining the text of
    every token reproduces the statement. Named tokens also carry the bare
    ``name``; value tokens carry the bound ``value`` and render as ``?``.
    """

    type: TokenType
    text: str
    name: Optional[str] = None
    value: Any = field(default=None, hash=False)

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(TokenType.WORD, text)

    @classmethod
    def quoted_word(cls, text: str) -> "Token":
        return cls(TokenType.QUOTED_WORD, text)

    @classmethod
    def quote(cls) -> "Token":
        return cls(TokenType.QUOTE, "'")

    @classmethod
    def space(cls, text: str = " ") -> "Token":
        return cls(TokenType.SPACE, text)

    @classmethod
    def newline(cls, text: str = "\n") -> "Token":
        return cls(TokenType.NEWLINE, text)

    @classmethod
    def punctuation(cls, char: str) -> "Token":
        return cls(TokenType.PUNCTUATION, char)

    @classmethod
    def indexed_param(cls) -> "Token":
        return cls(TokenType.INDEXED_PARAM, PLACEHOLDER)

    @classmethod
    def named_param(cls, name: str) -> "Token":
        return cls(TokenType.NAMED_PARAM, f":{name}", name)

    @classmethod
    def optimised_param(cls, name: str) -> "Token":
        return cls(TokenType.OPTIMISED_PARAM, f"@{name}", name)

    @classmethod
    def value_param(cls, value: Any, name: Optional[str] = None) -> "Token":
        return cls(TokenType.VALUE_PARAM, PLACEHOLDER, name, value)

    @property
    def is_named(self) -> bool:
        """Whether the token is a ``:name`` or ``@name`` placeholder."""
        return self.type in NAMED_PARAMETER_TYPES

    @property
    def is_placeholder(self) -> bool:
        """Whether the token renders as a positional ``?`` in a normalized statement."""
        return self.type in {TokenType.INDEXED_PARAM, TokenType.VALUE_PARAM}

    def __repr__(self) -> str:
        if self.type is TokenType.VALUE_PARAM:
            return f"{type(self).__name__}({self.type}, {self.value!r})"
        return f"{type(self).__name__}({self.type}, {self.text!r})"


@dataclass(frozen=True, slots=True)
class IndexedParameters:
    """Values bound in order to the ``?`` placeholders of a statement."""

    values: "tuple[Any, ...]" = ()

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> "Iterator[Any]":
        return iter(self.values)


@dataclass(frozen=True, slots=True)
class NamedParameters:
    """Values bound by name to the ``:name`` and ``@name`` placeholders of a statement."""

    values: "Mapping[str, Any]" = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, name: object) -> bool:
        return name in self.values

    def __getitem__(self, name: str) -> Any:
        return self.values[name]


class BoundQuery(NamedTuple):
    """A normalized statement and the values to bind to its placeholders, in order.

    Unpacks directly into a DB-API call: ``cursor.execute(*bound)``.
    """

    sql: str
    parameters: "tuple[Any, ...]"
