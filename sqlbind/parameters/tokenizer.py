"""Character-level tokenizer for parameterised SQL statements.

Splits a statement into words, whitespace, punctuation and placeholders
(``?``, ``:name`` and ``@name``) without interpreting any SQL grammar. Text
between single quotes is taken literally, so placeholder-like characters in
string literals never become parameters.
"""

from typing import Final

from sqlbind.parameters.types import PUNCTUATION_CHARACTERS, Token, TokenType

__all__ = ("count_indexed", "parameter_names", "render", "tokenize")

QUOTE_CHARACTER: Final = "'"
SPACE_CHARACTERS: Final = frozenset(" \t")
NEWLINE_CHARACTERS: Final = frozenset("\n\r")
INDEXED_MARKER: Final = "?"
NAMED_MARKER: Final = ":"
OPTIMISED_MARKER: Final = "@"


class _TokenizerState:
    """Scan state for a single ``tokenize`` call."""

    __slots__ = ("buffer", "pending_named", "pending_optimised", "quoting", "tokens")

    def __init__(self) -> None:
        self.buffer: list[str] = []
        self.quoting = False
        self.pending_named = False
        self.pending_optimised = False
        self.tokens: list[Token] = []

    def quote(self) -> None:
        self.end_word()
        self.tokens.append(Token.quote())
        self.quoting = not self.quoting

    def separator(self, token: Token) -> None:
        """Emit a structural token, or keep the character literally while quoting."""
        if self.quoting:
            self.buffer.append(token.text)
        else:
            self.end_word()
            self.tokens.append(token)

    def indexed_param(self) -> None:
        if self.quoting:
            self.buffer.append(INDEXED_MARKER)  # push back
        else:
            self.end_word()
            self.tokens.append(Token.indexed_param())

    def start_named_param(self) -> None:
        if self.quoting:
            self.buffer.append(NAMED_MARKER)  # push back
        else:
            self.end_word()
            self.pending_named = True

    def start_optimised_param(self) -> None:
        if self.quoting:
            self.buffer.append(OPTIMISED_MARKER)  # push back
        else:
            self.end_word()
            self.pending_optimised = True

    def continue_word(self, char: str) -> None:
        self.buffer.append(char)

    def end_word(self) -> None:
        if self.buffer:
            word = "".join(self.buffer)
            self.buffer.clear()
            if self.pending_named:
                self.tokens.append(Token.named_param(word))
            elif self.pending_optimised:
                self.tokens.append(Token.optimised_param(word))
            elif self.quoting:
                self.tokens.append(Token.quoted_word(word))
            else:
                self.tokens.append(Token.word(word))
        elif self.pending_named:
            # A marker with no name after it is plain text.
            self.tokens.append(Token.word(NAMED_MARKER))
        elif self.pending_optimised:
            self.tokens.append(Token.word(OPTIMISED_MARKER))
        self.pending_named = False
        self.pending_optimised = False


def tokenize(statement: str) -> "list[Token]":
    """Break a statement into an ordered list of tokens.

    Never fails: any character that is not recognised is kept as part of a word.
    Joining the ``text`` of the returned tokens gives back ``statement`` exactly.

    Args:
        statement: SQL statement containing any mix of ``?``, ``:name`` and ``@name`` placeholders

    Returns:
        Tokens in order of appearance
    """
    state = _TokenizerState()

    for char in statement:
        if char == QUOTE_CHARACTER:
            state.quote()
        elif char in PUNCTUATION_CHARACTERS:
            state.separator(Token.punctuation(char))
        elif char in SPACE_CHARACTERS:
            state.separator(Token.space(char))
        elif char in NEWLINE_CHARACTERS:
            state.separator(Token.newline(char))
        elif char == INDEXED_MARKER:
            state.indexed_param()
        elif char == NAMED_MARKER:
            state.start_named_param()
        elif char == OPTIMISED_MARKER:
            state.start_optimised_param()
        else:
            state.continue_word(char)
    state.end_word()

    return state.tokens


def render(tokens: "list[Token]") -> str:
    """Join the source text of tokens back into a statement."""
    return "".join(token.text for token in tokens)


def parameter_names(statement: str) -> "list[str]":
    """Return the named parameters of a statement in order of appearance.

    Duplicates are kept, so the result lines up with the placeholders of the
    normalized statement when every value is a scalar.

    Args:
        statement: SQL statement to analyze

    Returns:
        Parameter names, without their ``:`` or ``@`` markers
    """
    return [token.name for token in tokenize(statement) if token.is_named and token.name is not None]


def count_indexed(statement: str) -> int:
    """Count the ``?`` placeholders of a statement, ignoring any inside quoted literals."""
    return sum(1 for token in tokenize(statement) if token.type is TokenType.INDEXED_PARAM)
