"""
Lexical analyzer for the Monkey programming language.

This module provides core components for converting raw source code into token streams:

Classes:
    CharacterStream: Single-character cursor over the source with line/column tracking.
    Token: Immutable token with type, literal text, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Features:
    - Skips spaces, tabs, newlines and carriage returns
    - One character of lookahead for two-character operators (`==`, `!=`)
    - Recognizes:
        * Identifiers and keywords (`let`, `fn`, `return`, ...)
        * Integer literals
        * Operators and punctuation
    - Unrecognized characters become ILLEGAL tokens; scanning never raises

Only single-byte characters are supported. Anything above code point 255 is
reported as an ILLEGAL token.

Example:
    >>> lexer = Lexer(CharacterStream("let x = 5;"))
    >>> lexer.next_token()
    Token(LET, let)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from collections.abc import Iterator
from typing import Any

from monkey.monkey_constants import EOF, ILLEGAL, INT, lookup_ident, token_hashmap

NUL = "\0"


class CharacterStream:
    """
    A cursor over a source string that exposes the current character and one
    character of lookahead.

    Attributes:
        source (str): The input source string.
        position (int): Index of the current character.
        read_position (int): Index of the next character (always ``position + 1``).
        ch (str): The current character, or NUL once the input is exhausted.
        line (int): Line number of the current character (1-indexed).
        column (int): Column number of the current character (1-indexed).
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self) -> None:
        """Advances the cursor by one character."""
        if self.ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        if self.read_position >= len(self.source):
            self.ch = NUL
        else:
            self.ch = self.source[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        """Returns the character after the current one without advancing.

        Returns:
            str: The next character, or NUL if there is none.
        """
        if self.read_position >= len(self.source):
            return NUL
        return self.source[self.read_position]

    def end_of_file(self) -> bool:
        """Checks if the cursor has moved past the last character."""
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in the Monkey language.

    Tokens are immutable once created.

    Attributes:
        type (str): The token kind (e.g. 'IDENT', 'INT', '==', 'EOF').
        literal (str): The exact source text of the token.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    __slots__ = ("type", "literal", "line", "col")

    def __init__(self, type_: str, literal: str, line: int = 0, col: int = 0) -> None:
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "col", col)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Token is immutable, cannot delete {name!r}")

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.literal == other.literal
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.literal, self.line, self.col))

    def display(self) -> str:
        """Renders the token the way the interactive shell prints it.

        Returns:
            str: e.g. ``{Type:LET Literal:let}``.
        """
        return f"{{Type:{self.type} Literal:{self.literal}}}"


def is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Lexical analyzer for the Monkey language.

    The Lexer pulls characters from a CharacterStream and produces Token objects
    on demand. Once the input is exhausted every further call to `next_token`
    returns an EOF token.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.stream.ch in " \t\n\r":
            self.stream.read_char()

    def read_identifier(self) -> str:
        start = self.stream.position
        while not self.stream.end_of_file() and is_letter(self.stream.ch):
            self.stream.read_char()
        return self.stream.source[start : self.stream.position]

    def read_number(self) -> str:
        start = self.stream.position
        while not self.stream.end_of_file() and is_digit(self.stream.ch):
            self.stream.read_char()
        return self.stream.source[start : self.stream.position]

    def match_operator(self, line: int, col: int) -> Token | None:
        """Matches an operator or delimiter at the current position.

        Two-character operators win over their one-character prefix. Only the
        character directly after the current one is inspected, and it is
        consumed only when it belongs to the operator.

        Returns:
            Token | None: The operator token, or None if nothing matched.
        """
        ch = self.stream.ch
        pair = ch + self.stream.peek_char()
        if pair in token_hashmap:
            self.stream.read_char()
            self.stream.read_char()
            return Token(token_hashmap[pair], pair, line, col)
        if ch in token_hashmap:
            self.stream.read_char()
            return Token(token_hashmap[ch], ch, line, col)
        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token. EOF (with an empty literal) at end of input.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(EOF, "", line, col)

        token = self.match_operator(line, col)
        if token:
            return token

        ch = self.stream.ch

        # Identifier or keyword; read_identifier has already advanced the cursor
        if is_letter(ch):
            ident = self.read_identifier()
            return Token(lookup_ident(ident), ident, line, col)

        # Integer literal
        if is_digit(ch):
            return Token(INT, self.read_number(), line, col)

        self.stream.read_char()
        return Token(ILLEGAL, ch, line, col)

    def tokens(self) -> Iterator[Token]:
        """Yields tokens up to and including the first EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == EOF:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()


def tokenize(source: str) -> list[Token]:
    """Scans ``source`` into a list of tokens, EOF included."""
    return list(Lexer(CharacterStream(source)))


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
