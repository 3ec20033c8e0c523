"""
Token kinds and lookup tables for the Monkey language.

Token kinds are plain strings. Operator and punctuation kinds use their own
source text as the kind name, so diagnostics read naturally
(``expected next token to be =, got INT instead``).

Exports:
    - Token kind constants (ILLEGAL, EOF, IDENT, INT, ASSIGN, ...)
    - token_hashmap: operator/punctuation text -> token kind
    - keywords: reserved word -> token kind
    - lookup_ident(): classify a scanned word
"""

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers + literals
IDENT = "IDENT"
INT = "INT"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"

LT = "<"
GT = ">"
EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"

LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

token_hashmap: dict[str, str] = {
    "=": ASSIGN,
    "+": PLUS,
    "-": MINUS,
    "!": BANG,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    "==": EQ,
    "!=": NOT_EQ,
    ",": COMMA,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}

keywords: dict[str, str] = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

TOKEN_TYPES: frozenset[str] = frozenset(
    {ILLEGAL, EOF, IDENT, INT, *token_hashmap.values(), *keywords.values()}
)


def lookup_ident(ident: str) -> str:
    """Return the keyword kind for ``ident``, or IDENT if it is not reserved."""
    return keywords.get(ident, IDENT)


__all__ = [
    "ASSIGN",
    "ASTERISK",
    "BANG",
    "COMMA",
    "ELSE",
    "EOF",
    "EQ",
    "FALSE",
    "FUNCTION",
    "GT",
    "IDENT",
    "IF",
    "ILLEGAL",
    "INT",
    "LBRACE",
    "LET",
    "LPAREN",
    "LT",
    "MINUS",
    "NOT_EQ",
    "PLUS",
    "RBRACE",
    "RETURN",
    "RPAREN",
    "SEMICOLON",
    "SLASH",
    "TOKEN_TYPES",
    "TRUE",
    "keywords",
    "lookup_ident",
    "token_hashmap",
]
