"""
Monkey Language Parser

Parses Monkey source tokens into an abstract syntax tree (AST).

This module implements a Pratt (top-down operator precedence) parser. Tokens
are pulled from a `Lexer` one at a time; the parser only ever looks at the
current token and the one after it. Every token kind may supply a prefix
handler (how an expression starts) and/or an infix handler (how an expression
continues), and a binding power from `precedences` decides how operators nest.

Supported Constructs
--------------------
- Statements:
    * `let <identifier> = <expression>;` (the value is skipped for now)
    * `return <expression>;` (the value is skipped for now)
    * Expression statements, with an optional trailing `;`

- Expressions:
    * Identifiers and integer literals
    * Prefix operators: `!x`, `-x`
    * Infix operators: `+ - * / < > == !=`

Parser Behavior
---------------
- Never raises on malformed input. Problems are appended to `Parser.errors`
  and the offending statement or subexpression is dropped; parsing resumes at
  the next token.
- `parse_source(..., strict=True)` turns a non-empty error list into a
  `ParserError` for callers that want to reject the program outright.

Entry Points
------------
- `Parser.parse_program()`: Parse a full program.
- `parse_source()`: Lex and parse one string, returning the program and errors.

Diagnostics
-----------
- ``expected next token to be <kind>, got <kind> instead``
- ``no prefix parse function for <kind> found``
- ``could not parse "<literal>" as integer``
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

import monkey.monkey_constants as tk
from monkey.monkey_ast import (
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_lexer import CharacterStream, Lexer, Token

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """Binding power of operators, weakest first."""

    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # myFunction(X)


precedences: dict[str, Precedence] = {
    tk.EQ: Precedence.EQUALS,
    tk.NOT_EQ: Precedence.EQUALS,
    tk.LT: Precedence.LESSGREATER,
    tk.GT: Precedence.LESSGREATER,
    tk.PLUS: Precedence.SUM,
    tk.MINUS: Precedence.SUM,
    tk.SLASH: Precedence.PRODUCT,
    tk.ASTERISK: Precedence.PRODUCT,
}

PrefixParseFn = Callable[[], "Expression | None"]
InfixParseFn = Callable[["Expression | None"], "Expression | None"]


class ParserError(SyntaxError):
    """Raised by strict entry points when parsing produced diagnostics.

    Attributes:
        errors (list[str]): Every diagnostic recorded during the parse, in order.
    """

    def __init__(self, errors: list[str]):
        if len(errors) == 1:
            summary = errors[0]
        else:
            summary = f"{len(errors)} parse errors"
        super().__init__(summary)
        self.errors = list(errors)


class Parser:
    """
    Monkey Parser Class

    Wraps exactly one `Lexer` and turns its tokens into a `Program`. A parser
    is good for a single `parse_program()` call: afterwards its cursor sits on
    EOF.

    Attributes
    ----------
    lexer : Lexer
        Token source, read lazily.
    cur_token : Token
        The token under examination.
    peek_token : Token
        The token after `cur_token`.
    errors : list[str]
        Diagnostics recorded so far, in the order they were found.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.errors: list[str] = []
        self.cur_token: Token = Token(tk.EOF, "")
        self.peek_token: Token = Token(tk.EOF, "")

        # Read two tokens so cur_token and peek_token are both set
        self.next_token()
        self.next_token()

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, type_: str) -> bool:
        return self.cur_token.type == type_

    def peek_token_is(self, type_: str) -> bool:
        return self.peek_token.type == type_

    def expect_peek(self, type_: str) -> bool:
        """Advances onto the peek token if it has the expected kind.

        Records a diagnostic and leaves the cursor in place otherwise.
        """
        if self.peek_token_is(type_):
            self.next_token()
            return True
        self.peek_error(type_)
        return False

    def peek_error(self, type_: str) -> None:
        self.errors.append(
            f"expected next token to be {type_}, got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, type_: str) -> None:
        self.errors.append(f"no prefix parse function for {type_} found")

    def peek_precedence(self) -> Precedence:
        return precedences.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return precedences.get(self.cur_token.type, Precedence.LOWEST)

    def prefix_parse_fn(self, type_: str) -> PrefixParseFn | None:
        match type_:
            case tk.IDENT:
                return self.parse_identifier
            case tk.INT:
                return self.parse_integer_literal
            case tk.BANG | tk.MINUS:
                return self.parse_prefix_expression
            case _:
                return None

    def infix_parse_fn(self, type_: str) -> InfixParseFn | None:
        match type_:
            case (
                tk.PLUS
                | tk.MINUS
                | tk.SLASH
                | tk.ASTERISK
                | tk.EQ
                | tk.NOT_EQ
                | tk.LT
                | tk.GT
            ):
                return self.parse_infix_expression
            case _:
                return None

    def parse_program(self) -> Program:
        """Parse statements until EOF and return the resulting Program.

        Statements that fail to parse are left out; their diagnostics are in
        `errors`.
        """
        program = Program()
        while not self.cur_token_is(tk.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program

    def parse_statement(self) -> Statement | None:
        if self.cur_token.type == tk.LET:
            return self.parse_let_statement()
        if self.cur_token.type == tk.RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def skip_to_terminator(self) -> None:
        # TODO: parse the value with parse_expression(Precedence.LOWEST) once
        # let/return need to capture it.
        while not self.cur_token_is(tk.SEMICOLON) and not self.cur_token_is(tk.EOF):
            self.next_token()

    def parse_let_statement(self) -> LetStatement | None:
        """Parse `let <identifier> = ...;`."""
        let_tok = self.cur_token

        if not self.expect_peek(tk.IDENT):
            return None

        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(tk.ASSIGN):
            return None

        self.skip_to_terminator()
        return LetStatement(let_tok, name)

    def parse_return_statement(self) -> ReturnStatement:
        """Parse `return ...;`."""
        stmt = ReturnStatement(self.cur_token)
        self.next_token()
        self.skip_to_terminator()
        return stmt

    def parse_expression_statement(self) -> ExpressionStatement:
        stmt = ExpressionStatement(self.cur_token)
        stmt.expression = self.parse_expression(Precedence.LOWEST)

        # semicolons are optional in expression statements
        if self.peek_token_is(tk.SEMICOLON):
            self.next_token()

        return stmt

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        """Parse an expression whose operators all bind tighter than `precedence`.

        The prefix handler for the current token builds the left operand. Each
        loop iteration then folds the left operand into an infix node for the
        next operator, as long as that operator binds more strongly than the
        caller's threshold. A weaker operator ends the loop so an enclosing
        call can take it, which yields left associativity for equal strengths.
        """
        prefix = self.prefix_parse_fn(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None
        left = prefix()

        while (
            not self.peek_token_is(tk.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fn(self.peek_token.type)
            if infix is None:
                return left

            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> Expression:
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        literal = self.cur_token.literal
        try:
            value = int(literal, 10)
        except ValueError:
            value = None
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self.errors.append(f'could not parse "{literal}" as integer')
            return None
        return IntegerLiteral(self.cur_token, value)

    def parse_prefix_expression(self) -> Expression:
        expression = PrefixExpression(self.cur_token, self.cur_token.literal)
        self.next_token()
        expression.right = self.parse_expression(Precedence.PREFIX)
        return expression

    def parse_infix_expression(self, left: Expression | None) -> Expression:
        expression = InfixExpression(self.cur_token, left, self.cur_token.literal)
        precedence = self.cur_precedence()
        self.next_token()
        expression.right = self.parse_expression(precedence)
        return expression


def parse_source(source: str, strict: bool = False) -> tuple[Program, list[str]]:
    """Lex and parse a complete source string.

    Args:
        source (str): Monkey source text.
        strict (bool): Raise `ParserError` instead of returning diagnostics.

    Returns:
        tuple[Program, list[str]]: The program and the diagnostics recorded.

    Raises:
        ParserError: If `strict` is set and any diagnostic was recorded.
    """
    parser = Parser(Lexer(CharacterStream(source)))
    program = parser.parse_program()
    if strict and parser.errors:
        raise ParserError(parser.errors)
    return program, parser.errors


__all__ = ["Parser", "ParserError", "Precedence", "parse_source", "precedences"]
