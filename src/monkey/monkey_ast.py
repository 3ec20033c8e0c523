"""
Defines the abstract syntax tree (AST) node structure for the Monkey programming language.

Classes:
    Node: Base class for every tree node. Provides source rendering, dictionary
        serialization and structural equality.
    Statement / Expression: Marker bases for the two node families.
    Program: The parse result root, an ordered list of statements.
    LetStatement, ReturnStatement, ExpressionStatement: Statement nodes.
    Identifier, IntegerLiteral, PrefixExpression, InfixExpression: Expression nodes.
    ASTDict: TypedDict describing the output of `Node.to_dict()`.

Each node keeps the token it was built from, so the line and column of any
construct can be recovered for diagnostics. The tree is strictly owned: no node
is shared between parents.

`str(node)` reconstructs source text with every prefix and infix expression
fully parenthesized, which makes operator precedence visible:

    >>> str(program)
    '((-a) * b)'
"""

from typing import Any, TypedDict

from monkey.monkey_lexer import Token


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a node, as produced by `Node.to_dict()`.

    Fields:
        kind (str): Node class name (e.g. "LetStatement", "InfixExpression").
        line (int): Line of the originating token.
        col (int): Column of the originating token.
        Remaining keys depend on the node kind.
    """

    kind: str
    line: int
    col: int
    statements: list["ASTDict"]
    name: "ASTDict"
    value: Any
    return_value: "ASTDict | None"
    expression: "ASTDict | None"
    operator: str
    left: "ASTDict | None"
    right: "ASTDict | None"


def _dump(node: "Node | None") -> ASTDict | None:
    return node.to_dict() if node is not None else None


class Node:
    """Base class for all AST nodes.

    Attributes:
        token (Token): The token the node was built from.
    """

    def __init__(self, token: Token) -> None:
        self.token = token

    def token_literal(self) -> str:
        return self.token.literal

    def fields(self) -> dict[str, Any]:
        """Node-specific entries for `to_dict()`."""
        return {}

    def to_dict(self) -> ASTDict:
        data: dict[str, Any] = {
            "kind": type(self).__name__,
            "line": self.token.line,
            "col": self.token.col,
        }
        data.update(self.fields())
        return data  # type: ignore[return-value]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return False
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    def __str__(self) -> str:  # pragma: no cover
        return self.token_literal()


class Statement(Node):
    pass


class Expression(Node):
    pass


class Program(Node):
    """Root node: the top-level statements of one parsed source text.

    Args:
        statements (list[Statement], optional): Statements in source order.
    """

    def __init__(self, statements: list[Statement] | None = None) -> None:
        self.statements: list[Statement] = statements or []

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def to_dict(self) -> ASTDict:
        return {
            "kind": "Program",
            "statements": [s.to_dict() for s in self.statements],
        }

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)

    def __len__(self) -> int:
        return len(self.statements)


class Identifier(Expression):
    def __init__(self, token: Token, value: str) -> None:
        super().__init__(token)
        self.value = value

    def fields(self) -> dict[str, Any]:
        return {"value": self.value}

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(Expression):
    """An integer constant. `value` always fits a signed 64-bit integer."""

    def __init__(self, token: Token, value: int) -> None:
        super().__init__(token)
        self.value = value

    def fields(self) -> dict[str, Any]:
        return {"value": self.value}

    def __str__(self) -> str:
        return self.token.literal


class PrefixExpression(Expression):
    """A unary operator applied to one operand, e.g. `-x` or `!ok`."""

    def __init__(self, token: Token, operator: str, right: Expression | None = None) -> None:
        super().__init__(token)
        self.operator = operator
        self.right = right

    def fields(self) -> dict[str, Any]:
        return {"operator": self.operator, "right": _dump(self.right)}

    def __str__(self) -> str:
        return f"({self.operator}{self.right if self.right is not None else ''})"


class InfixExpression(Expression):
    """A binary operator with a left and a right operand, e.g. `a + b`."""

    def __init__(
        self,
        token: Token,
        left: Expression | None,
        operator: str,
        right: Expression | None = None,
    ) -> None:
        super().__init__(token)
        self.left = left
        self.operator = operator
        self.right = right

    def fields(self) -> dict[str, Any]:
        return {
            "left": _dump(self.left),
            "operator": self.operator,
            "right": _dump(self.right),
        }

    def __str__(self) -> str:
        left = str(self.left) if self.left is not None else ""
        right = str(self.right) if self.right is not None else ""
        return f"({left} {self.operator} {right})"


class LetStatement(Statement):
    """`let <name> = <value>;`

    The value expression is not captured yet; the parser skips it and leaves
    `value` as None.
    """

    def __init__(
        self, token: Token, name: Identifier, value: Expression | None = None
    ) -> None:
        super().__init__(token)
        self.name = name
        self.value = value

    def fields(self) -> dict[str, Any]:
        return {"name": self.name.to_dict(), "value": _dump(self.value)}

    def __str__(self) -> str:
        value = str(self.value) if self.value is not None else ""
        return f"{self.token_literal()} {self.name} = {value};"


class ReturnStatement(Statement):
    def __init__(self, token: Token, return_value: Expression | None = None) -> None:
        super().__init__(token)
        self.return_value = return_value

    def fields(self) -> dict[str, Any]:
        return {"return_value": _dump(self.return_value)}

    def __str__(self) -> str:
        if self.return_value is None:
            return f"{self.token_literal()} ;"
        return f"{self.token_literal()} {self.return_value};"


class ExpressionStatement(Statement):
    """A statement consisting of a single expression; the `;` is optional."""

    def __init__(self, token: Token, expression: Expression | None = None) -> None:
        super().__init__(token)
        self.expression = expression

    def fields(self) -> dict[str, Any]:
        return {"expression": _dump(self.expression)}

    def __str__(self) -> str:
        return str(self.expression) if self.expression is not None else ""


__all__ = [
    "ASTDict",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "InfixExpression",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "Program",
    "ReturnStatement",
    "Statement",
]
