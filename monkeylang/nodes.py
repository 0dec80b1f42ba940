"""Abstract syntax tree for Monkey.

The parser produces a strict tree of the frozen node classes defined here and
the interpreter walks it. Nodes carry no behaviour beyond describing
themselves:

- ``token_literal()`` returns the text of the token that starts the node and
  is used in diagnostics.
- ``to_text()`` renders the subtree back to source-like text. Operators are
  fully parenthesized, so the rendering spells out exactly how the parser
  grouped an expression, and re-parsing a rendering yields the same
  rendering again.

Children that could not be parsed are ``None``; such partial nodes still
render, with the missing part left empty.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Optional

from monkeylang.token import Token


class Node:
    """
    Base class for every AST node.
    """

    token: Token

    def token_literal(self) -> str:
        """
        Return the literal text of the node's leading token.
        """
        return self.token.literal

    def to_text(self) -> str:
        """
        Render the node as canonical source text.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_text()


class Statement(Node):
    """
    Marker base class for statements.
    """


class Expression(Node):
    """
    Marker base class for expressions.
    """


def _text(node: Optional[Node]) -> str:
    return node.to_text() if node is not None else ""


def render_statements(statements) -> str:
    """
    Join a statement sequence so that it re-parses to the same sequence.

    Expression statements carry no terminator of their own, so one that is
    followed by another statement gets a ``;``.
    """
    parts = []
    last = len(statements) - 1
    for i, stmt in enumerate(statements):
        text = stmt.to_text()
        if isinstance(stmt, ExpressionStatement) and i < last:
            text += ";"
        parts.append(text)
    return " ".join(parts)


@dataclass(frozen=True)
class Program(Node):
    """
    Root of every parse: the ordered top-level statements.
    """

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def to_text(self) -> str:
        return render_statements(self.statements)


# ---- Expressions ----

@dataclass(frozen=True)
class Identifier(Expression):
    token: Token
    value: str

    def to_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    token: Token
    value: int

    def to_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Expression):
    token: Token
    value: bool

    def to_text(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class PrefixExpression(Expression):
    """
    A unary operator applied to one operand, e.g. ``-x`` or ``!ok``.
    """

    token: Token
    operator: str
    right: Optional[Expression]

    def to_text(self) -> str:
        return f"({self.operator}{_text(self.right)})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    """
    A binary operator applied to two operands, e.g. ``a + b``.
    """

    token: Token
    left: Expression
    operator: str
    right: Optional[Expression]

    def to_text(self) -> str:
        return f"({_text(self.left)} {self.operator} {_text(self.right)})"


@dataclass(frozen=True)
class BlockStatement(Statement):
    """
    A brace-delimited statement sequence.
    """

    token: Token
    statements: tuple[Statement, ...] = ()

    def to_text(self) -> str:
        if not self.statements:
            return "{ }"
        return "{ " + render_statements(self.statements) + " }"


@dataclass(frozen=True)
class IfExpression(Expression):
    token: Token
    condition: Optional[Expression]
    consequence: Optional[BlockStatement]
    alternative: Optional[BlockStatement] = None

    def to_text(self) -> str:
        text = f"if ({_text(self.condition)}) {_text(self.consequence)}"
        if self.alternative is not None:
            text += f" else {self.alternative.to_text()}"
        return text


@dataclass(frozen=True)
class FunctionLiteral(Expression):
    token: Token
    parameters: tuple[Identifier, ...]
    body: Optional[BlockStatement]

    def to_text(self) -> str:
        params = ", ".join(p.to_text() for p in self.parameters)
        return f"fn({params}) {_text(self.body)}"


@dataclass(frozen=True)
class CallExpression(Expression):
    """
    A call of ``function`` (an identifier, literal or any other expression)
    with positional arguments.
    """

    token: Token
    function: Expression
    arguments: tuple[Expression, ...]

    def to_text(self) -> str:
        args = ", ".join(_text(a) for a in self.arguments)
        return f"{_text(self.function)}({args})"


# ---- Statements ----

@dataclass(frozen=True)
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Optional[Expression]

    def to_text(self) -> str:
        return f"let {self.name.to_text()} = {_text(self.value)};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    token: Token
    return_value: Optional[Expression] = None

    def to_text(self) -> str:
        if self.return_value is None:
            return "return;"
        return f"return {self.return_value.to_text()};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """
    A bare expression used in statement position.
    """

    token: Token
    expression: Optional[Expression]

    def to_text(self) -> str:
        return _text(self.expression)
