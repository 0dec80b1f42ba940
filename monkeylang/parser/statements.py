"""Statement parsing utilities for Monkey.

These functions operate on a :class:`monkeylang.parser.parser.Parser`
instance and handle the statement forms of the language: ``let`` bindings,
``return`` statements, bare expression statements and brace-delimited
blocks. Every rule starts with the window on the statement's first token and
finishes with it on the statement's last token; trailing semicolons are
optional.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from monkeylang.nodes import (
    BlockStatement,
    ExpressionStatement,
    Identifier,
    LetStatement,
    ReturnStatement,
    Statement,
)
from monkeylang.token import TokenType

from .expressions import Precedence

if TYPE_CHECKING:
    from monkeylang.parser import Parser


def parse_statement(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a single statement, dispatching on its leading token.

    Returns:
        Statement | None: The statement, or ``None`` when it could not be
        parsed. The problem has been recorded as a diagnostic.
    """
    tok = parser.curr_token
    if tok.type == TokenType.LET:
        return parse_let_statement(parser)
    if tok.type == TokenType.RETURN:
        return parse_return_statement(parser)
    return parse_expression_statement(parser)


def parse_let_statement(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a binding.

    Syntax:
        let <identifier> = <expression> [;]
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.IDENT):
        return None
    name = Identifier(parser.curr_token, parser.curr_token.literal)
    if not parser.expect_peek(TokenType.ASSIGN):
        return None

    parser.next_token()
    value = parser.expression(Precedence.LOWEST)
    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return LetStatement(tok, name, value)


def parse_return_statement(parser: 'Parser') -> Statement:
    """
    Parse a return statement; the value is optional.

    Syntax:
        return [<expression>] [;]
    """
    tok = parser.curr_token
    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
        return ReturnStatement(tok, None)
    if parser.peek_token_is(TokenType.RBRACE) or parser.peek_token_is(TokenType.EOF):
        return ReturnStatement(tok, None)

    parser.next_token()
    value = parser.expression(Precedence.LOWEST)
    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return ReturnStatement(tok, value)


def parse_expression_statement(parser: 'Parser') -> Optional[Statement]:
    tok = parser.curr_token
    expr = parser.expression(Precedence.LOWEST)
    if expr is None:
        return None
    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()
    return ExpressionStatement(tok, expr)


def parse_block(parser: 'Parser') -> BlockStatement:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    The window starts on ``{`` and ends on the matching ``}``. Hitting the
    end of input first records a diagnostic and returns what was parsed.
    """
    tok = parser.curr_token
    parser.next_token()
    statements = []
    while not parser.curr_token_is(TokenType.RBRACE):
        if parser.curr_token_is(TokenType.EOF):
            parser.add_error(
                f"expected next token to be {TokenType.RBRACE.value}, "
                f"got {TokenType.EOF.value} instead",
                parser.curr_token,
            )
            break
        stmt = parser.statement()
        if stmt is not None:
            statements.append(stmt)
        parser.next_token()
    return BlockStatement(tok, tuple(statements))
