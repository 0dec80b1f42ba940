"""Expression parsing utilities for Monkey.

These functions operate on a :class:`monkeylang.parser.parser.Parser`
instance and implement precedence climbing. Each token that can start an
expression has a prefix rule, each token that can continue one has an infix
rule and a binding power in :data:`PRECEDENCES`. The loop in
:func:`parse_expression` keeps extending the left operand while the next
operator binds tighter than the current floor, which gives left
associativity for chains of equal precedence and correct nesting for mixed
ones.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Optional

from monkeylang.nodes import (
    Boolean,
    CallExpression,
    Expression,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
)
from monkeylang.objects import INT64_MAX
from monkeylang.token import Token, TokenType

if TYPE_CHECKING:
    from monkeylang.parser import Parser


class Precedence(IntEnum):
    """
    Binding power levels, weakest first.
    """

    LOWEST = 1
    EQUALS = 2       # ==
    LESSGREATER = 3  # > or <
    SUM = 4          # +
    PRODUCT = 5      # *
    PREFIX = 6       # -x or !x
    CALL = 7         # f(x)


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


def precedence_of(tok: Token) -> Precedence:
    return PRECEDENCES.get(tok.type, Precedence.LOWEST)


# ---- Entry point ----

def parse_expression(parser: 'Parser', precedence: int) -> Optional[Expression]:
    """
    Parse an expression, stopping at operators that bind no tighter than
    ``precedence``.

    Returns:
        Expression | None: The expression, or ``None`` if its leading token
        cannot start an expression.
    """
    prefix = PREFIX_RULES.get(parser.curr_token.type)
    if prefix is None:
        parser.no_prefix_parse_error(parser.curr_token)
        return None
    left = prefix(parser)

    while (
        left is not None
        and not parser.peek_token_is(TokenType.SEMICOLON)
        and precedence < parser.peek_precedence()
    ):
        infix = INFIX_RULES[parser.peek_token.type]
        parser.next_token()
        left = infix(parser, left)

    return left


# ---- Prefix rules ----

def parse_identifier(parser: 'Parser') -> Expression:
    tok = parser.curr_token
    return Identifier(tok, tok.literal)


def parse_integer_literal(parser: 'Parser') -> Optional[Expression]:
    """Parse a run of digits into a signed 64-bit integer literal."""
    tok = parser.curr_token
    value = int(tok.literal)
    if value > INT64_MAX:
        parser.add_error(f"could not parse {tok.literal} as integer", tok)
        return None
    return IntegerLiteral(tok, value)


def parse_boolean(parser: 'Parser') -> Expression:
    tok = parser.curr_token
    return Boolean(tok, tok.type == TokenType.TRUE)


def parse_prefix_expression(parser: 'Parser') -> Expression:
    """Parse ``!x`` or ``-x``; the operand binds at prefix strength."""
    tok = parser.curr_token
    parser.next_token()
    right = parser.expression(Precedence.PREFIX)
    return PrefixExpression(tok, tok.literal, right)


def parse_grouped_expression(parser: 'Parser') -> Optional[Expression]:
    """Parse ``( <expression> )``; the parentheses reset the floor."""
    parser.next_token()
    expr = parser.expression(Precedence.LOWEST)
    if expr is None or not parser.expect_peek(TokenType.RPAREN):
        return None
    return expr


def parse_if_expression(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a conditional.

    Syntax:
        if ( <condition> ) { <statement>* } [else { <statement>* }]
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None
    parser.next_token()
    condition = parser.expression(Precedence.LOWEST)
    if condition is None or not parser.expect_peek(TokenType.RPAREN):
        return None
    if not parser.expect_peek(TokenType.LBRACE):
        return None
    consequence = parser.block()

    alternative = None
    if parser.peek_token_is(TokenType.ELSE):
        parser.next_token()
        if not parser.expect_peek(TokenType.LBRACE):
            return None
        alternative = parser.block()

    return IfExpression(tok, condition, consequence, alternative)


def parse_function_parameters(parser: 'Parser') -> Optional[list[Identifier]]:
    """Parse ``( <ident> [, <ident>]* )`` with the window on ``(``."""
    params: list[Identifier] = []
    if parser.peek_token_is(TokenType.RPAREN):
        parser.next_token()
        return params

    if not parser.expect_peek(TokenType.IDENT):
        return None
    params.append(Identifier(parser.curr_token, parser.curr_token.literal))

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        if not parser.expect_peek(TokenType.IDENT):
            return None
        params.append(Identifier(parser.curr_token, parser.curr_token.literal))

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return params


def parse_function_literal(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a function literal.

    Syntax:
        fn ( <params> ) { <statement>* }
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None
    params = parse_function_parameters(parser)
    if params is None:
        return None
    if not parser.expect_peek(TokenType.LBRACE):
        return None
    body = parser.block()
    return FunctionLiteral(tok, tuple(params), body)


# ---- Infix rules ----

def parse_infix_expression(parser: 'Parser', left: Expression) -> Optional[Expression]:
    """Parse a binary operator; the right operand binds at its precedence."""
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.next_token()
    right = parser.expression(precedence)
    if right is None:
        return None
    return InfixExpression(tok, left, tok.literal, right)


def parse_call_arguments(parser: 'Parser') -> Optional[list[Expression]]:
    """Parse ``( [<expr> [, <expr>]*] )`` with the window on ``(``."""
    args: list[Expression] = []
    if parser.peek_token_is(TokenType.RPAREN):
        parser.next_token()
        return args

    parser.next_token()
    arg = parser.expression(Precedence.LOWEST)
    if arg is None:
        return None
    args.append(arg)

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        parser.next_token()
        arg = parser.expression(Precedence.LOWEST)
        if arg is None:
            return None
        args.append(arg)

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return args


def parse_call_expression(parser: 'Parser', function: Expression) -> Optional[Expression]:
    """Parse ``<callee>(<args>)`` where ``(`` follows a parsed expression."""
    tok = parser.curr_token
    args = parse_call_arguments(parser)
    if args is None:
        return None
    return CallExpression(tok, function, tuple(args))


PREFIX_RULES: dict[TokenType, Callable[['Parser'], Optional[Expression]]] = {
    TokenType.IDENT: parse_identifier,
    TokenType.INT: parse_integer_literal,
    TokenType.TRUE: parse_boolean,
    TokenType.FALSE: parse_boolean,
    TokenType.BANG: parse_prefix_expression,
    TokenType.MINUS: parse_prefix_expression,
    TokenType.LPAREN: parse_grouped_expression,
    TokenType.IF: parse_if_expression,
    TokenType.FUNCTION: parse_function_literal,
}

INFIX_RULES: dict[TokenType, Callable[['Parser', Expression], Optional[Expression]]] = {
    TokenType.PLUS: parse_infix_expression,
    TokenType.MINUS: parse_infix_expression,
    TokenType.ASTERISK: parse_infix_expression,
    TokenType.SLASH: parse_infix_expression,
    TokenType.EQ: parse_infix_expression,
    TokenType.NOT_EQ: parse_infix_expression,
    TokenType.LT: parse_infix_expression,
    TokenType.GT: parse_infix_expression,
    TokenType.LPAREN: parse_call_expression,
}
