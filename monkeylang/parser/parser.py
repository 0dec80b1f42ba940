"""Main parser entry point for Monkey.

This module defines the :class:`Parser` class, which drives the
recursive descent over statements and the precedence-climbing (Pratt) loop
over expressions. The actual parsing routines are split across
:mod:`monkeylang.parser.expressions` and :mod:`monkeylang.parser.statements`.

The parser never raises on malformed input. Every problem is recorded as a
:class:`Diagnostic` and parsing carries on from the next token, so a single
pass can report several independent mistakes.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Optional

from monkeylang.lexer import Lexer
from monkeylang.nodes import BlockStatement, Expression, Program, Statement
from monkeylang.token import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


@dataclass(frozen=True)
class Diagnostic:
    """
    A syntax problem found while parsing, with the position it refers to.
    """

    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return self.message


class Parser:
    """Monkey parser."""

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and fill the two-token window.

        Parameters:
            lexer (Lexer): The token source.
        """
        self.lexer = lexer
        self.diagnostics: list[Diagnostic] = []
        self.curr_token: Token = lexer.next_token()
        self.peek_token: Token = lexer.next_token()

    @property
    def errors(self) -> list[str]:
        """
        Diagnostic messages in detection order.
        """
        return [d.message for d in self.diagnostics]

    def next_token(self) -> None:
        """
        Slide the token window forward by one token.
        """
        self.curr_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def curr_token_is(self, token_type: TokenType) -> bool:
        return self.curr_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """
        Advance if the next token has the expected type.

        Parameters:
            token_type (TokenType): The expected token type.

        Returns:
            bool: ``True`` if the token was consumed. Otherwise a diagnostic
            is recorded and the window is left untouched.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    # Diagnostics
    def add_error(self, message: str, tok: Token) -> None:
        """
        Record a diagnostic located at ``tok``.
        """
        self.diagnostics.append(Diagnostic(message, tok.line, tok.column))

    def peek_error(self, token_type: TokenType) -> None:
        self.add_error(
            f"expected next token to be {token_type.value}, "
            f"got {self.peek_token.type.value} instead",
            self.peek_token,
        )

    def no_prefix_parse_error(self, tok: Token) -> None:
        self.add_error(
            f"no prefix parse function for {tok.type.value} found",
            tok,
        )

    # Expression wrappers
    def expression(self, precedence: int) -> Optional[Expression]:
        """
        Parse an expression whose operators bind tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    def peek_precedence(self) -> int:
        """
        Return the binding power of the next token.
        """
        return _expr.precedence_of(self.peek_token)

    def curr_precedence(self) -> int:
        """
        Return the binding power of the current token.
        """
        return _expr.precedence_of(self.curr_token)

    # Statement wrappers
    def statement(self) -> Optional[Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> BlockStatement:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_program(self) -> Program:
        """
        Parse the full input into a Program.
        """
        statements = []
        while not self.curr_token_is(TokenType.EOF):
            stmt = self.statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        return Program(tuple(statements))


def parse(source: str) -> tuple[Program, list[str]]:
    """
    Parse source text.

    Parameters:
        source (str): The source code to parse.

    Returns:
        Program: The (possibly partial) syntax tree.
        list[str]: Diagnostic messages, empty when the program is well formed.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors
