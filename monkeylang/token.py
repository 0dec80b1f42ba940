"""Token definitions for Monkey.

Tokens are the flat vocabulary shared by the lexer and the parser. Every
token carries its :class:`TokenType`, the literal source text it was scanned
from and the 1-based line and column where that text begins.


File: token.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of lexical categories.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
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

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer diagnostics.
        """
        return self.value


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, literal text and position.
    """

    type: TokenType
    literal: str
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type.name}, {self.literal!r}, line={self.line})"


def lookup_ident(ident: str) -> TokenType:
    """
    Classify a run of letters as a keyword or a plain identifier.

    Parameters:
        ident (str): The scanned identifier text.

    Returns:
        TokenType: The keyword type, or ``TokenType.IDENT``.
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


__all__ = ["KEYWORDS", "Token", "TokenType", "lookup_ident"]
