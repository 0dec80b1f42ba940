"""Lexer for Monkey.

The lexer performs a single left-to-right character scan over the source
text and hands out one :class:`Token` per call to :meth:`Lexer.next_token`.
It never backtracks and looks at most one character ahead, which is enough to
tell ``=`` from ``==`` and ``!`` from ``!=``.

Identifiers and keywords are maximal runs of ASCII letters and underscores,
integers are maximal runs of ASCII digits. Any other character produces an
``ILLEGAL`` token carrying that character, so lexing itself never fails.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterator

from monkeylang.token import Token, TokenType, lookup_ident

WHITESPACE = frozenset(" \t\n\r")

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# First character -> (second character, two-character token type)
TWO_CHAR_TOKENS: dict[str, tuple[str, TokenType]] = {
    "=": ("=", TokenType.EQ),
    "!": ("=", TokenType.NOT_EQ),
}


def is_letter(ch: str) -> bool:
    """
    Return ``True`` for characters that may appear in an identifier.
    """
    return ch == "_" or (ch.isascii() and ch.isalpha())


def is_digit(ch: str) -> bool:
    """
    Return ``True`` for ASCII decimal digits.
    """
    return "0" <= ch <= "9"


class Lexer:
    """
    Converts Monkey source text into tokens, one token per call.
    """

    def __init__(self, source: str):
        """
        Initialize a lexer positioned before the first character.

        Parameters:
            source (str): The source text to scan.
        """
        self.source = source
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self._done = False
        self._read_char()

    def _read_char(self) -> None:
        """
        Advance the cursor by one character. An empty ``ch`` marks the end.
        """
        if self.ch == "\n":
            self.line += 1
            self.column = 0
        if self.read_position < len(self.source):
            self.ch = self.source[self.read_position]
        else:
            self.ch = ""
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def _peek_char(self) -> str:
        if self.read_position < len(self.source):
            return self.source[self.read_position]
        return ""

    def _skip_whitespace(self) -> None:
        while self.ch and self.ch in WHITESPACE:
            self._read_char()

    def _read_while(self, predicate) -> str:
        start = self.position
        while self.ch and predicate(self.ch):
            self._read_char()
        return self.source[start:self.position]

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            Token: The next token. Once the input is exhausted every call
            returns an ``EOF`` token with an empty literal.
        """
        self._skip_whitespace()
        line, column = self.line, self.column
        ch = self.ch

        if ch == "":
            return Token(TokenType.EOF, "", line, column)

        if ch in TWO_CHAR_TOKENS:
            second, tok_type = TWO_CHAR_TOKENS[ch]
            if self._peek_char() == second:
                self._read_char()
                self._read_char()
                return Token(tok_type, ch + second, line, column)

        if ch in SINGLE_CHAR_TOKENS:
            self._read_char()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, line, column)

        if is_letter(ch):
            literal = self._read_while(is_letter)
            return Token(lookup_ident(literal), literal, line, column)

        if is_digit(ch):
            literal = self._read_while(is_digit)
            return Token(TokenType.INT, literal, line, column)

        self._read_char()
        return Token(TokenType.ILLEGAL, ch, line, column)

    def __iter__(self) -> Iterator[Token]:
        """
        Yield the remaining tokens up to and including ``EOF``.

        The iteration consumes the lexer; iterating again after ``EOF`` has
        been produced yields nothing.
        """
        while not self._done:
            tok = self.next_token()
            if tok.type == TokenType.EOF:
                self._done = True
            yield tok


def tokenize(source: str) -> Iterator[Token]:
    """
    Convert a string of source code into a lazy stream of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        Iterator[Token]: A consuming iterator terminated by an ``EOF`` token.
    """
    return iter(Lexer(source))
