"""Monkey language package.

Source text goes through three stages: :func:`tokenize` turns it into
tokens, :func:`parse` builds a :class:`~monkeylang.nodes.Program` plus a
list of diagnostics, and :func:`evaluate` walks the program in an
:class:`Environment` and returns a runtime object.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from monkeylang.environment import Environment
from monkeylang.interpreter import Interpreter, evaluate
from monkeylang.lexer import Lexer, tokenize
from monkeylang.parser import Parser, parse
from monkeylang.session import Session

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Interpreter",
    "Lexer",
    "Parser",
    "Session",
    "evaluate",
    "parse",
    "tokenize",
]
