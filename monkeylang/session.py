"""Evaluation sessions for embedding Monkey in a host.

A :class:`Session` owns one root :class:`Environment` and feeds it one
source string at a time, so bindings made by earlier inputs stay visible to
later ones. It is the layer that decides how results and diagnostics are
presented; the core pipeline only produces them.


File: session.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from typing import Optional

from monkeylang.config import DEFAULT_RECURSION_LIMIT
from monkeylang.environment import Environment
from monkeylang.exceptions import ParseError
from monkeylang.interpreter import evaluate
from monkeylang.nodes import LetStatement, Program
from monkeylang.objects import NULL, Error, Object
from monkeylang.parser import parse

logger = logging.getLogger(__name__)

RECURSION_MESSAGE = "maximum recursion depth exceeded"


class Session:
    """
    A sequence of evaluations sharing one root environment.
    """

    def __init__(
        self,
        env: Optional[Environment] = None,
        file: str = "<stdin>",
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    ):
        self.env = env if env is not None else Environment()
        self.file = file
        self.recursion_limit = recursion_limit

    def parse(self, source: str) -> Program:
        """
        Parse ``source``.

        Raises:
            ParseError: If the parser reported any diagnostics.
        """
        program, errors = parse(source)
        if errors:
            logger.debug("parse of %s failed with %d error(s)", self.file, len(errors))
            raise ParseError(errors, self.file)
        return program

    def eval(self, program: Program) -> Object:
        """
        Evaluate a parsed program in the session environment.

        The Python recursion limit is set to ``recursion_limit`` for the
        duration of the call. Runaway recursion that still exhausts it is
        reported as an ``Error`` result so the session remains usable.
        """
        previous_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(self.recursion_limit)
        try:
            return evaluate(program, self.env)
        except RecursionError:
            logger.warning("evaluation in %s hit the recursion limit", self.file)
            return Error(RECURSION_MESSAGE)
        finally:
            sys.setrecursionlimit(previous_limit)

    def run(self, source: str) -> Object:
        """
        Parse and evaluate ``source``.

        Raises:
            ParseError: If the parser reported any diagnostics.
        """
        return self.eval(self.parse(source))

    def execute(self, source: str) -> str:
        """
        Parse and evaluate ``source`` and return the text to display.

        Returns:
            str: Parser diagnostics, one per line and tab-indented; or the
            inspected result; or an empty string when the input ends with a
            ``let`` binding or is empty.
        """
        try:
            program = self.parse(source)
        except ParseError as e:
            return format_errors(e.errors)
        return self.display(program, self.eval(program))

    @staticmethod
    def display(program: Program, result: Object) -> str:
        """
        Return the text to show for the result of ``program``.

        Empty inputs, and inputs whose value is the ``NULL`` of a trailing
        ``let`` binding, show nothing. A value returned before the binding is
        still shown.
        """
        if result is NULL and (
            not program.statements or isinstance(program.statements[-1], LetStatement)
        ):
            return ""
        return result.inspect()


def format_errors(errors: list[str]) -> str:
    """
    Render parser diagnostics one per line with a leading tab.
    """
    return "\n".join(f"\t{msg}" for msg in errors)
