"""Interactive read-eval-print loop for Monkey.

Each line read from the input is parsed and evaluated in one long-lived
:class:`~monkeylang.session.Session`, so ``let`` bindings carry over from
line to line. Input that stops in the middle of a construct (an unclosed
brace or parenthesis) is buffered and completed by the following lines.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import Optional, TextIO

from monkeylang.exceptions import ParseError
from monkeylang.session import Session, format_errors

logger = logging.getLogger(__name__)

PROMPT = ">> "
CONTINUATION_PROMPT = ".. "
EXIT_COMMANDS = {"exit", "quit"}


def is_incomplete(error: ParseError) -> bool:
    """
    Return ``True`` if the parser ran out of input rather than hit a mistake.
    """
    return bool(error.errors) and all(
        msg.endswith("got EOF instead") or msg == "no prefix parse function for EOF found"
        for msg in error.errors
    )


def start(stdin: TextIO, stdout: TextIO, session: Optional[Session] = None) -> None:
    """
    Run the REPL until ``exit``/``quit`` or end of input.

    Parameters:
        stdin (TextIO): Source of input lines.
        stdout (TextIO): Destination for prompts, results and diagnostics.
        session (Session): Session to evaluate in; a fresh one by default.
    """
    if session is None:
        session = Session(file="<stdin>")
    buffer: list[str] = []

    while True:
        stdout.write(CONTINUATION_PROMPT if buffer else PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            if buffer:
                _flush_pending(session, buffer, stdout)
            return

        line = line.rstrip("\n")
        if not buffer and line.strip() in EXIT_COMMANDS:
            return
        buffer.append(line)
        source = "\n".join(buffer)

        try:
            program = session.parse(source)
        except ParseError as e:
            if is_incomplete(e):
                logger.debug("buffering incomplete input (%d line(s))", len(buffer))
                continue
            stdout.write(format_errors(e.errors) + "\n")
            buffer.clear()
            continue

        buffer.clear()
        output = _render(session, program)
        if output:
            stdout.write(output + "\n")


def _render(session: Session, program) -> str:
    result = session.eval(program)
    return session.display(program, result)


def _flush_pending(session: Session, buffer: list[str], stdout: TextIO) -> None:
    output = session.execute("\n".join(buffer))
    buffer.clear()
    if output:
        stdout.write(output + "\n")
