"""Errors.

Malformed source and runtime faults inside a program never raise: the
parser collects diagnostics and the interpreter returns ``Error`` objects.
The exceptions below are for the embedding layer and for interpreter
defects.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseError(SyntaxError):
    """
    Error for source text that the parser reported problems in.
    """
    def __init__(self, errors, file=None):
        self.errors = list(errors)
        self.file = file
        message = "; ".join(self.errors)
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnknownNodeException(TypeError):
    """
    Error for AST nodes the interpreter has no evaluation rule for.
    """
    def __init__(self, node):
        self.node = node
        super().__init__(f"Unknown node type '{type(node).__name__}'")
