"""Runtime object model for Monkey.

Every value produced by the interpreter is an :class:`Object` exposing a
``type()`` tag and an ``inspect()`` rendering for display. ``TRUE``,
``FALSE`` and ``NULL`` are the only instances of their kinds, which lets the
interpreter compare them by identity.

``ReturnValue`` and ``Error`` are signals as much as values: both stop the
evaluation of a statement sequence and travel outward until a function call
(for returns) or the caller of :func:`monkeylang.interpreter.evaluate`
(for errors) receives them.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum
from typing import TYPE_CHECKING

from monkeylang.nodes import BlockStatement, Identifier

if TYPE_CHECKING:
    from monkeylang.environment import Environment


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def wrap_int64(value: int) -> int:
    """
    Wrap an arbitrary Python integer into signed 64-bit two's complement.
    """
    return ((value - INT64_MIN) % 2**64) + INT64_MIN


class ObjectType(str, Enum):
    """
    Enumeration of runtime type tags.
    """

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"
    FUNCTION = "FUNCTION"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Object:
    """
    Base class for runtime values.
    """

    __slots__ = ()

    def type(self) -> ObjectType:
        raise NotImplementedError

    def inspect(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inspect()})"


class Integer(Object):
    """
    A signed 64-bit integer. Compared by contained value.
    """

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)

    def __eq__(self, other) -> bool:
        return isinstance(other, Integer) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)


class Boolean(Object):
    """
    A truth value. Only :data:`TRUE` and :data:`FALSE` exist.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"


class Null(Object):
    """
    The absence of a value. Only :data:`NULL` exists.
    """

    __slots__ = ()

    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


class ReturnValue(Object):
    """
    Wraps the value of a ``return`` while it unwinds to the call boundary.
    """

    __slots__ = ("value",)

    def __init__(self, value: Object):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


class Error(Object):
    """
    A runtime fault. Propagates like a return but is never unwrapped.
    """

    __slots__ = ("message",)

    def __init__(self, message: str):
        self.message = message

    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and other.message == self.message

    def __hash__(self) -> int:
        return hash(self.message)


class Function(Object):
    """
    A closure: parameters and body plus the environment it was defined in.
    """

    __slots__ = ("parameters", "body", "env")

    def __init__(
        self,
        parameters: tuple[Identifier, ...],
        body: BlockStatement,
        env: 'Environment',
    ):
        self.parameters = parameters
        self.body = body
        self.env = env

    def type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        params = ", ".join(p.value for p in self.parameters)
        return f"fn({params}) {{...}}"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(flag: bool) -> Boolean:
    """
    Map a Python ``bool`` onto the shared :data:`TRUE`/:data:`FALSE`.
    """
    return TRUE if flag else FALSE


def is_error(obj: Object) -> bool:
    return obj is not None and obj.type() == ObjectType.ERROR


def is_truthy(obj: Object) -> bool:
    """
    ``NULL`` and ``FALSE`` are falsy; everything else, ``0`` included, is
    truthy.
    """
    return obj is not NULL and obj is not FALSE
