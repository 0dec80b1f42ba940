"""Variable environments for Monkey.

An :class:`Environment` maps names to runtime objects and optionally links to
an enclosing environment. Lookups walk outward through the chain; bindings
are always written to the innermost environment, so a ``let`` inside a
function shadows an outer name instead of changing it.

Functions keep a reference to the environment they were defined in and every
call gets a fresh child of that environment. Python's reference counting and
cycle collector take care of environments that are no longer reachable from
any function or call frame.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from monkeylang.objects import Object


class Environment:
    """
    A scope of name bindings with an optional enclosing scope.
    """

    def __init__(self, outer: Optional['Environment'] = None):
        self.store: dict[str, Object] = {}
        self.outer = outer

    @classmethod
    def enclosed(cls, outer: 'Environment') -> 'Environment':
        """
        Create a child scope of ``outer``.
        """
        return cls(outer)

    def get(self, name: str) -> Optional[Object]:
        """
        Resolve ``name`` through this scope and its ancestors.

        Returns:
            Object | None: The bound value, or ``None`` if no scope binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        """
        Bind ``name`` in this scope, shadowing any outer binding.
        """
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        return f"Environment({sorted(self.store)}, outer={self.outer is not None})"
