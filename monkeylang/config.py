"""Runtime configuration for Monkey.

Settings are read from environment variables so the launcher, the REPL and
the language server all agree on them:

- ``MONKEYDEBUG``: when set to anything but ``0``/empty, the launcher prints
  the token stream and the parsed program before evaluating, and logging is
  raised to ``DEBUG``.
- ``MONKEY_RECURSION_LIMIT``: positive integer used as the Python recursion
  limit while a session evaluates (default 10000). Every Monkey call level
  takes about ten Python frames, so the interpreter default of 1000 would
  stop ordinary recursion near depth 100.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_RECURSION_LIMIT = 10000


@dataclass(frozen=True)
class Settings:
    """Launcher settings."""

    debug: bool = False
    recursion_limit: int = DEFAULT_RECURSION_LIMIT


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build :class:`Settings` from environment variables.

    Raises:
        ValueError: If ``MONKEY_RECURSION_LIMIT`` is not a positive integer.
    """
    if environ is None:
        environ = os.environ

    debug = environ.get("MONKEYDEBUG", "") not in ("", "0")

    recursion_limit = DEFAULT_RECURSION_LIMIT
    raw_limit = environ.get("MONKEY_RECURSION_LIMIT", "").strip()
    if raw_limit:
        try:
            recursion_limit = int(raw_limit)
        except ValueError as e:
            raise ValueError(
                f"MONKEY_RECURSION_LIMIT must be an integer, got '{raw_limit}'"
            ) from e
        if recursion_limit <= 0:
            raise ValueError(
                f"MONKEY_RECURSION_LIMIT must be positive, got {recursion_limit}"
            )

    return Settings(debug=debug, recursion_limit=recursion_limit)
