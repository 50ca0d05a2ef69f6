"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — source analyzed, no smells found
  1   Violation — source analyzed, at least one smell found
  2   Error — usage error, unreadable or rejected file, unparseable source
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
