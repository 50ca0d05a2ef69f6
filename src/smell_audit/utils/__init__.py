"""Shared utilities for smell_audit."""

from smell_audit.utils.exit_codes import ExitCode
from smell_audit.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
