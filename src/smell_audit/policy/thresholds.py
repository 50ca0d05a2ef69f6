"""Smell thresholds — single source of truth.

Every rule must read its limits from this module instead of hard-coding
them locally.  The values are compiled in; there is no policy file.
All comparisons are strict greater-than.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SmellThresholds:
    """Limits above which a construct is reported."""

    max_params: int = 3
    max_methods: int = 20
    max_class_lines: int = 300
    max_nesting_depth: int = 4
    exempt_numbers: frozenset[float] = frozenset({0.0, 1.0, -1.0})


DEFAULT_THRESHOLDS = SmellThresholds()
