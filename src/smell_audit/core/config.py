"""File intake configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass

ONE_MIB = 1024 * 1024


@dataclass(frozen=True)
class IntakeConfig:
    """Immutable limits applied to files before they reach the analyzer.

    The analyzer core has no size or suffix constraint of its own.
    """

    max_source_bytes: int = ONE_MIB
    allowed_suffixes: tuple[str, ...] = (".ts", ".tsx")
    encoding: str = "utf-8"
