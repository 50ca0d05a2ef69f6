"""Enums shared across the engine and reporting layers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Fixed per-rule severity, never computed from magnitude."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SyntaxVariant(str, Enum):
    """Grammar used to parse a unit of source."""

    TYPESCRIPT = "typescript"
    TSX = "tsx"
