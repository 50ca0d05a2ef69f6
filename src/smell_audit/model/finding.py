"""Finding — the normalized engine output for a single detected smell."""

from __future__ import annotations

from dataclasses import dataclass

from . import Severity


@dataclass(frozen=True, slots=True)
class Finding:
    """Immutable, schema-aligned finding.

    Corresponds to ``findings[]`` in ``analysis_report.schema.json``.
    ``id`` names the rule that fired, so many findings may share it.
    """

    id: str
    name: str
    description: str
    line: int                  # 1-based
    message: str
    severity: Severity

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "line": self.line,
            "message": self.message,
            "severity": self.severity.value,
        }
