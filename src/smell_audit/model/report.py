"""The caller-facing result of one ``analyze`` call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from smell_audit import __version__
from smell_audit.model import SyntaxVariant
from smell_audit.model.finding import Finding


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A rule that failed on one node; the walk carried on without it."""

    rule_id: str
    node_type: str
    line: int
    error: str

    def to_dict(self) -> dict:
        return {
            "rule_id": self.rule_id,
            "node_type": self.node_type,
            "line": self.line,
            "error": self.error,
        }


@dataclass(slots=True)
class AnalysisReport:
    """Findings in traversal order plus the derived count.

    Aggregate statistics (severity breakdowns and the like) are not
    computed here; the reporting layer derives them when it needs them.
    """

    findings: list[Finding] = field(default_factory=list)
    variant: SyntaxVariant = SyntaxVariant.TYPESCRIPT
    filename: str | None = None
    total_lines: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    tool_version: str = __version__

    @property
    def count(self) -> int:
        return len(self.findings)

    def to_dict(self) -> dict[str, Any]:
        """Produce the report JSON matching ``analysis_report.schema.json``."""
        return {
            "schema_version": "analysis_report_v1",
            "tool_version": self.tool_version,
            "source": {
                "filename": self.filename,
                "variant": self.variant.value,
                "total_lines": self.total_lines,
            },
            "count": self.count,
            "findings": [f.to_dict() for f in self.findings],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
