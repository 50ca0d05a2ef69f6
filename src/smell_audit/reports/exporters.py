"""Exporters for analysis reports.

Supports:

*  **JSON** — machine-readable, suitable for CI artifact storage.
*  **Markdown** — human-readable, suitable for PR comments.

All exporters accept an :class:`AnalysisReport` and produce a string.
Severity breakdowns are computed here; the analyzer core only counts.
"""

from __future__ import annotations

from collections import Counter

from smell_audit.model import Severity
from smell_audit.model.report import AnalysisReport
from smell_audit.utils.json_norm import stable_json_dumps

# ── severity ordering (worst first) ─────────────────────────────────
_SEVERITY_ORDER = [
    Severity.HIGH,
    Severity.MEDIUM,
    Severity.LOW,
]

EXPORT_FORMATS = ("json", "markdown")


# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(report: AnalysisReport, *, indent: int = 2) -> str:
    """Export an ``AnalysisReport`` as indented JSON."""
    return stable_json_dumps(report.to_dict(), indent=indent)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def export_markdown(report: AnalysisReport) -> str:
    """Export an ``AnalysisReport`` as a Markdown summary.

    Findings are listed in the order the analyzer produced them.
    """
    lines: list[str] = []
    title = report.filename or "source"

    lines.append(f"# Smell Report: {title}")
    lines.append("")
    lines.append(f"**Variant:** {report.variant.value}  ")
    lines.append(f"**Lines:** {report.total_lines}  ")
    lines.append(f"**Issues Found:** {report.count}")
    lines.append("")

    if not report.findings:
        lines.append("No issues found.")
        lines.append("")
    else:
        sev_counts = Counter(f.severity for f in report.findings)
        lines.append("## By Severity")
        lines.append("")
        lines.append("| Severity | Count |")
        lines.append("|----------|------:|")
        for sev in _SEVERITY_ORDER:
            c = sev_counts.get(sev, 0)
            if c:
                lines.append(f"| {sev.value.upper()} | {c} |")
        lines.append("")

        lines.append("## Findings")
        lines.append("")
        lines.append("| # | Line | Severity | Pattern | Description | Suggestion |")
        lines.append("|--:|-----:|----------|---------|-------------|------------|")
        for i, f in enumerate(report.findings, 1):
            lines.append(
                f"| {i} | {f.line} | {f.severity.value.upper()} | {_escape_cell(f.name)} "
                f"| {_escape_cell(f.description)} | {_escape_cell(f.message)} |"
            )
        lines.append("")

    if report.diagnostics:
        lines.append("## Diagnostics")
        lines.append("")
        for d in report.diagnostics:
            lines.append(f"- `{d.rule_id}` skipped {d.node_type} at line {d.line}: {d.error}")
        lines.append("")

    lines.append("---")
    lines.append(f"*Exported by smell-audit {report.tool_version}*")
    lines.append("")
    return "\n".join(lines)


def export(report: AnalysisReport, fmt: str) -> str:
    """Dispatch to the exporter named by *fmt*."""
    if fmt == "json":
        return export_json(report)
    if fmt == "markdown":
        return export_markdown(report)
    raise ValueError(f"unknown export format: {fmt!r} (expected one of {EXPORT_FORMATS})")
