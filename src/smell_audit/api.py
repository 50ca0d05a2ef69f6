"""
smell_audit.api
===============

Programmatic entrypoints for using smell_audit as a backend engine.

Goals:
  - Pure function of ``(source, filename_hint)``: no caches, no globals
  - Findings in traversal order, byte-identical across repeated calls
  - "Could not analyze" is an exception, never an empty finding list

Non-goals:
  - Owning presentation (cards, summaries); callers render results
  - Owning file acquisition policy beyond ``analyze_file``'s intake checks

Usage::

    from smell_audit.api import analyze, analyze_report

    findings = analyze(source, "component.tsx")
    report = analyze_report(source, "service.ts")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional, Sequence

from smell_audit.analyzers import RULE_SET, Rule
from smell_audit.core.config import IntakeConfig
from smell_audit.core.intake import read_source
from smell_audit.core.normalize import normalize_all
from smell_audit.core.parser import parse_source, total_lines, variant_for
from smell_audit.core.walker import walk
from smell_audit.model.finding import Finding
from smell_audit.model.report import AnalysisReport

logger = logging.getLogger(__name__)


# ── analyze ─────────────────────────────────────────────────────────


def analyze(source: str, filename_hint: Optional[str] = None) -> list[Finding]:
    """Analyze one unit of TypeScript source.

    Parameters
    ----------
    source:
        Raw source text.  No size limit is enforced here.
    filename_hint:
        Only selects the grammar: a ``.tsx`` suffix parses with the TSX
        grammar, anything else with plain TypeScript.

    Returns
    -------
    Findings in traversal order; an empty list when no rule fires.

    Raises
    ------
    ParseError
        If *source* is not valid syntax for the selected grammar.
    """
    return analyze_report(source, filename_hint).findings


def analyze_report(
    source: str,
    filename_hint: Optional[str] = None,
    *,
    rules: Optional[Sequence[Rule]] = None,
) -> AnalysisReport:
    """Run the parse → walk → normalize pipeline and wrap the result.

    Parameters
    ----------
    rules:
        Override the compiled-in rule set.  Each must conform to the
        ``Rule`` protocol.  Intended for tests.

    Raises
    ------
    ParseError
        If *source* is not valid syntax for the selected grammar.
    """
    variant = variant_for(filename_hint)
    tree = parse_source(source, variant)
    walked = walk(tree, RULE_SET if rules is None else rules)
    findings = normalize_all(walked.detections)

    logger.debug(
        f"Analyzed {filename_hint or '<source>'} as {variant.value}: "
        f"{len(findings)} finding(s), {len(walked.diagnostics)} diagnostic(s)"
    )
    return AnalysisReport(
        findings=findings,
        variant=variant,
        filename=filename_hint,
        total_lines=total_lines(source),
        diagnostics=walked.diagnostics,
    )


# ── analyze_file ────────────────────────────────────────────────────


def analyze_file(
    path: str | Path,
    *,
    config: IntakeConfig = IntakeConfig(),
) -> AnalysisReport:
    """Validate, read and analyze a ``.ts``/``.tsx`` file.

    Raises
    ------
    IntakeError
        If the file's suffix or size is rejected.
    ParseError
        If the file's contents cannot be parsed.
    OSError
        If the file cannot be read.
    """
    p = path if isinstance(path, Path) else Path(path)
    source = read_source(p, config=config)
    return analyze_report(source, p.name)


# ── validate_report ─────────────────────────────────────────────────


def validate_report(report: dict[str, Any]) -> None:
    """Validate a report dict against ``analysis_report.schema.json``.

    Raises
    ------
    jsonschema.ValidationError
        If validation fails.
    """
    from smell_audit.contracts.load import validate_instance

    validate_instance(report, "analysis_report.schema.json")
