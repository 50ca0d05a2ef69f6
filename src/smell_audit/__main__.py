"""CLI entry-point for smell_audit.

Usage:
    python -m smell_audit <file>
    python -m smell_audit <file> --json
    python -m smell_audit - --filename component.tsx < component.tsx
    python -m smell_audit export <file> [--format json|markdown] [--output FILE]
    python -m smell_audit rules [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from smell_audit import __version__
from smell_audit.analyzers import RULE_SET
from smell_audit.api import analyze_file, analyze_report
from smell_audit.core.config import IntakeConfig
from smell_audit.core.intake import check_filename, check_size
from smell_audit.errors import IntakeError, ParseError
from smell_audit.model.report import AnalysisReport
from smell_audit.reports.exporters import EXPORT_FORMATS, export
from smell_audit.utils.exit_codes import ExitCode
from smell_audit.utils.json_norm import stable_json_dump

_SEVERITY_TAG = {"high": "HIGH", "medium": "MED ", "low": "LOW "}


def _print_human(report: AnalysisReport) -> None:
    """Pretty-print a human-readable summary to stderr."""
    label = report.filename or "<stdin>"
    print(
        f"\n{report.count} issue(s) found in {label} ({report.variant.value})",
        file=sys.stderr,
    )

    by_sev = Counter(f.severity.value for f in report.findings)
    if by_sev:
        parts = [f"{k}={by_sev[k]}" for k in ("high", "medium", "low") if by_sev[k]]
        print(f"   Severity : {', '.join(parts)}", file=sys.stderr)

    for f in report.findings:
        tag = _SEVERITY_TAG[f.severity.value]
        print(f"   L{f.line:<5} [{tag}] {f.name}: {f.description}", file=sys.stderr)

    if report.diagnostics:
        print(f"   {len(report.diagnostics)} rule evaluation(s) skipped:", file=sys.stderr)
        for d in report.diagnostics:
            print(f"      • {d.rule_id} on {d.node_type} at line {d.line}", file=sys.stderr)

    print("", file=sys.stderr)


def _load_report(target: str, filename: str | None) -> AnalysisReport:
    """Analyze a file path, or stdin when *target* is ``-``."""
    config = IntakeConfig()
    if target == "-":
        source = sys.stdin.read()
        check_size(len(source.encode("utf-8")), config=config)
        if filename:
            check_filename(filename, config=config)
        return analyze_report(source, filename)
    return analyze_file(Path(target), config=config)


def _run_guarded(target: str, filename: str | None) -> AnalysisReport | int:
    """Return the report, or an exit code after printing why analysis failed."""
    try:
        return _load_report(target, filename)
    except ParseError as e:
        print(f"error: could not analyze {filename or target}: {e}", file=sys.stderr)
    except IntakeError as e:
        print(f"error: {e}", file=sys.stderr)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {target}: {e}", file=sys.stderr)
    return ExitCode.ERROR


def _exit_code_for(report: AnalysisReport) -> int:
    return ExitCode.VIOLATION if report.count else ExitCode.SUCCESS


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "path",
        help="TypeScript file (.ts/.tsx) to analyze, or '-' to read stdin.",
    )
    p.add_argument(
        "--filename",
        dest="filename",
        default=None,
        help="Filename hint for stdin input (selects the .tsx grammar).",
    )


def _add_common_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log analysis progress to stderr.",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="smell-audit",
        description="Detect structural smells in TypeScript source.",
    )
    _add_common_args(p)
    sub = p.add_subparsers(dest="command")

    # ── export subcommand ─────────────────────────────────────────
    export_p = sub.add_parser(
        "export",
        help="Render the analysis report as JSON or Markdown.",
    )
    _add_source_args(export_p)
    export_p.add_argument(
        "--format",
        dest="fmt",
        choices=EXPORT_FORMATS,
        default="markdown",
        help="Output format (default: markdown).",
    )
    export_p.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write to FILE instead of stdout.",
    )

    # ── rules subcommand ──────────────────────────────────────────
    rules_p = sub.add_parser(
        "rules",
        help="List the compiled-in rules in evaluation order.",
    )
    rules_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the rule catalogue as JSON.",
    )
    return p


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode.

    Argparse subparsers greedily consume the first positional token, so
    ``smell-audit app.ts --json`` is parsed here when ``app.ts`` is not a
    known subcommand.
    """
    p = argparse.ArgumentParser(
        prog="smell-audit",
        description="Detect structural smells in TypeScript source.",
    )
    _add_common_args(p)
    _add_source_args(p)
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the full report JSON to stdout.",
    )
    p.set_defaults(command=None)
    return p


def rule_catalogue() -> list[dict]:
    return [
        {
            "id": rule.id,
            "name": rule.name,
            "severity": rule.severity.value,
            "message": rule.message,
        }
        for rule in RULE_SET
    ]


def _handle_rules(args: argparse.Namespace) -> int:
    catalogue = rule_catalogue()
    if args.json_out:
        stable_json_dump(catalogue, sys.stdout)
        return ExitCode.SUCCESS
    for entry in catalogue:
        print(f"{entry['id']:<20} {entry['severity']:<7} {entry['name']}")
    return ExitCode.SUCCESS


def _handle_export(args: argparse.Namespace) -> int:
    outcome = _run_guarded(args.path, args.filename)
    if isinstance(outcome, int):
        return outcome

    rendered = export(outcome, args.fmt)
    if args.output is None:
        sys.stdout.write(rendered)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
        print(f"Wrote {args.output}", file=sys.stderr)
    return _exit_code_for(outcome)


def main(argv: list[str] | None = None) -> int:
    """Entry-point. Returns an exit code (0 = clean, 1 = smells, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    known_commands = {"export", "rules"}
    first_positional = next(
        (a for a in effective_argv if not a.startswith("-") or a == "-"), None
    )
    if first_positional and first_positional not in known_commands:
        args = _build_default_parser().parse_args(effective_argv)
    else:
        args = _build_parser().parse_args(effective_argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "rules":
        return _handle_rules(args)

    if args.command == "export":
        return _handle_export(args)

    # ── default positional-path mode ──────────────────────────────
    if getattr(args, "path", None) is None:
        print("error: please provide a file or use a subcommand.", file=sys.stderr)
        return ExitCode.ERROR

    outcome = _run_guarded(args.path, args.filename)
    if isinstance(outcome, int):
        return outcome

    _print_human(outcome)
    if args.json_out:
        stable_json_dump(outcome.to_dict(), sys.stdout)
    return _exit_code_for(outcome)


if __name__ == "__main__":
    raise SystemExit(main())
