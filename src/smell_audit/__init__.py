"""Structural smell detector for TypeScript source."""

__all__ = [
    "__version__",
    "analyze",
    "analyze_file",
    "analyze_report",
    "validate_report",
    "Finding",
    "AnalysisReport",
    "Severity",
    "ParseError",
]
__version__ = "0.1.0"

# Programmatic engine entrypoints (backend use).
from smell_audit.api import (  # noqa: E402, F401
    analyze,
    analyze_file,
    analyze_report,
    validate_report,
)
from smell_audit.errors import ParseError  # noqa: E402, F401
from smell_audit.model import Severity  # noqa: E402, F401
from smell_audit.model.finding import Finding  # noqa: E402, F401
from smell_audit.model.report import AnalysisReport  # noqa: E402, F401
