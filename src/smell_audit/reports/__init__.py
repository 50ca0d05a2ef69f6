"""Report rendering for analysis results."""

from smell_audit.reports.exporters import export, export_json, export_markdown

__all__ = ["export", "export_json", "export_markdown"]
