"""God-class rule — classes with too many methods or too many lines."""

from __future__ import annotations

import tree_sitter

from smell_audit.analyzers.classify import is_class_like, line_span, method_count
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.policy.thresholds import DEFAULT_THRESHOLDS, SmellThresholds
from smell_audit.rules import GOD_CLASS


class GodClassRule:
    """Flags a class with > ``max_methods`` methods or a span > ``max_class_lines``.

    The span is the class node's own end line minus its start line.
    """

    id: str = GOD_CLASS
    name: str = "God Class"
    severity: Severity = Severity.HIGH
    description: str = "Class has {methods} methods and {lines} lines."
    message: str = "This class does too much. Verify Single Responsibility Principle."

    def __init__(self, thresholds: SmellThresholds = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_class_like(node):
            return None
        methods = method_count(node)
        lines = line_span(node)
        if methods <= self.thresholds.max_methods and lines <= self.thresholds.max_class_lines:
            return None
        return Detection(
            rule=self,
            row=node.start_point[0],
            facts={"methods": methods, "lines": lines},
        )
