"""Flags functions that take too many arguments."""

from __future__ import annotations

import tree_sitter

from smell_audit.analyzers.classify import is_function_like, parameter_count
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.policy.thresholds import DEFAULT_THRESHOLDS, SmellThresholds
from smell_audit.rules import LONG_PARAM_LIST


class LongParamListRule:
    """Flags any function-like node with more than ``max_params`` parameters."""

    id: str = LONG_PARAM_LIST
    name: str = "Long Parameter List"
    severity: Severity = Severity.MEDIUM
    description: str = "Function has {count} parameters."
    message: str = "Consider refactoring to use a parameter object."

    def __init__(self, thresholds: SmellThresholds = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_function_like(node):
            return None
        count = parameter_count(node)
        if count <= self.thresholds.max_params:
            return None
        return Detection(rule=self, row=node.start_point[0], facts={"count": count})
