"""Callback-hell rule — functions nested too deeply inside other functions."""

from __future__ import annotations

import tree_sitter

from smell_audit.analyzers.classify import is_function_like
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.policy.thresholds import DEFAULT_THRESHOLDS, SmellThresholds
from smell_audit.rules import CALLBACK_HELL


def nesting_depth(ctx: WalkContext) -> int:
    """Count the function-like nodes strictly enclosing the current node."""
    return sum(1 for ancestor in ctx.ancestors if is_function_like(ancestor))


class CallbackHellRule:
    """Flags a function-like node whose nesting depth exceeds ``max_nesting_depth``.

    The node itself is not part of its own depth, so the sixth function
    in a chain (outer + 5 nested) has depth 5 and is the first reported.
    """

    id: str = CALLBACK_HELL
    name: str = "Callback Hell"
    severity: Severity = Severity.HIGH
    description: str = "Function nesting depth is {depth}."
    message: str = "Refactor using Promises or Async/Await to flatten the code."

    def __init__(self, thresholds: SmellThresholds = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_function_like(node):
            return None
        depth = nesting_depth(ctx)
        if depth <= self.thresholds.max_nesting_depth:
            return None
        return Detection(rule=self, row=node.start_point[0], facts={"depth": depth})
