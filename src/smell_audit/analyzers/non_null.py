"""Non-null-assertion rule — the postfix ``!`` operator."""

from __future__ import annotations

import tree_sitter

from smell_audit.analyzers.classify import is_non_null_assertion
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.rules import NON_NULL_ASSERTION


class NonNullAssertionRule:
    """One finding per ``!``.

    ``a!.b!.c!`` is three nested assertion expressions, hence three findings.
    """

    id: str = NON_NULL_ASSERTION
    name: str = "Non-Null Assertion"
    severity: Severity = Severity.MEDIUM
    description: str = 'Usage of "!" operator.'
    message: str = "Avoid non-null assertions. Use optional chaining or guard clauses."

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_non_null_assertion(node):
            return None
        return Detection(rule=self, row=node.start_point[0])
