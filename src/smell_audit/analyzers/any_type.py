"""Reports explicit ``any`` annotations, which switch type checking off."""

from __future__ import annotations

import tree_sitter

from smell_audit.analyzers.classify import is_any_keyword
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.rules import ANY_TYPE


class AnyTypeRule:
    """One finding per ``any`` occurrence.

    A parameter and a return type both annotated ``any`` on the same
    declaration are two findings, not one.
    """

    id: str = ANY_TYPE
    name: str = "Any Type Abuse"
    severity: Severity = Severity.HIGH
    description: str = 'Usage of "any" disables type checking.'
    message: str = 'Avoid using "any". It bypasses the type system.'

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_any_keyword(node):
            return None
        return Detection(rule=self, row=node.start_point[0])
