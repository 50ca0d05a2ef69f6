"""Walker — one pre-order traversal, every rule at every node.

Output order is traversal order (outer nodes before nested ones, earlier
siblings before later ones), then rule-set order for several detections
on the same node.  Nothing is removed or reordered after emission.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import tree_sitter

from smell_audit.errors import RuleEvaluationError
from smell_audit.model.report import Diagnostic

if TYPE_CHECKING:
    from smell_audit.analyzers import Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WalkContext:
    """What a rule may look at besides the node itself.

    ``ancestors`` runs from the root down to the node's immediate parent.
    Each step of the walk builds a new tuple; nothing is mutated.
    """

    tree: tree_sitter.Tree
    ancestors: tuple[tree_sitter.Node, ...] = ()

    @property
    def parent(self) -> tree_sitter.Node | None:
        return self.ancestors[-1] if self.ancestors else None

    def child(self, node: tree_sitter.Node) -> WalkContext:
        return WalkContext(self.tree, self.ancestors + (node,))


@dataclass(frozen=True, slots=True)
class Detection:
    """Raw rule output, before normalization."""

    rule: Rule
    row: int                   # 0-based, as reported by the parser
    facts: Mapping[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class WalkResult:
    detections: list[Detection] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _evaluate(rule: Rule, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
    try:
        return rule.evaluate(node, ctx)
    except Exception as exc:
        raise RuleEvaluationError(rule.id, node.type, node.start_point[0] + 1, exc) from exc


def walk(tree: tree_sitter.Tree, rules: Sequence[Rule]) -> WalkResult:
    """Visit every named node of *tree* once, in pre-order.

    A rule that raises is isolated to that node: the failure is logged,
    recorded as a ``Diagnostic``, and the walk continues.
    """
    result = WalkResult()
    stack: list[tuple[tree_sitter.Node, WalkContext]] = [
        (tree.root_node, WalkContext(tree))
    ]

    while stack:
        node, ctx = stack.pop()

        for rule in rules:
            try:
                detection = _evaluate(rule, node, ctx)
            except RuleEvaluationError as err:
                logger.warning(str(err))
                result.diagnostics.append(
                    Diagnostic(
                        rule_id=err.rule_id,
                        node_type=err.node_type,
                        line=err.line,
                        error=f"{type(err.cause).__name__}: {err.cause}",
                    )
                )
                continue
            if detection is not None:
                result.detections.append(detection)

        inner = ctx.child(node)
        for child in reversed(node.named_children):
            stack.append((child, inner))

    return result
