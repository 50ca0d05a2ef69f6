"""Rules detect smells one node at a time.

Every rule exposes ``id``, ``name``, ``severity``, ``description`` (a
``str.format`` template filled from the detection's facts), ``message``
and ``evaluate(node, ctx) -> Detection | None``.

Rules may look at the node and its ancestors (``ctx.ancestors``) but
never walk descendants; descending is the walker's job.  No rule depends
on another rule's output.

``RULE_SET`` is the compiled-in rule set, in evaluation order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import tree_sitter

from smell_audit.model import Severity

if TYPE_CHECKING:
    from smell_audit.core.walker import Detection, WalkContext


class Rule(Protocol):
    """Every rule must expose its metadata and ``evaluate()``."""

    id: str
    name: str
    severity: Severity
    description: str
    message: str

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        """Return one detection for *node*, or ``None``."""
        ...


from .any_type import AnyTypeRule  # noqa: E402
from .callback_hell import CallbackHellRule  # noqa: E402
from .god_class import GodClassRule  # noqa: E402
from .long_params import LongParamListRule  # noqa: E402
from .magic_number import MagicNumberRule  # noqa: E402
from .non_null import NonNullAssertionRule  # noqa: E402

RULE_SET: tuple[Rule, ...] = (
    AnyTypeRule(),
    LongParamListRule(),
    MagicNumberRule(),
    GodClassRule(),
    CallbackHellRule(),
    NonNullAssertionRule(),
)

__all__ = [
    "Rule",
    "RULE_SET",
    "AnyTypeRule",
    "CallbackHellRule",
    "GodClassRule",
    "LongParamListRule",
    "MagicNumberRule",
    "NonNullAssertionRule",
]
