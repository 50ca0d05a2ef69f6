"""Magic-number rule — unnamed numeric literals in logic.

``price * 1.15`` is flagged; ``const TAX_RATE = 1.15`` is the fix and is
not.  A literal is exempt when its value is 0, 1 or -1, or when its
immediate parent is a declaration (variable, enum member, object
property, class field).  ``-5`` is a unary minus applied to the literal
``5``, so it is reported as ``5``.
"""

from __future__ import annotations

import math
from decimal import Decimal

import tree_sitter

from smell_audit.analyzers.classify import (
    is_declaration_context,
    is_numeric_literal,
    numeric_value,
)
from smell_audit.core.walker import Detection, WalkContext
from smell_audit.model import Severity
from smell_audit.policy.thresholds import DEFAULT_THRESHOLDS, SmellThresholds
from smell_audit.rules import MAGIC_NUMBER


def format_number(value: float) -> str:
    """Render *value* the way JavaScript's ``String(number)`` does.

    The digits are the shortest ones that round-trip (``repr``'s digits).
    With ``n`` the decimal point position, fixed notation is used for
    ``-6 < n <= 21`` and exponent notation otherwise.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)
    k = len(digits)
    n = k + exponent

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"
    e = n - 1
    mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


class MagicNumberRule:
    """One finding per non-exempt numeric literal."""

    id: str = MAGIC_NUMBER
    name: str = "Magic Number"
    severity: Severity = Severity.LOW
    description: str = 'Unnamed numeric literal "{value}" found.'
    message: str = "Extract this number into a named constant."

    def __init__(self, thresholds: SmellThresholds = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def evaluate(self, node: tree_sitter.Node, ctx: WalkContext) -> Detection | None:
        if not is_numeric_literal(node):
            return None
        value = numeric_value(node)
        if value in self.thresholds.exempt_numbers:
            return None
        if is_declaration_context(ctx.parent):
            return None
        return Detection(
            rule=self,
            row=node.start_point[0],
            facts={"value": format_number(value)},
        )
