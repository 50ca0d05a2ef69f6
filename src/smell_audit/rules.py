"""Canonical rule ID registry.

Single source of truth for every rule ID the analyzer can emit.  The
order of ``RULE_IDS`` is the evaluation order used by the walker, and
therefore the tie-break order for several findings on the same node.
"""

from __future__ import annotations

ANY_TYPE = "any-type"
LONG_PARAM_LIST = "long-param-list"
MAGIC_NUMBER = "magic-number"
GOD_CLASS = "god-class"
CALLBACK_HELL = "callback-hell"
NON_NULL_ASSERTION = "non-null-assertion"

# Evaluation order; do not sort.
RULE_IDS: tuple[str, ...] = (
    ANY_TYPE,
    LONG_PARAM_LIST,
    MAGIC_NUMBER,
    GOD_CLASS,
    CALLBACK_HELL,
    NON_NULL_ASSERTION,
)


def _assert_rule_registry_invariants() -> None:
    """Fail fast on invariant violations.

    Called at import time so CI and local runs catch issues immediately.
    """
    import re

    rule_re = re.compile(r"^[a-z]+(-[a-z]+)*$")

    if len(RULE_IDS) != len(set(RULE_IDS)):
        raise AssertionError("RULE_IDS must contain unique IDs")
    bad = [x for x in RULE_IDS if not rule_re.match(x)]
    if bad:
        raise AssertionError(f"RULE_IDS contains invalid rule IDs: {bad}")


_assert_rule_registry_invariants()
