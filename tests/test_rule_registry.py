"""The rule registry and the compiled-in rule set must agree."""

from __future__ import annotations

import json

from smell_audit.analyzers import RULE_SET
from smell_audit.contracts.load import load_schema
from smell_audit.rules import RULE_IDS


def test_rule_set_order_matches_registry():
    assert tuple(rule.id for rule in RULE_SET) == RULE_IDS


def test_rule_ids_are_unique():
    assert len(set(RULE_IDS)) == len(RULE_IDS) == 6


def test_schema_enumerates_every_rule_id():
    schema = load_schema("analysis_report.schema.json")
    enum = schema["$defs"]["finding"]["properties"]["id"]["enum"]
    assert list(enum) == list(RULE_IDS)


def test_every_rule_has_metadata():
    for rule in RULE_SET:
        assert rule.name
        assert rule.message
        assert rule.description
        assert rule.severity.value in {"high", "medium", "low"}


def test_rule_metadata_is_json_safe():
    catalogue = [
        {"id": r.id, "name": r.name, "severity": r.severity.value, "message": r.message}
        for r in RULE_SET
    ]
    assert json.loads(json.dumps(catalogue)) == catalogue
