"""Finding normalizer — raw detections to the public ``Finding`` shape."""

from __future__ import annotations

from collections.abc import Iterable

from smell_audit.core.walker import Detection
from smell_audit.model.finding import Finding


def normalize(detection: Detection) -> Finding:
    """Project one detection onto a ``Finding``.

    The parser's 0-based row becomes a 1-based line.  Id, name, message
    and severity are copied from the rule untouched; only the description
    is filled in from the detection's facts.
    """
    rule = detection.rule
    return Finding(
        id=rule.id,
        name=rule.name,
        description=rule.description.format(**detection.facts),
        line=detection.row + 1,
        message=rule.message,
        severity=rule.severity,
    )


def normalize_all(detections: Iterable[Detection]) -> list[Finding]:
    return [normalize(d) for d in detections]
