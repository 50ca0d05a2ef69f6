"""Error taxonomy for the analyzer and its callers.

``ParseError`` is fatal to one ``analyze`` call and must reach the caller:
"could not analyze" is never reported as an empty, clean result.
``RuleEvaluationError`` is contained by the walker.  The ``IntakeError``
family belongs to file acquisition, which runs before the analyzer.
"""

from __future__ import annotations


class ParseError(ValueError):
    """Source text is not valid syntax for the selected grammar variant."""

    def __init__(self, line: int, column: int, variant: str, detail: str = "") -> None:
        self.line = line
        self.column = column
        self.variant = variant
        self.detail = detail
        msg = f"cannot parse source as {variant} at line {line}, column {column}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class RuleEvaluationError(RuntimeError):
    """A single rule failed on a single node."""

    def __init__(self, rule_id: str, node_type: str, line: int, cause: BaseException) -> None:
        self.rule_id = rule_id
        self.node_type = node_type
        self.line = line
        self.cause = cause
        super().__init__(
            f"rule {rule_id!r} failed on {node_type} at line {line}: "
            f"{type(cause).__name__}: {cause}"
        )


class IntakeError(ValueError):
    """A file was rejected before analysis."""


class UnsupportedFileError(IntakeError):
    """The file suffix is not one the analyzer accepts."""

    def __init__(self, name: str, allowed: tuple[str, ...]) -> None:
        self.name = name
        self.allowed = allowed
        super().__init__(
            f"{name}: only {', '.join(allowed)} files are allowed"
        )


class SourceTooLargeError(IntakeError):
    """The source exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"source is {size} bytes; the limit is {limit} bytes")
