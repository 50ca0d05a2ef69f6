"""Syntax parser — tree-sitter TypeScript/TSX grammars behind one call.

A fresh ``Parser`` is built for every call; the returned tree belongs to
the caller and nothing is cached between calls.
"""

from __future__ import annotations

import logging

import tree_sitter
import tree_sitter_typescript

from smell_audit.errors import ParseError
from smell_audit.model import SyntaxVariant

logger = logging.getLogger(__name__)


def variant_for(filename_hint: str | None) -> SyntaxVariant:
    """Pick the grammar from a filename hint: ``.tsx`` → TSX, else TypeScript."""
    if filename_hint and filename_hint.lower().endswith(".tsx"):
        return SyntaxVariant.TSX
    return SyntaxVariant.TYPESCRIPT


def _language(variant: SyntaxVariant) -> tree_sitter.Language:
    if variant is SyntaxVariant.TSX:
        return tree_sitter.Language(tree_sitter_typescript.language_tsx())
    return tree_sitter.Language(tree_sitter_typescript.language_typescript())


def _first_error(root: tree_sitter.Node) -> tree_sitter.Node | None:
    """Return the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if not node.has_error:
            continue
        for child in reversed(node.children):
            stack.append(child)
    return None


def parse_source(source: str, variant: SyntaxVariant) -> tree_sitter.Tree:
    """Parse *source* with the *variant* grammar.

    Raises
    ------
    ParseError
        If the tree contains any ERROR or MISSING node.  tree-sitter
        recovers from syntax errors; a recovered tree is not trusted.
    """
    parser = tree_sitter.Parser(_language(variant))
    tree = parser.parse(source.encode("utf-8"))
    root = tree.root_node

    if root.has_error:
        bad = _first_error(root) or root
        row, column = bad.start_point
        if bad.is_missing:
            detail = f"missing {bad.type!r}"
        else:
            text = (bad.text or b"").decode("utf-8", errors="replace").strip()
            detail = f"unexpected {text[:40]!r}" if text else "unexpected input"
        logger.debug(f"Parse failed ({variant.value}) at {row + 1}:{column + 1}: {detail}")
        raise ParseError(row + 1, column + 1, variant.value, detail)

    return tree


def total_lines(source: str) -> int:
    """Number of lines the parser sees in *source* (at least 1)."""
    return source.count("\n") + 1
