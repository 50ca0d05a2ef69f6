"""Node classifier — semantic predicates over tree-sitter node types.

The TypeScript grammar has several concrete node shapes for one concept
(a "function" may be a declaration, a method, an arrow function or a
function expression).  Rules ask these predicates instead of matching
node types themselves, so two rules that care about the same concept
always agree on what it covers.

Only named nodes are classified: the grammar also exposes anonymous
keyword tokens whose type strings collide with named nodes
(``function``, ``class``).
"""

from __future__ import annotations

import tree_sitter

# ``function`` is the pre-0.21 grammar name of ``function_expression``.
_FUNCTION_TYPES = frozenset({
    "function_declaration",
    "generator_function_declaration",
    "function_signature",
    "function_expression",
    "function",
    "generator_function",
    "arrow_function",
})

_CLASS_TYPES = frozenset({
    "class_declaration",
    "abstract_class_declaration",
    "class",
})

# Immediate parents that turn a literal into a named constant.
_DECLARATION_PARENTS = frozenset({
    "variable_declarator",       # const TAX_RATE = 1.15
    "enum_assignment",           # enum E { A = 5 }
    "pair",                      # { timeout: 5000 }
    "public_field_definition",   # class C { limit = 10 }
    "field_definition",
})

# Methods, including abstract and overload signatures.  Constructors and
# accessors share these node types but are not methods.
_METHOD_MEMBER_TYPES = frozenset({
    "method_definition",
    "abstract_method_signature",
    "method_signature",
})
_ACCESSOR_TOKENS = frozenset({"get", "set"})


def is_function_like(node: tree_sitter.Node) -> bool:
    """True for function declarations, methods, arrows and function expressions.

    Constructors and ``get``/``set`` accessors are not function-like, and
    neither are interface method signatures.
    """
    if not node.is_named:
        return False
    return node.type in _FUNCTION_TYPES or is_method(node)


def is_class_like(node: tree_sitter.Node) -> bool:
    """True for class declarations and class expressions."""
    return node.is_named and node.type in _CLASS_TYPES


def is_numeric_literal(node: tree_sitter.Node) -> bool:
    """True for number literals; BigInt literals (``10n``) are excluded."""
    if not (node.is_named and node.type == "number"):
        return False
    return not node_text(node).endswith("n")


def is_any_keyword(node: tree_sitter.Node) -> bool:
    """True for an explicit ``any`` type annotation."""
    return node.is_named and node.type == "predefined_type" and node_text(node) == "any"


def is_non_null_assertion(node: tree_sitter.Node) -> bool:
    return node.is_named and node.type == "non_null_expression"


def is_declaration_context(parent: tree_sitter.Node | None) -> bool:
    """True when *parent* makes its literal child a named constant."""
    return parent is not None and parent.type in _DECLARATION_PARENTS


# ── measurements ────────────────────────────────────────────────────


def node_text(node: tree_sitter.Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def parameter_count(node: tree_sitter.Node) -> int:
    """Number of declared parameters of a function-like node.

    An arrow function with a single bare parameter (``x => x``) has no
    parameter list, only a ``parameter`` field.
    """
    params = node.child_by_field_name("parameters")
    if params is not None:
        return sum(1 for child in params.named_children if child.type != "comment")
    if node.child_by_field_name("parameter") is not None:
        return 1
    return 0


def is_method(node: tree_sitter.Node) -> bool:
    """True for a class or object method, an abstract method or a class overload.

    A ``method_signature`` outside a class body belongs to an interface or
    type literal and is not a method.
    """
    if node.type not in _METHOD_MEMBER_TYPES:
        return False
    in_class = node.parent is not None and node.parent.type == "class_body"
    if node.type == "method_signature" and not in_class:
        return False
    name = node.child_by_field_name("name")
    if in_class and name is not None and node_text(name) == "constructor":
        return False
    return not any(
        not child.is_named and child.type in _ACCESSOR_TOKENS
        for child in node.children
    )


def method_count(node: tree_sitter.Node) -> int:
    """Number of methods declared directly in a class body."""
    body = node.child_by_field_name("body")
    if body is None:
        return 0
    return sum(1 for member in body.named_children if is_method(member))


def line_span(node: tree_sitter.Node) -> int:
    """End line minus start line of *node* itself."""
    return node.end_point[0] - node.start_point[0]


def numeric_value(node: tree_sitter.Node) -> float:
    """Numeric value of a number literal, as JavaScript's ``Number()`` reads it.

    Raises ``ValueError`` on text that is not a number literal.
    """
    text = node_text(node).replace("_", "")
    lowered = text.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        return float(int(text, 0))
    if len(text) > 1 and text[0] == "0" and text.isdigit():
        # Legacy octal (017) unless a digit rules it out (089).
        return float(int(text, 8) if set(text) <= set("01234567") else int(text, 10))
    return float(text)
