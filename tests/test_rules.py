"""
Rule Set Tests
==============
Unit tests for each compiled-in rule, run through the public ``analyze``.

Covers:
  - any-type: one finding per ``any`` occurrence
  - long-param-list: strictly more than 3 parameters
  - magic-number: exemptions by value and by declaration context
  - god-class: strictly more than 20 methods or 300 lines
  - callback-hell: strictly more than 4 enclosing functions
  - non-null-assertion: one finding per ``!``
"""

from __future__ import annotations

import textwrap

import pytest

from smell_audit.api import analyze
from smell_audit.model import Severity


def ts(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


def ids(findings) -> list[str]:
    return [f.id for f in findings]


def of(findings, rule_id: str):
    return [f for f in findings if f.id == rule_id]


# ============================================================================
# any-type
# ============================================================================

class TestAnyType:

    def test_parameter_and_return_type_are_two_findings(self):
        findings = analyze("function process(data: any): any {\n    return data;\n}\n")
        hits = of(findings, "any-type")
        assert len(hits) == 2
        assert [f.line for f in hits] == [1, 1]

    def test_fields(self):
        (finding,) = analyze("let x: any;")
        assert finding.id == "any-type"
        assert finding.name == "Any Type Abuse"
        assert finding.description == 'Usage of "any" disables type checking.'
        assert finding.message == 'Avoid using "any". It bypasses the type system.'
        assert finding.severity == Severity.HIGH

    def test_any_inside_generic_and_array_types(self):
        findings = analyze("let xs: Array<any> = []; let ys: any[] = [];")
        assert ids(findings) == ["any-type", "any-type"]

    def test_unknown_is_not_flagged(self):
        assert analyze("let x: unknown;") == []


# ============================================================================
# long-param-list
# ============================================================================

class TestLongParamList:

    def test_three_parameters_is_fine(self):
        assert analyze("function f(a, b, c) {}") == []

    def test_four_parameters_is_one_finding(self):
        findings = analyze("function f(a, b, c, d) {}")
        assert ids(findings) == ["long-param-list"]
        assert findings[0].description == "Function has 4 parameters."
        assert findings[0].severity == Severity.MEDIUM

    def test_message_is_fixed_regardless_of_count(self):
        four = analyze("function f(a, b, c, d) {}")[0]
        nine = analyze("function f(a, b, c, d, e, f, g, h, i) {}")[0]
        assert four.message == nine.message == "Consider refactoring to use a parameter object."
        assert four.severity == nine.severity == Severity.MEDIUM
        assert nine.description == "Function has 9 parameters."

    @pytest.mark.parametrize(
        "source",
        [
            "const f = (a, b, c, d) => a;",
            "const f = function (a, b, c, d) {};",
            "class C { m(a, b, c, d) {} }",
            "const o = { m(a, b, c, d) {} };",
            "declare function f(a: number, b: number, c: number, d: number): void;",
        ],
    )
    def test_every_function_shape(self, source):
        assert ids(analyze(source)) == ["long-param-list"]

    def test_typed_and_optional_parameters_count(self):
        findings = analyze("function f(a: string, b?: number, c = 2, ...rest: number[]) {}")
        assert of(findings, "long-param-list")[0].description == "Function has 4 parameters."

    def test_constructor_is_not_a_function(self):
        source = "class Svc {\n  constructor(a: A, b: B, c: C, d: D) {}\n}\n"
        assert analyze(source) == []

    def test_accessors_are_not_functions(self):
        source = ts("""
            class Box {
                get size() { return this.n; }
                set size(v: number) { this.n = v; }
            }
        """)
        assert analyze(source) == []

    def test_abstract_and_overload_signatures_are_reported(self):
        source = ts("""
            abstract class Shape {
                abstract m(a, b, c, d): void;
                n(a, b, c, d): void;
                n(a, b, c, d) {}
            }
        """)
        findings = analyze(source)
        assert [(f.id, f.line) for f in findings] == [
            ("long-param-list", 2),
            ("long-param-list", 3),
            ("long-param-list", 4),
        ]

    def test_interface_method_signature_is_not_reported(self):
        assert analyze("interface Port { send(a, b, c, d): void; }") == []

    def test_line_is_function_start(self):
        source = ts("""
            const x = 0;

            function wide(
                a: string,
                b: string,
                c: string,
                d: string,
            ) {}
        """)
        assert [f.line for f in analyze(source)] == [3]


# ============================================================================
# magic-number
# ============================================================================

class TestMagicNumber:

    def test_literal_in_expression_is_flagged(self):
        findings = analyze("const total = price * 1.15;")
        assert ids(findings) == ["magic-number"]
        assert findings[0].description == 'Unnamed numeric literal "1.15" found.'
        assert findings[0].severity == Severity.LOW

    def test_named_constant_is_exempt(self):
        assert analyze("const TAX_RATE = 1.15;") == []

    @pytest.mark.parametrize(
        "source",
        [
            "enum Status { Active = 5, Inactive = 9 }",
            "const cfg = { timeout: 5000, retries: 3 };",
            "class C { limit = 10; private static max = 99; }",
            "let width = 640, height = 480;",
        ],
    )
    def test_declaration_contexts_are_exempt(self, source):
        assert analyze(source) == []

    @pytest.mark.parametrize(
        "source",
        [
            "x = 0;", "x = 1;", "x = -1;", "f(0, 1, -1);",
            "if (a > 0) { b = a * 1; }", "x = 0.0;", "x = 1.0;",
        ],
    )
    def test_zero_one_minus_one_never_flagged(self, source):
        assert analyze(source) == []

    def test_negative_literal_reports_its_magnitude(self):
        findings = analyze("offset(-5);")
        assert findings[0].description == 'Unnamed numeric literal "5" found.'

    def test_each_occurrence_is_a_finding(self):
        findings = analyze("area = 3.14 * r * r + 2 * 3.14;")
        assert [f.description for f in findings] == [
            'Unnamed numeric literal "3.14" found.',
            'Unnamed numeric literal "2" found.',
            'Unnamed numeric literal "3.14" found.',
        ]

    def test_computed_constant_is_not_a_declaration(self):
        findings = analyze("const MS_PER_DAY = 24 * 60 * 60 * 1000;")
        assert len(of(findings, "magic-number")) == 4

    def test_default_parameter_value_is_flagged(self):
        assert ids(analyze("function f(x = 5) {}")) == ["magic-number"]

    @pytest.mark.parametrize(
        "literal, rendered",
        [
            ("0x10", "16"),
            ("1_000", "1000"),
            ("2.50", "2.5"),
            ("1e3", "1000"),
            ("0.5", "0.5"),
            ("0.000001", "0.000001"),
            ("0.0000015", "0.0000015"),
            ("1e-7", "1e-7"),
            ("2.5e-8", "2.5e-8"),
            ("123456789012345680000", "123456789012345680000"),
            ("1e16", "10000000000000000"),
            ("1e21", "1e+21"),
            ("1.5e300", "1.5e+300"),
        ],
    )
    def test_value_rendered_like_javascript(self, literal, rendered):
        (finding,) = analyze(f"f({literal});")
        assert finding.description == f'Unnamed numeric literal "{rendered}" found.'

    def test_bigint_is_not_a_numeric_literal(self):
        assert analyze("f(10n);") == []


# ============================================================================
# god-class
# ============================================================================

def _class_with_methods(n: int) -> str:
    body = "\n".join(f"    method{i}() {{}}" for i in range(1, n + 1))
    return f"class Big {{\n{body}\n}}\n"


def _class_spanning(span: int) -> str:
    lines = ["class Tall {", "    run() {}"] + [""] * (span - 2) + ["}"]
    return "\n".join(lines) + "\n"


class TestGodClass:

    def test_twenty_methods_is_fine(self):
        assert analyze(_class_with_methods(20)) == []

    def test_twenty_one_methods_is_one_finding(self):
        findings = analyze(_class_with_methods(21))
        assert ids(findings) == ["god-class"]
        assert findings[0].line == 1
        assert findings[0].description == "Class has 21 methods and 22 lines."
        assert findings[0].severity == Severity.HIGH
        assert findings[0].message == (
            "This class does too much. Verify Single Responsibility Principle."
        )

    def test_span_of_300_lines_is_fine(self):
        assert analyze(_class_spanning(300)) == []

    def test_span_of_301_lines_is_one_finding(self):
        findings = analyze(_class_spanning(301))
        assert ids(findings) == ["god-class"]
        assert findings[0].description == "Class has 1 methods and 301 lines."

    def test_constructor_and_accessors_do_not_count(self):
        members = "\n".join(f"    m{i}() {{}}" for i in range(20))
        source = (
            "class Holder {\n"
            "    constructor() {}\n"
            "    get value() { return 1; }\n"
            "    set value(v) {}\n"
            f"{members}\n"
            "}\n"
        )
        assert of(analyze(source), "god-class") == []

    def test_class_expression(self):
        source = "const Big = " + _class_with_methods(21)
        assert ids(analyze(source)) == ["god-class"]

    def test_nested_class_is_measured_on_its_own(self):
        inner = _class_with_methods(21).replace("class Big", "class Inner")
        source = "function wrap() {\n" + inner + "return Inner;\n}\n"
        findings = analyze(source)
        assert ids(findings) == ["god-class"]
        assert findings[0].line == 2


# ============================================================================
# callback-hell
# ============================================================================

def _nested_callbacks(levels: int) -> str:
    """``function outer`` plus *levels* nested arrow callbacks."""
    lines = ["function outer() {"]
    for depth in range(levels):
        lines.append("    " * (depth + 1) + f"step{depth}(() => {{")
    lines.append("    " * (levels + 1) + "done();")
    for depth in reversed(range(levels)):
        lines.append("    " * (depth + 1) + "});")
    lines.append("}")
    return "\n".join(lines) + "\n"


class TestCallbackHell:

    def test_four_enclosing_functions_is_fine(self):
        assert analyze(_nested_callbacks(4)) == []

    def test_five_enclosing_functions_is_one_finding_on_innermost(self):
        findings = analyze(_nested_callbacks(5))
        assert ids(findings) == ["callback-hell"]
        assert findings[0].line == 6
        assert findings[0].description == "Function nesting depth is 5."
        assert findings[0].severity == Severity.HIGH

    def test_every_function_deeper_than_four_is_reported(self):
        findings = analyze(_nested_callbacks(7))
        assert [f.description for f in findings] == [
            "Function nesting depth is 5.",
            "Function nesting depth is 6.",
            "Function nesting depth is 7.",
        ]

    def test_methods_count_as_enclosing_functions(self):
        source = ts("""
            class Pipeline {
                run() {
                    a(function () {
                        b(() => {
                            c(() => {
                                d(() => {
                                    e(() => {
                                        go();
                                    });
                                });
                            });
                        });
                    });
                }
            }
        """)
        findings = analyze(source)
        assert ids(findings) == ["callback-hell"]
        assert findings[0].line == 7

    def test_constructor_does_not_add_depth(self):
        source = ts("""
            class Boot {
                constructor() {
                    a(() => {
                        b(() => {
                            c(() => {
                                d(() => {
                                    e(() => {
                                        go();
                                    });
                                });
                            });
                        });
                    });
                }
            }
        """)
        assert analyze(source) == []

    def test_sibling_functions_do_not_add_depth(self):
        source = "\n".join(f"const f{i} = () => () => 0;" for i in range(10))
        assert analyze(source) == []


# ============================================================================
# non-null-assertion
# ============================================================================

class TestNonNullAssertion:

    def test_single_assertion(self):
        findings = analyze("const name = user!.name;")
        assert ids(findings) == ["non-null-assertion"]
        assert findings[0].description == 'Usage of "!" operator.'
        assert findings[0].message == (
            "Avoid non-null assertions. Use optional chaining or guard clauses."
        )
        assert findings[0].severity == Severity.MEDIUM

    def test_chain_of_three_is_three_findings(self):
        findings = analyze("const v = a!.b!.c!;")
        assert ids(findings) == ["non-null-assertion"] * 3
        assert {f.line for f in findings} == {1}

    def test_logical_not_is_not_flagged(self):
        assert analyze("if (!ready) { stop(); }") == []

    def test_optional_chaining_is_not_flagged(self):
        assert analyze("const v = a?.b?.c;") == []


# ============================================================================
# several rules on one node
# ============================================================================

class TestIndependentRules:

    def test_same_node_fires_in_rule_order(self):
        """A deep function with many params yields both findings, params first."""
        source = _nested_callbacks(5).replace("step4(() => {", "step4((a, b, c, d) => {")
        findings = analyze(source)
        assert ids(findings) == ["long-param-list", "callback-hell"]
        assert findings[0].line == findings[1].line == 6

    def test_god_class_with_magic_numbers_reports_both(self):
        body = "\n".join(f"    method{i}() {{ return {i + 1}; }}" for i in range(1, 22))
        source = f"class Big {{\n{body}\n}}\n"
        findings = analyze(source)
        assert findings[0].id == "god-class"
        assert len(of(findings, "magic-number")) == 21
