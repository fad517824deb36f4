"""Tests for per-function metric collection."""

import pytest

from js_complexity.analysis import FunctionMetrics


class TestReferenceScenario:
    """function f(a,b){ if (a && b) { return 1; } return 0; }"""

    SOURCE = "function f(a,b){ if (a && b) { return 1; } return 0; }"

    def test_function_record(self, analyze):
        result = analyze(self.SOURCE)
        assert result.functions["f"] == FunctionMetrics(
            name="f",
            start_line=1,
            parameter_count=2,
            cyclomatic_complexity=2,
            max_nesting_depth=0,
            max_conditions=1,
            returns=2,
            max_message_chains=0,
        )

    def test_file_conditions(self, analyze):
        assert analyze(self.SOURCE).file.all_conditions == 1


class TestCyclomaticComplexity:
    def test_function_without_decisions(self, analyze):
        fn = analyze("function plain(a) { const b = a + 1; return b; }").functions["plain"]
        assert fn.cyclomatic_complexity == 1
        assert fn.max_nesting_depth == 0

    def test_each_decision_adds_one(self, analyze):
        source = """
        function loops(xs, o) {
          for (let i = 0; i < xs.length; i++) {}
          for (const k in o) {}
          for (const v of xs) {}
          while (xs.length) { xs.pop(); }
          do { o = null; } while (o);
          if (o) {} else if (xs) {} else {}
        }
        """
        assert analyze(source).functions["loops"].cyclomatic_complexity == 8

    def test_ternary_switch_and_logical_do_not_count(self, analyze):
        source = """
        function other(a, b) {
          const c = a ? 1 : 2;
          switch (b) { case 1: return a && b; default: return c; }
        }
        """
        assert analyze(source).functions["other"].cyclomatic_complexity == 1

    def test_nested_function_decisions_count_for_outer(self, analyze):
        source = """
        function outer(a) {
          if (a) {}
          function inner(b) {
            if (b) {}
            while (b) { b--; }
          }
          return inner;
        }
        """
        functions = analyze(source).functions
        assert functions["outer"].cyclomatic_complexity == 4
        assert functions["inner"].cyclomatic_complexity == 3

    def test_arrow_function_decisions_count_for_enclosing_declaration(self, analyze):
        source = """
        function host(xs) {
          return xs.map((x) => { if (x) { return 1; } return 0; });
        }
        """
        fn = analyze(source).functions["host"]
        assert fn.cyclomatic_complexity == 2
        assert fn.returns == 3


class TestNestingDepth:
    def test_decisions_under_one_decision(self, analyze):
        source = """
        function nest(a, b) {
          if (a) {
            for (let i = 0; i < b; i++) {
              while (b) { b--; }
            }
          }
          if (b) {}
        }
        """
        fn = analyze(source).functions["nest"]
        assert fn.cyclomatic_complexity == 5
        assert fn.max_nesting_depth == 2

    def test_else_if_is_nested_in_its_if(self, analyze):
        source = "function e(a, b) { if (a) {} else if (b) {} }"
        fn = analyze(source).functions["e"]
        assert fn.cyclomatic_complexity == 3
        assert fn.max_nesting_depth == 1

    def test_siblings_do_not_accumulate(self, analyze):
        source = "function s(a) { if (a) {} if (a) {} if (a) {} }"
        assert analyze(source).functions["s"].max_nesting_depth == 0

    def test_largest_subtree_wins(self, analyze):
        source = """
        function w(a) {
          while (a) { if (a) {} if (a) {} if (a) {} }
          if (a) { if (a) { if (a) {} } }
        }
        """
        # the while holds three decisions, the outer if only two
        assert analyze(source).functions["w"].max_nesting_depth == 3


class TestMaxConditions:
    def test_no_if_means_zero(self, analyze):
        source = "function loop(a, b) { while (a && b) { a--; } }"
        assert analyze(source).functions["loop"].max_conditions == 0

    def test_plain_test_has_no_connectives(self, analyze):
        assert analyze("function one(a) { if (a) {} }").functions["one"].max_conditions == 0

    @pytest.mark.parametrize(
        "test, expected",
        [
            ("a && b", 1),
            ("a && b || c", 2),
            ("(a || b) && (c || d)", 3),
            ("a ?? b", 1),
            ("a > b", 0),
        ],
    )
    def test_logical_connectives(self, analyze, test, expected):
        source = f"function c(a, b, c, d) {{ if ({test}) {{}} }}"
        assert analyze(source).functions["c"].max_conditions == expected

    def test_connectives_in_nested_if_count_for_outer_if(self, analyze):
        source = """
        function d(a, b, c) {
          if (a) {
            if (b && c) {}
            if (b || c) {}
          }
        }
        """
        assert analyze(source).functions["d"].max_conditions == 2


class TestReturns:
    def test_counts_every_return(self, analyze):
        source = """
        function r(a) {
          if (a) { return 1; }
          for (;;) { return 2; }
          return;
        }
        """
        assert analyze(source).functions["r"].returns == 3

    def test_nested_function_returns_count_for_both(self, analyze):
        source = """
        function outer() {
          function inner() { return 1; }
          return inner();
        }
        """
        functions = analyze(source).functions
        assert functions["outer"].returns == 2
        assert functions["inner"].returns == 1


class TestMessageChains:
    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("a", 0),
            ("a.b", 1),
            ("a.b.c.d", 3),
            ("a[0].b", 2),
            ("this.x.y", 2),
            ("a.b().c", 2),
        ],
    )
    def test_chain_length(self, analyze, expression, expected):
        source = f"function m(a) {{ return {expression}; }}"
        assert analyze(source).functions["m"].max_message_chains == expected

    def test_longest_chain_wins(self, analyze):
        source = "function m(a) { a.b; a.b.c.d.e; a.b.c; }"
        assert analyze(source).functions["m"].max_message_chains == 4

    def test_parameter_defaults_are_not_part_of_the_body(self, analyze):
        source = "function p(x = cfg.defaults.value.x) { return x.y; }"
        assert analyze(source).functions["p"].max_message_chains == 1


class TestIdentity:
    def test_parameter_count(self, analyze):
        source = "function f(a, b = 1, { c }, [d], ...rest) {}"
        assert analyze(source).functions["f"].parameter_count == 5

    def test_comment_in_parameter_list_is_not_a_parameter(self, analyze):
        assert analyze("function f(/* none */) {}").functions["f"].parameter_count == 0

    def test_start_line(self, analyze):
        source = "\n\n\nfunction later() {}\n"
        assert analyze(source).functions["later"].start_line == 4

    def test_generator_declaration_is_collected(self, analyze):
        fn = analyze("function* gen(n) { while (n) { yield n--; } }").functions["gen"]
        assert fn.cyclomatic_complexity == 2

    def test_async_declaration_is_collected(self, analyze):
        fn = analyze("async function load(u) { if (u) { return await get(u); } }").functions["load"]
        assert fn.returns == 1

    def test_anonymous_default_export_gets_line_label(self, analyze):
        source = "\nexport default function () { if (x) {} }\n"
        functions = analyze(source).functions
        assert list(functions) == ["anon function @2"]
        assert functions["anon function @2"].name == "anon function @2"
        assert functions["anon function @2"].cyclomatic_complexity == 2

    def test_named_default_export_keeps_its_name(self, analyze):
        assert list(analyze("export default function main() {}").functions) == ["main"]


class TestDeclarationScope:
    @pytest.mark.parametrize(
        "source",
        [
            "var g = function (a) { if (a) { return 1; } };",
            "var g = function named(a) { return a; };",
            "const h = (x) => { if (x) { return x; } };",
            "class C { m(a) { if (a) { return a; } } }",
            "const o = { m(a) { return a; }, n: function () {} };",
        ],
    )
    def test_only_function_declarations_are_collected(self, analyze, source):
        assert analyze(source).functions == {}

    def test_same_name_keeps_the_later_declaration(self, analyze):
        source = """function foo() { return 1; }
function bar() {}
function foo(a) { if (a) { return a; } return 0; }
"""
        functions = analyze(source).functions
        assert list(functions) == ["foo", "bar"]
        foo = functions["foo"]
        assert foo.start_line == 3
        assert foo.parameter_count == 1
        assert foo.cyclomatic_complexity == 2


class TestTypeScript:
    def test_typed_function(self, analyze):
        source = """
function add(a: number, b: string): string {
  if (a > 0 && b) {
    return b;
  }
  return "";
}
"""
        result = analyze(source, path="sample.ts")
        assert result.language == "typescript"
        fn = result.functions["add"]
        assert fn.parameter_count == 2
        assert fn.cyclomatic_complexity == 2
        assert fn.max_conditions == 1
        assert fn.returns == 2
        assert result.file.strings == 1

    def test_tsx(self, analyze):
        source = 'function View(p: Props) { return <div className="v">{p.a.b}</div>; }'
        result = analyze(source, path="view.tsx")
        assert result.language == "tsx"
        assert result.functions["View"].max_message_chains == 2
