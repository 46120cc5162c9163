"""Tests for scanning/profile.py - the single-pass branching profile."""

import pytest

from branchmap.scanning.languages import Language
from branchmap.scanning.profile import BranchingProfile, ProfileBuilder, analyze_branching


def _nested_ifs(depth):
    opening = [("    " * i) + f"if c{i} {{" for i in range(depth)]
    closing = [("    " * i) + "}" for i in reversed(range(depth))]
    return "\n".join(opening + closing)


class TestEmptyAndTrivial:
    def test_empty_file(self):
        profile = analyze_branching("", Language.RUST)
        assert profile == BranchingProfile()
        assert profile.nesting_distribution == {}
        assert profile.max_nesting == 0
        assert profile.cyclomatic_complexity == 1.0

    def test_comment_only_file(self):
        content = "// if a {\n/* while b */\n# for c\n * if d\n"
        assert analyze_branching(content, Language.RUST).total_branches == 0

    def test_comments_and_strings_ignored(self):
        content = "\n".join(
            [
                'let msg = "if you see this, ignore the if keyword";',
                "// if this is a comment",
                "/* if block comment */",
                "if x { y(); }",
            ]
        )
        profile = analyze_branching(content, Language.RUST)
        assert profile.conditional_count == 1
        assert profile.total_branches == 1


class TestNesting:
    def test_ten_levels(self):
        profile = analyze_branching(_nested_ifs(10), Language.RUST)
        assert profile.nesting_distribution == {d: 1 for d in range(1, 11)}
        assert profile.max_nesting == 10
        assert sum(profile.nesting_distribution.values()) == profile.conditional_count

    def test_fifty_levels(self):
        profile = analyze_branching(_nested_ifs(50), Language.RUST)
        assert profile.max_nesting == 50
        assert profile.conditional_count == 50
        assert profile.nesting_distribution[50] == 1

    def test_loops_excluded_from_histogram(self):
        content = "for x in items {\n    if x > limit {\n    }\n}\n"
        profile = analyze_branching(content, Language.RUST)
        assert profile.loop_count == 1
        assert profile.conditional_count == 1
        assert profile.nesting_distribution == {2: 1}
        assert profile.max_nesting == 2

    def test_unbalanced_closes_do_not_go_negative(self):
        content = "}\n}\nif a {\n}\n"
        profile = analyze_branching(content, Language.RUST)
        assert profile.nesting_distribution == {1: 1}

    def test_unclosed_brace_completes(self):
        profile = analyze_branching("if a {\n    if b {\n", Language.RUST)
        assert profile.max_nesting == 2
        assert profile.conditional_count == 2

    def test_python_braces_by_default(self):
        """Python blocks open no brace, so indentation alone never nests."""
        profile = analyze_branching("if a:\n    if b:\n        pass\n", Language.PYTHON)
        assert profile.conditional_count == 2
        assert profile.max_nesting == 0
        assert profile.nesting_distribution == {}

    def test_python_dict_literal_nests(self):
        profile = analyze_branching("config = {\n    'a': 1,\n}\n", Language.PYTHON)
        assert profile.max_nesting == 1

    def test_python_indentation_opt_in(self):
        content = "\n".join(
            [
                "def f(x):",
                "    if x > 10:",
                "        for i in range(x):",
                "            if i % 3 == 0:",
                "                pass",
                "    elif x < 0:",
                "        return -1",
                "    return x",
            ]
        )
        profile = analyze_branching(content, Language.PYTHON, indent_nesting=True)
        assert profile.conditional_count == 3
        assert profile.loop_count == 1
        assert profile.nesting_distribution == {2: 2, 4: 1}
        assert profile.max_nesting == 4
        assert profile.hardcoded_values_count == 1

    def test_catch_opening_scope_recorded(self):
        """A catch block is a conditional branch and enters the histogram."""
        content = "try {\n    load();\n} catch (e) {\n    retry();\n}\n"
        profile = analyze_branching(content, Language.JS_TS)
        assert profile.conditional_count == 1
        assert profile.nesting_distribution == {2: 1}


class TestCounting:
    def test_magic_numbers(self):
        assert analyze_branching("if count > 42 { return; }", Language.RUST).hardcoded_values_count == 1
        assert analyze_branching("if count == 1024 { optimize(); }", Language.RUST).hardcoded_values_count == 0

    def test_purity(self):
        impure = analyze_branching('if fs::read_to_string("x").is_ok() { load(); }', Language.RUST)
        assert impure.non_pure_branches == 1
        assert impure.pure_branches == 0

        pure = analyze_branching("if items.len() > 0 { process(); }", Language.RUST)
        assert pure.pure_branches == 1

    def test_future_dated_branch(self):
        profile = analyze_branching('if release_date > "2025-06-01" { enable(); }', Language.RUST)
        assert profile.future_logic_count == 1
        assert profile.hardcoded_dates_count >= 1

    def test_future_needs_conditional(self):
        profile = analyze_branching("for year in 2025..2027 {\n}\n", Language.RUST)
        assert profile.total_branches == 1
        assert profile.future_logic_count == 0

    def test_cognitive_weighting(self):
        content = "if a {\n    if b {\n    }\n}\n"
        profile = analyze_branching(content, Language.RUST)
        # 1.0 * 1.5 at depth 1, 1.0 * 2.0 at depth 2
        assert profile.cognitive_complexity == pytest.approx(3.5)
        assert profile.cyclomatic_complexity == pytest.approx(3.0)

    def test_loop_weight(self):
        profile = analyze_branching("while x {\n}\n", Language.RUST)
        assert profile.cognitive_complexity == pytest.approx(2.25)

    def test_match_arms_compound(self):
        content = "match value {\n    Some(x) => handle(x),\n    None => {}\n}\n"
        profile = analyze_branching(content, Language.RUST)
        assert profile.switch_count == 1
        assert profile.conditional_count == 2
        assert profile.total_branches == 3
        assert profile.cyclomatic_complexity == pytest.approx(4.0)

    def test_case_arms(self):
        content = "\n".join(
            [
                "switch (kind) {",
                '  case "a":',
                "    return 1;",
                '  case "b":',
                "    return 2;",
                "}",
            ]
        )
        profile = analyze_branching(content, "javascript")
        assert profile.switch_count == 1
        assert profile.conditional_count == 0
        assert profile.total_branches == 3
        assert profile.cyclomatic_complexity == pytest.approx(4.0)

    def test_logical_operators(self):
        assert analyze_branching("if a && b || c {\n}\n", Language.RUST).logical_operators == 2


class TestComprehensive:
    def test_rust_sample(self, rust_sample):
        profile = analyze_branching(rust_sample, Language.RUST)

        assert profile.conditional_count == 6
        assert profile.loop_count == 1
        assert profile.total_branches == 7
        assert profile.max_nesting == 4
        assert profile.nesting_distribution == {2: 2, 3: 1, 4: 3}
        assert sum(profile.nesting_distribution.values()) == profile.conditional_count

        assert profile.hardcoded_dates_count == 1
        assert profile.hardcoded_values_count == 2
        assert profile.non_pure_branches == 1
        assert profile.pure_branches == 6
        assert profile.future_logic_count == 1
        assert profile.past_logic_count == 1
        assert profile.logical_operators == 1

        assert profile.cyclomatic_complexity == pytest.approx(8.0)
        assert profile.cognitive_complexity == pytest.approx(18.0)

    def test_mostly_pure(self, rust_sample):
        profile = analyze_branching(rust_sample, Language.RUST)
        assert profile.pure_ratio >= 0.75

    def test_partition_invariant_across_languages(self, rust_sample):
        for language in Language:
            profile = analyze_branching(rust_sample, language)
            assert profile.pure_branches + profile.non_pure_branches == profile.total_branches

    def test_mixed_branch_types(self):
        content = "\n".join(
            [
                "function run(items) {",
                "  for (const item of items) {",
                "    switch (item.kind) {",
                "      case 'a':",
                "        if (item.ready && item.valid) {",
                "          go(item);",
                "        }",
                "        break;",
                "    }",
                "  }",
                "}",
            ]
        )
        profile = analyze_branching(content, Language.JS_TS)
        assert profile.max_nesting >= 3
        assert profile.loop_count == 1
        assert profile.switch_count == 1
        assert profile.conditional_count == 1
        assert profile.logical_operators == 1


class TestBlockComments:
    CONTENT = "/*\nif fake {\n*/\nif real {\n}\n"

    def test_stateless_by_default(self):
        assert analyze_branching(self.CONTENT, Language.RUST).conditional_count == 2

    def test_tracked_when_enabled(self):
        profile = analyze_branching(self.CONTENT, Language.RUST, track_block_comments=True)
        assert profile.conditional_count == 1
        assert profile.nesting_distribution == {1: 1}

    def test_code_after_close_is_analysed(self):
        content = "/* start\nstill */ if x {\n}\n"
        profile = analyze_branching(content, Language.RUST, track_block_comments=True)
        assert profile.conditional_count == 1


class TestBuilder:
    def test_accepts_kind_name(self):
        builder = ProfileBuilder("typescript")
        assert builder.language is Language.JS_TS

    def test_extra_impure_tokens(self):
        profile = analyze_branching("if db.query() {\n}\n", Language.RUST, extra_impure_tokens=["db."])
        assert profile.non_pure_branches == 1

    def test_to_dict(self, rust_sample):
        data = analyze_branching(rust_sample, Language.RUST).to_dict()
        assert data["conditional_count"] == 6
        assert data["nesting_distribution"] == {2: 2, 3: 1, 4: 3}


@pytest.mark.slow
def test_large_file():
    block = [
        "if a > 42 {",
        "    while b {",
        "        if GLOBAL_X && c {",
        "        }",
        "    }",
        "}",
    ]
    content = "\n".join(block * 1000)
    profile = analyze_branching(content, Language.RUST)
    assert profile.conditional_count == 2000
    assert profile.loop_count == 1000
    assert profile.total_branches == 3000
    assert profile.non_pure_branches == 1000
    assert profile.nesting_distribution == {1: 1000, 3: 1000}
