"""Tests for recursive template expansion."""

import re

import pytest

from expandkit.release import ReleaseNotes
from expandkit.templates import (
    MAX_EXPANSION_DEPTH,
    TemplateExpander,
    expand,
    expand_with,
)
from expandkit.templates.expander import fix_indent


def no_values(name):
    return None


class TestExpandBasics:
    """Test single level expansion."""

    def test_template_without_macros_is_returned_unchanged(self):
        """Test that a template without macros is returned as the same object."""
        template = "nothing to see {here either} {} {a-b}"
        assert expand_with(template, lambda name: "X") is template

    def test_unresolved_macros_are_kept_verbatim(self):
        """Test that unknown names are copied including braces."""
        template = "a {x} b {y.z} c"
        assert expand_with(template, no_values) == template

    def test_single_line_substitution(self):
        assert expand("x: {v}", {"v": "VALUE"}) == "x: VALUE"

    def test_multiple_macros(self):
        values = {"first": "1", "second": "2"}
        assert expand("{first}-{second}-{first}", values) == "1-2-1"

    def test_mixed_resolved_and_unresolved(self):
        assert expand("{known} {unknown}", {"known": "yes"}) == "yes {unknown}"

    def test_dotted_and_underscored_names(self):
        values = {"build.version": "1.2.3", "target_name": "app"}
        assert expand("{target_name}@{build.version}", values) == "app@1.2.3"

    def test_non_string_values_use_text_form(self):
        assert expand("{count} items, ok={ok}", {"count": 3, "ok": True}) == "3 items, ok=True"

    def test_braces_that_are_not_macros(self):
        """Test that malformed braces are left alone without errors."""
        template = "{ not } {{double}} {a b} {unclosed"
        assert expand(template, {"double": "D"}) == "{ not } {D} {a b} {unclosed"

    def test_resolver_is_called_per_occurrence(self):
        """Test that values are not cached between occurrences."""
        calls = []

        def resolver(name):
            calls.append(name)
            return str(len(calls))

        assert expand_with("{a}{a}{a}", resolver) == "123"
        assert calls == ["a", "a", "a"]

    def test_input_is_not_modified(self):
        values = {"a": "{b}", "b": "B"}
        template = "{a}"
        expand(template, values)
        assert template == "{a}"
        assert values == {"a": "{b}", "b": "B"}


class TestRecursiveExpansion:
    """Test expansion of macros inside values."""

    def test_values_are_expanded(self):
        values = {"greeting": "Hello, {name}!", "name": "World"}
        assert expand("{greeting}", values) == "Hello, World!"

    def test_deep_chain(self):
        values = {"a": "[{b}]", "b": "[{c}]", "c": "x"}
        assert expand("{a}", values) == "[[x]]"

    def test_unresolved_inside_value_is_kept(self):
        values = {"a": "<{missing}>"}
        assert expand("{a}", values) == "<{missing}>"

    def test_self_reference_terminates(self):
        """Test that a macro resolving to itself does not loop forever."""
        assert expand("{a}", {"a": "{a}"}) == "{a}"

    def test_mutual_recursion_terminates(self):
        values = {"a": "{b}", "b": "{a}"}
        assert expand("{a}", values) == "{a}"

    def test_depth_is_bounded(self):
        """Test that the resolver is asked once per level until the depth limit."""
        calls = []

        def resolver(name):
            calls.append(name)
            return "{a}"

        expand_with("{a}", resolver)
        assert len(calls) == MAX_EXPANSION_DEPTH

    def test_growing_self_reference_terminates(self):
        """Test that a value which grows at each level still terminates."""
        result = expand("{a}", {"a": "x{a}"})
        assert result == "x" * MAX_EXPANSION_DEPTH + "{a}"

    def test_nesting_below_limit_is_fully_expanded(self):
        values = {f"n{i}": f"{{n{i + 1}}}" for i in range(1500)}
        values["n1500"] = "end"
        # 1500 levels exceed the limit, expansion stops with a macro left
        result = expand("{n0}", values)
        assert result == f"{{n{MAX_EXPANSION_DEPTH}}}"

        values = {f"n{i}": f"{{n{i + 1}}}" for i in range(100)}
        values["n100"] = "end"
        assert expand("{n0}", values) == "end"


class TestReindentation:
    """Test indentation of multi-line values."""

    def test_leading_macro_indents_continuation_lines(self):
        assert expand("  {v}", {"v": "line1\nline2"}) == "  line1\n  line2"

    def test_leading_macro_on_later_line(self):
        template = "items:\n    {list}\ndone"
        values = {"list": "- a\n- b\n- c"}
        assert expand(template, values) == "items:\n    - a\n    - b\n    - c\ndone"

    def test_tab_indent_is_copied(self):
        assert expand("\t{v}", {"v": "a\nb"}) == "\ta\n\tb"

    def test_inline_macro_uses_head_indent(self):
        """Test that an inline macro gets the leading whitespace of its line."""
        template = "  key: {v}"
        assert expand(template, {"v": "a\nb"}) == "  key: a\n  b"

    def test_inline_macro_at_column_zero(self):
        """Test that continuation lines stay unindented without leading whitespace."""
        assert expand("key: {v}", {"v": "a\nb"}) == "key: a\nb"

    def test_surrounding_blank_lines_are_trimmed(self):
        values = {"v": "\n\n  body\n\n"}
        assert expand("[{v}]", values) == "[  body]"

    def test_multi_line_value_blank_lines_are_trimmed(self):
        values = {"v": "\nfirst\nsecond\n"}
        assert expand("  {v}", values) == "  first\n  second"

    def test_nested_multi_line_values(self):
        """Test that nested blocks accumulate indentation."""
        values = {
            "outer": "begin\n  {inner}\nend",
            "inner": "x\ny",
        }
        expected = "    begin\n      x\n      y\n    end"
        assert expand("    {outer}", values) == expected

    def test_crlf_value(self):
        assert expand("  {v}", {"v": "a\r\nb"}) == "  a\r\n  b"

    def test_fix_indent_single_line(self):
        assert fix_indent("\n value \n", "  {v}", 2) == " value"


class TestSources:
    """Test the data sources accepted by expand."""

    def test_object_source(self):
        class Build:
            def __init__(self):
                self.version = "2.0"
                self.name = "tool"

        assert expand("{name} {version}", Build()) == "tool 2.0"

    def test_object_source_ignore_case(self):
        class Build:
            def __init__(self):
                self.Version = "2.0"

        assert expand("{version}", Build()) == "{version}"
        assert expand("{version}", Build(), ignore_case=True) == "2.0"

    def test_pydantic_source_keeps_model_members_verbatim(self):
        notes = ReleaseNotes.from_text("## 1.2.3\n* x")
        template = "{model_fields}|{model_config}|{changes}"
        assert expand(template, notes) == "{model_fields}|{model_config}|['x']"

    def test_regex_match_source(self):
        match = re.match(r"(?P<major>\d+)\.(?P<minor>\d+)", "3.14")
        assert expand("v{major}-{minor}", match) == "v3-14"

    def test_callable_source(self):
        assert expand("{a}", lambda name: name.upper()) == "A"


class TestTemplateExpander:
    """Test the reusable expander."""

    def test_expand(self):
        expander = TemplateExpander({"a": "1"})
        assert expander.expand("{a}{b}") == "1{b}"

    def test_report_lists_resolved_and_unresolved(self):
        expander = TemplateExpander({"a": "{b} {c}", "b": "B"})
        result = expander.expand_with_report("{a} {d}")

        assert result.expanded == "B {c} {d}"
        assert result.resolved == ["a", "b"]
        assert result.unresolved == ["c", "d"]
        assert result.complete is False

    def test_report_complete(self):
        result = TemplateExpander({"a": "x"}).expand_with_report("{a}")
        assert result.complete is True
        assert result.original == "{a}"
