"""Tests for debug_lib.formatting — printf-style formatting and humanize_ms."""

import pytest

from nsdebug.lib.debug_lib.formatting import (
    format_message,
    humanize_ms,
    inspect,
    to_number,
)


class TestFormatMessage:
    """Test format_message() directive substitution."""

    @pytest.mark.parametrize("args, expected", [
        ((), ""),
        (("",), ""),
        (([],), "[]"),
        (({},), "{}"),
        ((None,), "None"),
        ((True,), "True"),
        ((False,), "False"),
        (("test",), "test"),
        (("foo", "bar", "baz"), "foo bar baz"),
    ])
    def test_plain_values(self, args, expected):
        assert format_message(*args) == expected

    @pytest.mark.parametrize("args, expected", [
        (("%d", 42.0), "42"),
        (("%d", 42), "42"),
        (("%s", 42), "42"),
        (("%j", 42), "42"),
        (("%d", "42.0"), "42"),
        (("%d", "42"), "42"),
        (("%s", "42"), "42"),
        (("%j", "42"), '"42"'),
    ])
    def test_numbers_and_strings(self, args, expected):
        assert format_message(*args) == expected

    @pytest.mark.parametrize("args, expected", [
        (("%%s%s", "foo"), "%sfoo"),
        (("%s",), "%s"),
        (("%s", None), "None"),
        (("%s", "foo"), "foo"),
        (("%s:%s",), "%s:%s"),
        (("%s:%s", None), "None:%s"),
        (("%s:%s", "foo"), "foo:%s"),
        (("%s:%s", "foo", "bar"), "foo:bar"),
        (("%s:%s", "foo", "bar", "baz"), "foo:bar baz"),
        (("%%%s%%", "hi"), "%hi%"),
        (("%%%s%%%%", "hi"), "%hi%%"),
    ])
    def test_directives(self, args, expected):
        assert format_message(*args) == expected

    def test_json_circular(self):
        o = {}
        o["o"] = o
        assert format_message("%j", o) == "[Circular]"

    def test_json_unserializable_falls_back_to_str(self):
        assert format_message("%j", {"when": object}) == '{"when": "<class \'object\'>"}'

    def test_d_unparsable(self):
        assert format_message("%d", "abc") == "NaN"

    def test_d_none_is_zero(self):
        assert format_message("%d", None) == "0"

    def test_d_fraction(self):
        assert format_message("%d", 42.5) == "42.5"

    def test_o_single_line(self):
        value = {f"key{i}": "x" * 20 for i in range(10)}
        assert "\n" not in format_message("%o", value)

    def test_O_pretty_prints(self):
        value = {f"key{i}": "x" * 20 for i in range(10)}
        assert "\n" in format_message("%O", value)

    def test_o_simple(self):
        assert format_message("what is this, %o?", {"a": [1, 2]}) == "what is this, {'a': [1, 2]}?"

    def test_trailing_object_inspected(self):
        assert format_message("x", {"a": 1}) == "x {'a': 1}"

    def test_depth(self):
        assert format_message("%o", {"a": {"b": {"c": 1}}}, depth=1) == "{'a': {...}}"

    def test_unknown_directive_left_alone(self):
        assert format_message("%x %s", "a") == "%x a"


class TestToNumber:
    """Test to_number() coercion."""

    @pytest.mark.parametrize("value, expected", [
        (True, "1"),
        (0, "0"),
        (3.0, "3"),
        (0.25, "0.25"),
        (" 7 ", "7"),
        ("", "0"),
        ("1e3", "1000"),
        (None, "0"),
        ([1], "NaN"),
        (float("inf"), "Infinity"),
    ])
    def test_values(self, value, expected):
        assert to_number(value) == expected


class TestInspect:
    def test_single_line_by_default(self):
        assert inspect([1, 2, 3]) == "[1, 2, 3]"

    def test_keeps_insertion_order(self):
        assert inspect({"b": 1, "a": 2}) == "{'b': 1, 'a': 2}"


class TestHumanizeMs:
    """Test humanize_ms() unit selection and rounding."""

    @pytest.mark.parametrize("ms, expected", [
        (0, "0ms"),
        (250, "250ms"),
        (999, "999ms"),
        (1000, "1s"),
        (1500, "2s"),
        (59_000, "59s"),
        (60_000, "1m"),
        (3_600_000, "1h"),
        (2 * 86_400_000, "2d"),
        (12.4, "12ms"),
    ])
    def test_units(self, ms, expected):
        assert humanize_ms(ms) == expected
