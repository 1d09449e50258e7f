"""
Tests for component attribute parsing.
"""

import pytest

from xview.exceptions import MalformedMarkupError
from xview.markup import ExpressionValue, LiteralValue, parse_attributes


class TestParseAttributes:
    """Test conversion of raw attribute text to value descriptors."""

    def test_empty_text(self):
        """Test no attributes."""
        assert parse_attributes("") == {}
        assert parse_attributes("   \n ") == {}

    def test_literal_attributes_keep_order(self):
        """Test literal values are returned in source order."""
        attributes = parse_attributes(' foo="fooValue" bar="barValue"')

        assert list(attributes) == ["foo", "bar"]
        assert attributes["foo"] == LiteralValue("fooValue")
        assert attributes["bar"] == LiteralValue("barValue")

    def test_quote_styles(self):
        """Test double quotes, single quotes and unquoted values."""
        attributes = parse_attributes("""a="1" b='2' c=3 d='say "hi"'""")

        assert attributes == {
            "a": LiteralValue("1"),
            "b": LiteralValue("2"),
            "c": LiteralValue("3"),
            "d": LiteralValue('say "hi"'),
        }

    def test_bare_attribute(self):
        """Test a valueless attribute parses to LiteralValue(None)."""
        attributes = parse_attributes(' required name="a"')

        assert attributes["required"] == LiteralValue(None)
        assert attributes["name"] == LiteralValue("a")

    def test_dynamic_attribute_strips_sigil(self):
        """Test sigil-prefixed names become expressions."""
        attributes = parse_attributes(' :foo="this.input" bar="barValue"')

        assert attributes == {
            "foo": ExpressionValue("this.input"),
            "bar": LiteralValue("barValue"),
        }

    def test_values_are_verbatim(self):
        """Test entities and whitespace inside values are not touched."""
        attributes = parse_attributes(' title="a &amp; b  " empty=""')

        assert attributes["title"] == LiteralValue("a &amp; b  ")
        assert attributes["empty"] == LiteralValue("")

    def test_whitespace_around_equals(self):
        """Test spaces around '=' are allowed."""
        assert parse_attributes('name = "a"') == {"name": LiteralValue("a")}

    def test_hyphenated_and_namespaced_names(self):
        """Test names such as data-* and aria-* are kept whole."""
        attributes = parse_attributes(' data-id="7" aria-label="Close" hx-on::click="go()"')

        assert list(attributes) == ["data-id", "aria-label", "hx-on::click"]

    def test_custom_sigil(self):
        """Test a different binding sigil."""
        attributes = parse_attributes(' @value="user.name" :literal="x"', sigil="@")

        assert attributes["value"] == ExpressionValue("user.name")
        assert attributes[":literal"] == LiteralValue("x")

    def test_duplicate_name_overwrites_value(self):
        """Test the last duplicate wins while keeping the first position."""
        attributes = parse_attributes('a="1" b="2" a="3"')

        assert list(attributes) == ["a", "b"]
        assert attributes["a"] == LiteralValue("3")


class TestParseAttributeErrors:
    """Test invalid attribute text."""

    def test_dynamic_attribute_without_expression(self):
        """Test a bare dynamic attribute raises."""
        with pytest.raises(MalformedMarkupError, match="no expression"):
            parse_attributes(" :foo")

    def test_empty_dynamic_expression(self):
        """Test an empty expression raises."""
        with pytest.raises(MalformedMarkupError, match="no expression"):
            parse_attributes(' :foo="  "')

    def test_sigil_without_name(self):
        """Test a lone sigil raises."""
        with pytest.raises(MalformedMarkupError, match="without a name"):
            parse_attributes(' :="x"')

    def test_garbage(self):
        """Test text that is not an attribute raises."""
        with pytest.raises(MalformedMarkupError, match="Invalid attribute syntax"):
            parse_attributes(' "orphan"')
