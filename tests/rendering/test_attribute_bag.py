"""
Tests for the attribute bag handed to component templates.
"""

from markupsafe import Markup

from xview.rendering import ComponentAttributes, RenderedAttribute


class TestComponentAttributes:
    """Test rendering and querying of undeclared attributes."""

    def test_empty_bag_renders_nothing(self):
        """Test an empty bag renders the empty string and is falsy."""
        attributes = ComponentAttributes()

        assert str(attributes) == ""
        assert not attributes
        assert len(attributes) == 0

    def test_renders_in_order_with_leading_space(self):
        """Test attributes render in insertion order."""
        attributes = ComponentAttributes(
            [
                RenderedAttribute("foo", "fooValue", literal=True),
                RenderedAttribute("bar", "barValue", literal=True),
            ]
        )

        assert attributes.__html__() == ' foo="fooValue" bar="barValue"'
        assert list(attributes) == ["foo", "bar"]

    def test_literal_values_are_verbatim(self):
        """Test literal values keep entities and are not escaped again."""
        attributes = ComponentAttributes([RenderedAttribute("title", "a &amp; <b>", literal=True)])

        assert str(attributes) == ' title="a &amp; <b>"'

    def test_literal_value_containing_double_quote(self):
        """Test single quotes are used when the literal contains double quotes."""
        attributes = ComponentAttributes([RenderedAttribute("data-x", 'say "hi"', literal=True)])

        assert str(attributes) == " data-x='say \"hi\"'"

    def test_bare_literal(self):
        """Test a bare literal renders only its name."""
        attributes = ComponentAttributes([RenderedAttribute("disabled", None, literal=True)])

        assert str(attributes) == " disabled"

    def test_evaluated_values_are_escaped(self):
        """Test evaluated values are HTML-escaped."""
        attributes = ComponentAttributes([RenderedAttribute("title", '<b>"x"</b>')])

        assert str(attributes) == ' title="&lt;b&gt;&#34;x&#34;&lt;/b&gt;"'

    def test_boolean_and_none_values(self):
        """Test True renders bare while False and None are omitted."""
        attributes = ComponentAttributes(
            [
                RenderedAttribute("checked", True),
                RenderedAttribute("hidden", False),
                RenderedAttribute("title", None),
                RenderedAttribute("count", 3),
            ]
        )

        assert str(attributes) == ' checked count="3"'

    def test_get_contains_and_without(self):
        """Test lookup helpers."""
        attributes = ComponentAttributes(
            [
                RenderedAttribute("class", "btn", literal=True),
                RenderedAttribute("id", "save", literal=True),
            ]
        )

        assert attributes.get("class") == "btn"
        assert attributes.get("missing", "default") == "default"
        assert "id" in attributes
        assert str(attributes.without("class")) == ' id="save"'
        assert attributes.names() == ["class", "id"]

    def test_markup_interpolation(self):
        """Test the bag is treated as safe markup when escaped."""
        attributes = ComponentAttributes([RenderedAttribute("a", "1", literal=True)])

        assert Markup("<div{}>").format(attributes) == '<div a="1">'
