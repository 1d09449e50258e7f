"""
Tests for the built-in input and form components.
"""

import pytest

from xview import Container, Session, view
from xview.exceptions import DependencyResolutionError
from xview.validation import AlphaNumeric, Between, Length, Required, Validator, flash_validation_failure


@pytest.fixture
def render(registry, container):
    def render(markup: str) -> str:
        return view(markup, registry=registry, container=container).render()

    return render


class TestInputComponent:
    """Test ``x-input`` rendering."""

    def test_renders_label_and_input(self, render):
        """Test the exact markup of an input without session state."""
        html = render('<x-input name="email" label="Email" type="email"/>')

        assert html == (
            "<div>\n"
            '    <label for="email">Email</label>\n'
            '    <input type="email" name="email" id="email" value=""/>\n'
            "</div>"
        )

    def test_type_defaults_to_text(self, render):
        """Test the type input falls back to text."""
        assert 'type="text"' in render('<x-input name="q" label="Search"/>')

    def test_extra_attributes_are_echoed(self, render):
        """Test undeclared attributes land on the input element."""
        html = render('<x-input name="q" label="Search" placeholder="Find..." required/>')

        assert 'value="" placeholder="Find..." required/>' in html

    def test_original_value_and_errors(self, render, session):
        """Test flashed values and every failed rule message are shown."""
        rules = [Between(min=1, max=10), AlphaNumeric()]
        session.flash(Session.VALIDATION_ERRORS, {"name": rules})
        session.flash(Session.ORIGINAL_VALUES, {"name": "original name"})

        html = render('<x-input name="name" label="a" type="number" />')

        assert 'value="original name"' in html
        assert '    <div class="error">Value should be between 1 and 10</div>\n' in html
        assert '    <div class="error">Value should only contain alphanumeric characters</div>\n' in html

    def test_errors_of_other_fields_are_ignored(self, render, session):
        """Test messages only appear on the failing field."""
        session.flash(Session.VALIDATION_ERRORS, {"other": [Required()]})

        assert "error" not in render('<x-input name="name" label="a"/>')

    def test_original_value_is_escaped(self, render, session):
        """Test user input is escaped inside the value attribute."""
        session.flash(Session.ORIGINAL_VALUES, {"name": '"><script>'})

        assert 'value="&#34;&gt;&lt;script&gt;"' in render('<x-input name="name" label="a"/>')

    def test_validator_round_trip(self, render, session):
        """Test failures produced by the validator render on the next view."""
        values = {"username": "no spaces!", "age": "42"}
        failures = Validator().validate(
            values,
            {"username": [AlphaNumeric(), Length(max=5)], "age": [Between(min=1, max=10)]},
        )
        flash_validation_failure(session, values, failures)

        html = render('<x-input name="username" label="User"/><x-input name="age" label="Age"/>')

        assert 'value="no spaces!"' in html
        assert AlphaNumeric().message() in html
        assert Length(max=5).message() in html
        assert Between(min=1, max=10).message() in html

    def test_session_must_be_resolvable(self, registry):
        """Test a resolver without a Session binding fails the render."""

        class NoSession:
            def resolve(self, requested_type):
                raise LookupError(requested_type)

        with pytest.raises(DependencyResolutionError, match="session"):
            view('<x-input name="a"/>', registry=registry, container=NoSession()).render()

    def test_default_container_provides_empty_session(self, registry):
        """Test the default container autowires a fresh Session."""
        html = view('<x-input name="a" label="A"/>', registry=registry, container=Container()).render()

        assert 'value=""' in html


class TestFormComponent:
    """Test ``x-form`` rendering."""

    def test_wraps_body(self, render):
        """Test the body is placed between the form tags."""
        html = render('<x-form action="/login"><p>fields</p></x-form>')

        assert html == '<form action="/login" method="post">\n<p>fields</p>\n</form>'

    def test_method_and_extra_attributes(self, render):
        """Test method override and echoed attributes."""
        html = render('<x-form action="/search" method="get" class="inline"></x-form>')

        assert html.startswith('<form action="/search" method="get" class="inline">')
