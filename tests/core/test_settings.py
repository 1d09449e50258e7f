"""
Tests for engine settings.
"""

import pytest
from pydantic import ValidationError

from xview import ViewSettings


class TestViewSettings:
    """Test defaults, validation and loading."""

    def test_defaults(self):
        """Test the default markup syntax."""
        settings = ViewSettings()

        assert settings.tag_prefix == "x-"
        assert settings.binding_sigil == ":"
        assert settings.slot_variable == "slot"
        assert settings.attributes_variable == "attributes"
        assert settings.max_depth == 64
        assert settings.autoescape is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"tag_prefix": "x"},
            {"tag_prefix": "-"},
            {"tag_prefix": "my-x-"},
            {"binding_sigil": "::"},
            {"binding_sigil": "a"},
            {"binding_sigil": "="},
            {"slot_variable": "my-slot"},
            {"max_depth": 0},
            {"unknown": True},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test invalid settings are rejected."""
        with pytest.raises(ValidationError):
            ViewSettings(**overrides)

    def test_settings_are_immutable(self):
        """Test settings cannot be changed after creation."""
        settings = ViewSettings()

        with pytest.raises(ValidationError):
            settings.max_depth = 3

    def test_from_dict(self):
        """Test partial overrides from a dict."""
        settings = ViewSettings.from_dict({"tag_prefix": "ui-", "max_depth": 8})

        assert settings.tag_prefix == "ui-"
        assert settings.max_depth == 8
        assert settings.slot_variable == "slot"

    def test_from_yaml(self, tmp_path):
        """Test partial overrides from a YAML file."""
        path = tmp_path / "xview.yaml"
        path.write_text('binding_sigil: "@"\nautoescape: false\n')

        settings = ViewSettings.from_yaml(path)

        assert settings.binding_sigil == "@"
        assert settings.autoescape is False
        assert settings.tag_prefix == "x-"

    def test_from_empty_yaml(self, tmp_path):
        """Test an empty YAML file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ViewSettings.from_yaml(str(path)) == ViewSettings()
