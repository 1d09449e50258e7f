"""
Engine settings for xview.

Settings control the markup syntax (tag prefix, binding sigil), the names
reserved inside component templates and the recursion guard.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ViewSettings(BaseModel):
    """Configuration shared by the scanner, attribute parser and expansion engine.

    Params:
        tag_prefix: Prefix marking a tag as a component (e.g. "x-")
        binding_sigil: Attribute-name prefix marking a dynamic expression
        slot_variable: Template variable receiving the caller's body markup
        attributes_variable: Template variable receiving undeclared attributes
        max_depth: Maximum nesting of component expansions before failing
        autoescape: Whether component templates escape interpolated values
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tag_prefix: str = "x-"
    binding_sigil: str = ":"
    slot_variable: str = "slot"
    attributes_variable: str = "attributes"
    max_depth: int = Field(default=64, ge=1)
    autoescape: bool = True

    @field_validator("tag_prefix")
    @classmethod
    def _check_tag_prefix(cls, value: str) -> str:
        if not value or not value.endswith("-") or not value[:-1].isalnum():
            raise ValueError("tag_prefix must be alphanumeric and end with '-'")
        return value

    @field_validator("binding_sigil")
    @classmethod
    def _check_binding_sigil(cls, value: str) -> str:
        if len(value) != 1 or value.isalnum() or value.isspace() or value in "\"'=<>/":
            raise ValueError("binding_sigil must be a single punctuation character")
        return value

    @field_validator("slot_variable", "attributes_variable")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid template variable name")
        return value

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ViewSettings:
        """Create settings from a dict of partial overrides.

        Params:
            config: Overrides keyed by field name

        Returns:
            ViewSettings with the given overrides applied
        """
        return cls.model_validate(config)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ViewSettings:
        """Create settings from a YAML file with partial overrides.

        Params:
            yaml_path: Path to YAML file containing configuration

        Returns:
            ViewSettings instance with YAML overrides

        Example YAML:
            tag_prefix: "ui-"
            max_depth: 32
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
