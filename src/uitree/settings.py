"""
Parser configuration for uitree.

This module provides the settings that control how strictly UI documents
are validated while they are loaded and expanded.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ParsingSettings:
    """Configuration for document validation and template expansion.

    Can be created from dict or YAML with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        settings = ParsingSettings()

        # Fail fast on unfilled template slots
        settings = ParsingSettings.from_dict({"strict_slots": True})

        # From YAML file
        settings = ParsingSettings.from_yaml("uitree.yaml")
    """

    # Tag the document root element must carry
    root_tag: str = "owo-ui"

    # Raise MissingSlotError for unfilled 'template-child' slots instead of
    # leaving the placeholder to fail as an unknown component later
    strict_slots: bool = False

    # When False, a template name declared twice raises DuplicateTemplateError
    allow_duplicate_templates: bool = True

    # Templates nested deeper than this raise UIParsingError, which stops a
    # template whose body invokes itself
    max_expansion_depth: int = 32

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ParsingSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            ParsingSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ParsingSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            ParsingSettings instance with YAML overrides

        Example YAML:
            root_tag: "my-ui"
            strict_slots: true
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)
