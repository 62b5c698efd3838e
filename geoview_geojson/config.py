"""
Configuration schema for the GeoJSON formatter.

This module defines the per-call format options (pretty printing and line
prefix) and the formatter configuration (indent, non-finite policy and
default options), including loading from YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

MAX_INDENT = 16


@dataclass(frozen=True)
class FormatOptions:
    """
    Per-call formatting options.

    Attributes:
        pretty: Emit newlines and indentation ("nice" format)
        line_prefix: String prepended to every emitted line in pretty mode.
            None means no prefix and no indentation at all; "" means
            indentation only.
    """

    pretty: bool = False
    line_prefix: Optional[str] = None

    def __post_init__(self):
        """Validate format options."""
        if not isinstance(self.pretty, bool):
            raise ValueError(f"pretty must be a bool, got {self.pretty!r}")

        if self.line_prefix is not None and not isinstance(self.line_prefix, str):
            raise ValueError(
                f"line_prefix must be a string or None, got {self.line_prefix!r}"
            )


COMPACT = FormatOptions()
"""Single-line output, no indentation."""

PRETTY = FormatOptions(pretty=True, line_prefix="")
"""Multi-line output indented from column 0."""


@dataclass(frozen=True)
class FormatterConfig:
    """
    GeometryFormatter configuration.

    Immutable after construction (frozen dataclass).

    Attributes:
        indent: Number of spaces per nesting level
        allow_non_finite: Render NaN/inf with Python's default str()
            (True) or reject them with NonFiniteCoordinateError (False)
        default_options: Options used when a caller gives none
    """

    indent: int = 2
    allow_non_finite: bool = True
    default_options: FormatOptions = field(default_factory=FormatOptions)

    def __post_init__(self):
        """Validate formatter configuration."""
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise ValueError(f"indent must be an int, got {self.indent!r}")

        if not 0 <= self.indent <= MAX_INDENT:
            raise ValueError(
                f"indent must be in [0, {MAX_INDENT}], got {self.indent}"
            )

        if not isinstance(self.allow_non_finite, bool):
            raise ValueError(
                f"allow_non_finite must be a bool, got {self.allow_non_finite!r}"
            )

    @property
    def indent_unit(self) -> str:
        """Literal whitespace for one nesting level."""
        return " " * self.indent

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FormatterConfig":
        """
        Build configuration from a plain dict.

        Recognized keys: indent, allow_non_finite, pretty, line_prefix.

        Raises:
            ValueError: If unknown keys are present or values are invalid
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Formatter config must be a mapping, got {type(data).__name__}")

        known = {"indent", "allow_non_finite", "pretty", "line_prefix"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown formatter config keys: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )

        default_options = FormatOptions(
            pretty=data.get("pretty", False),
            line_prefix=data.get("line_prefix"),
        )

        return cls(
            indent=data.get("indent", 2),
            allow_non_finite=data.get("allow_non_finite", True),
            default_options=default_options,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "FormatterConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            indent: 2
            allow_non_finite: true
            pretty: true
            line_prefix: ""

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid or values fail validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data)
