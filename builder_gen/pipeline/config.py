"""
Configuration for the builder generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

# Round option naming the root directory for generated sources
OUTPUT_ROOT_OPTION = "builder_gen.generated"


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when a builder module already exists.
    """

    FORCE = "force"  # Default: regenerate and overwrite
    ERROR_IF_EXISTS = "error"  # Refuse to touch existing files


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to check generated code parses before writing
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing formatters."""

    # Whether formatting is enabled
    enabled: bool = False

    # Which formatter to run: "ruff" or "black"
    tool: str = "ruff"

    # Line length for the formatter
    line_length: int = 100

    # Python version target (e.g., "py312", "py313")
    target_version: str = "py312"

    # Whether to use string normalization (convert single quotes to double)
    string_normalization: bool = True

    # Whether to respect magic trailing commas
    magic_trailing_comma: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for builder generation."""

    # Root directory for generated builder modules (a round option overrides it)
    output_root: str | None = None

    # Extra host type names mapped to canonical Python names
    known_types: dict[str, str] = field(default_factory=dict)

    # Simple name of the marker that leaves a field optional in the builder
    not_null_marker: str = "NotNull"

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Use from __future__ import annotations
    use_future_annotations: bool = True

    # Module generated builders import ValidationError from
    validation_error_module: str = "builder_gen.runtime"

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "output_root": self.output_root,
            "known_types": self.known_types,
            "not_null_marker": self.not_null_marker,
            "add_generation_comment": self.add_generation_comment,
            "use_future_annotations": self.use_future_annotations,
            "validation_error_module": self.validation_error_module,
            "formatter": {
                "enabled": self.formatter.enabled,
                "tool": self.formatter.tool,
                "line_length": self.formatter.line_length,
                "target_version": self.formatter.target_version,
                "string_normalization": self.formatter.string_normalization,
                "magic_trailing_comma": self.formatter.magic_trailing_comma,
            },
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
