"""
Base class for builder rendering backends.

Defines the interface that language-specific backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ... import __version__
from ...cli_utils import reconstruct_command_line
from ..analyzer.ir_nodes import TypeRef
from ..assembler.nodes import GeneratedType
from ..config import GeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for builder rendering backends."""

    # Template directory name and comment syntax
    TEMPLATE_LANG: str = ""
    COMMENT_PREFIX: str = "#"

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generator configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self.builder_template = self.jinja_env.get_template(f"builder.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, generated: GeneratedType) -> str:
        """
        Render a generated builder.

        Args:
            generated: The assembled builder

        Returns:
            Source code as a string
        """

    @abstractmethod
    def translate_type(self, type_ref: TypeRef, nullable: bool = False) -> str:
        """
        Translate a canonical type reference to a language-specific type string.

        Args:
            type_ref: The type reference
            nullable: Whether the rendered type must admit the unset value

        Returns:
            Language-specific type string
        """

    def _generate_command_comment(self) -> str:
        """Generation comment naming the tool version and command line."""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ...builder_gen import builder_gen as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "builder_gen"

        return f"{self.COMMENT_PREFIX} Generated by builder_gen v{__version__} : {command_line}"
