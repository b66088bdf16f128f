"""
Emission adapter.

Renders assembled builders into source artifacts the writer can persist.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .assembler.nodes import GeneratedType
from .backends import CodeBackend, PythonBackend
from .config import GeneratorConfig
from .formatters import Formatter, get_formatter


@dataclass(frozen=True)
class SourceArtifact:
    """A rendered builder module."""

    name: str
    package: str
    module_name: str
    content: str
    extension: str = "py"

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.name}" if self.package else self.name

    @property
    def relative_path(self) -> Path:
        """Location below the output root, one directory per package level."""
        file_name = f"{self.module_name}.{self.extension}"
        if not self.package:
            return Path(file_name)
        return Path(*self.package.split("."), file_name)

    def path_under(self, output_root: Path) -> Path:
        return output_root / self.relative_path


class BuilderEmitter:
    """Turns ``GeneratedType`` models into ``SourceArtifact`` instances."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        backend: CodeBackend | None = None,
        formatter: Formatter | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.backend = backend or PythonBackend(self.config)
        self._formatter = formatter

    @property
    def formatter(self) -> Formatter | None:
        if not self.config.formatter.enabled:
            return None
        if self._formatter is None:
            self._formatter = get_formatter(self.config.formatter.tool)
        return self._formatter

    def emit(self, generated: GeneratedType) -> SourceArtifact:
        code = self.backend.generate(generated)
        if self.formatter is not None:
            code = self.formatter.format(code, self.config.formatter)

        return SourceArtifact(
            name=generated.name,
            package=generated.package,
            module_name=generated.module_name,
            content=code,
            extension=self.backend.FILE_EXTENSION,
        )
