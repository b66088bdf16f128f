import importlib
import sys
import textwrap
import uuid
from pathlib import Path

import pytest

from builder_gen.hosts import discover_module
from builder_gen.pipeline import OUTPUT_ROOT_OPTION, BuilderProcessor, GeneratorConfig, ProcessingRound


class SamplePackage:
    """An importable throwaway package living in a temporary directory."""

    def __init__(self, root: Path, name: str):
        self.root = root
        self.name = name
        self.path = root / name
        self.path.mkdir()
        (self.path / "__init__.py").write_text("")

    def write_module(self, module: str, source: str) -> str:
        (self.path / f"{module}.py").write_text(textwrap.dedent(source))
        return f"{self.name}.{module}"

    def import_module(self, module: str):
        importlib.invalidate_caches()
        return importlib.import_module(f"{self.name}.{module}")

    def generate(self, module: str, config: GeneratorConfig | None = None):
        """Run a round over the marked classes of ``module``, writing under ``root``."""
        processor = BuilderProcessor(config or GeneratorConfig(add_generation_comment=False))
        elements = discover_module(f"{self.name}.{module}")
        result = processor.process(ProcessingRound(elements, {OUTPUT_ROOT_OPTION: str(self.root)}))
        return processor, result


@pytest.fixture
def sample_package(tmp_path, monkeypatch):
    name = f"sample_{uuid.uuid4().hex[:12]}"
    monkeypatch.syspath_prepend(str(tmp_path))
    package = SamplePackage(tmp_path, name)
    yield package
    for module in [m for m in sys.modules if m == name or m.startswith(f"{name}.")]:
        del sys.modules[module]
