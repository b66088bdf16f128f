"""
Builder processor.

Drives one processing round: for every discovered element, describe its
fields, assemble the builder, render it and write it under the output
root. A failing element is reported and skipped; the round always runs to
the end of the supplied elements.
"""

from __future__ import annotations

import keyword
import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..utils import is_valid_qualified_name
from .analyzer import BuilderModel, NullabilityClassifier, TargetType, TypeResolver, build_known_types
from .assembler import RESERVED_MEMBER_NAMES, BuilderAssembler
from .config import OUTPUT_ROOT_OPTION, GeneratorConfig, OutputMode
from .diagnostics import Diagnostics
from .elements import TargetElement
from .emitter import BuilderEmitter, SourceArtifact
from .errors import BuilderGenError, ConfigurationError, ElementShapeError
from .writer import AtomicWriter

log = logging.getLogger(__name__)


@dataclass
class ProcessingRound:
    """Elements discovered in one round plus round-scoped options."""

    elements: list[TargetElement] = field(default_factory=list)
    options: dict[str, str] = field(default_factory=dict)


@dataclass
class RoundResult:
    """Outcome of a round.

    Attributes:
        handled: False when the round did not run (nothing to do, or no output root)
        artifacts: Rendered builders, in element order
        written: Paths of the files written
        failed: Qualified names of elements that produced an error
    """

    handled: bool = False
    artifacts: list[SourceArtifact] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def _is_field_name(name: str) -> bool:
    """Fields become setter and keyword names, so they must be plain identifiers."""
    if not name.isidentifier() or keyword.iskeyword(name):
        return False
    return not (name.startswith("__") and name.endswith("__"))


class BuilderProcessor:
    """Generates builders for the elements of a processing round."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        diagnostics: Diagnostics | None = None,
        resolver: TypeResolver | None = None,
        emitter: BuilderEmitter | None = None,
        writer: AtomicWriter | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.diagnostics = diagnostics or Diagnostics()
        self.resolver = resolver or TypeResolver(build_known_types(self.config.known_types))
        self.classifier = NullabilityClassifier(self.config.not_null_marker)
        self.assembler = BuilderAssembler(self.resolver)
        self.emitter = emitter or BuilderEmitter(self.config)
        self.writer = writer or AtomicWriter()

    def process(self, round_: ProcessingRound) -> RoundResult:
        """
        Process a round.

        Args:
            round_: The discovered elements and round options

        Returns:
            The round result; per-element problems are in ``diagnostics``
        """
        result = RoundResult()
        elements = round_.elements
        if not elements:
            self.diagnostics.note("No classes annotated with @builder in this round")
            return result

        try:
            output_root = self._output_root(round_)
        except ConfigurationError as e:
            self.diagnostics.error(e.message)
            return result

        self.diagnostics.note(f"Generating builders for {len(elements)} classes in {output_root}")
        result.handled = True

        # Builder path -> element that owns it in this round
        claimed: dict[Path, str] = {}
        for element in elements:
            try:
                artifact, path = self.write_builder_for(element, output_root, claimed)
            except (BuilderGenError, OSError) as e:
                message = e.message if isinstance(e, BuilderGenError) else f"Could not write builder: {e}"
                self._fail(result, element, message)
                continue
            except Exception as e:
                log.debug("Unexpected failure for %s", element.qualified_name, exc_info=True)
                self._fail(result, element, f"Unexpected error: {type(e).__name__}: {e}")
                continue
            result.artifacts.append(artifact)
            result.written.append(path)

        return result

    def _fail(self, result: RoundResult, element: TargetElement, message: str) -> None:
        self.diagnostics.error(message, element=element.qualified_name)
        result.failed.append(element.qualified_name)

    def _output_root(self, round_: ProcessingRound) -> Path:
        output_root = round_.options.get(OUTPUT_ROOT_OPTION) or self.config.output_root
        if not output_root:
            raise ConfigurationError("Can't find the target directory for generated builders.")
        output_root = Path(output_root)
        try:
            output_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Can't create the target directory for generated builders: {e}") from e
        return output_root

    def describe(self, element: TargetElement) -> BuilderModel:
        """
        Translate an element into a builder model.

        Raises:
            ElementShapeError: If the element cannot get a builder
        """
        if not element.is_type_like:
            raise ElementShapeError("Invalid element type, expected a class", element.qualified_name)

        target = TargetType(element.qualified_name)
        if not target.module or not is_valid_qualified_name(target.qualified_name):
            raise ElementShapeError(
                f"Cannot import {element.qualified_name!r}, expected a module-qualified class name",
                element.qualified_name,
            )

        model = BuilderModel(target)
        for field_element in element.fields():
            if not _is_field_name(field_element.name):
                raise ElementShapeError(
                    f"Field name {field_element.name!r} is not usable as a builder setter",
                    element.qualified_name,
                )
            if field_element.name in RESERVED_MEMBER_NAMES:
                raise ElementShapeError(
                    f"Field {field_element.name!r} clashes with a generated builder member",
                    element.qualified_name,
                )
            self.diagnostics.note(f"Adding field: {field_element.name}", element=element.qualified_name)
            model.fields.append(self.classifier.classify(field_element))

        if not model.fields:
            self.diagnostics.warning("Class has no fields, the builder will only call its constructor", element.qualified_name)
        return model

    def generate(self, element: TargetElement) -> SourceArtifact:
        """Describe, assemble and render the builder for one element."""
        model = self.describe(element)
        generated = self.assembler.assemble_model(model)
        return self.emitter.emit(generated)

    def write_builder_for(
        self,
        element: TargetElement,
        output_root: Path,
        claimed: dict[Path, str] | None = None,
    ) -> tuple[SourceArtifact, Path]:
        """
        Generate and write the builder for one element.

        Args:
            element: The element to generate for
            output_root: Root directory for generated sources
            claimed: Builder paths already written this round, mapped to their element

        Raises:
            ElementShapeError: If another element of the round already owns the builder path
        """
        artifact = self.generate(element)
        path = artifact.path_under(output_root)
        if claimed is not None and path in claimed:
            raise ElementShapeError(
                f"Builder {artifact.qualified_name} would overwrite the one generated for {claimed[path]}",
                element.qualified_name,
            )

        self.diagnostics.note(f"Writing {artifact.qualified_name}", element=element.qualified_name)
        validate = self.config.output.validate_before_write
        if self.config.output.mode is OutputMode.ERROR_IF_EXISTS:
            self.writer.write_if_not_exists(path, artifact.content, validate=validate)
        else:
            self.writer.write(path, artifact.content, validate=validate)
        if claimed is not None:
            claimed[path] = element.qualified_name
        return artifact, path
