"""
Pipeline - builder synthesis engine.

Turns discovered target classes into generated builder modules:

1. Phase 1 (Host): Describe each target as ordered fields with type shapes
2. Phase 2 (Analyzer): Classify fields and resolve canonical types
3. Phase 3 (Assembler): Build the structure of the builder class
4. Phase 4 (Backend): Render the builder as source code
5. Phase 5 (Formatter): Optional post-processing (ruff or black)
6. Phase 6 (Writer): Atomic write under the output root
"""

from __future__ import annotations

from .analyzer import BuilderModel, FieldDescriptor, NullabilityClassifier, TargetType, TypeRef, TypeResolver
from .assembler import BuilderAssembler, GeneratedType
from .config import OUTPUT_ROOT_OPTION, FormatterConfig, GeneratorConfig, OutputConfig, OutputMode
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .elements import TargetElement
from .emitter import BuilderEmitter, SourceArtifact
from .errors import (
    BuilderGenError,
    ConfigurationError,
    DescriptorError,
    ElementShapeError,
    EmissionError,
    TypeResolutionError,
)
from .processor import BuilderProcessor, ProcessingRound, RoundResult
from .type_shapes import ArrayShape, DeclaredShape, ElementKind, FieldElement, PrimitiveKind, PrimitiveShape, TypeShape
from .writer import AtomicWriter

__all__ = [
    "BuilderProcessor",
    "ProcessingRound",
    "RoundResult",
    "GeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "OUTPUT_ROOT_OPTION",
    "Diagnostics",
    "Diagnostic",
    "DiagnosticKind",
    "TargetElement",
    "BuilderEmitter",
    "SourceArtifact",
    "BuilderAssembler",
    "GeneratedType",
    "TypeResolver",
    "NullabilityClassifier",
    "TypeRef",
    "TargetType",
    "FieldDescriptor",
    "BuilderModel",
    "TypeShape",
    "PrimitiveShape",
    "PrimitiveKind",
    "ArrayShape",
    "DeclaredShape",
    "FieldElement",
    "ElementKind",
    "AtomicWriter",
    "BuilderGenError",
    "ConfigurationError",
    "ElementShapeError",
    "TypeResolutionError",
    "EmissionError",
    "DescriptorError",
]
