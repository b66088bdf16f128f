"""
Analyzer module.

Contains type resolution, nullability classification and the IR nodes
they produce.
"""

from __future__ import annotations

from .ir_nodes import BuilderModel, FieldDescriptor, TargetType, TypeRef
from .known_types import BOXED_PRIMITIVES, DEFAULT_KNOWN_TYPES, build_known_types
from .nullability import NOT_NULL_MARKER, NullabilityClassifier
from .type_resolver import TypeResolver, generic_array

__all__ = [
    "TypeRef",
    "FieldDescriptor",
    "TargetType",
    "BuilderModel",
    "TypeResolver",
    "generic_array",
    "NullabilityClassifier",
    "NOT_NULL_MARKER",
    "BOXED_PRIMITIVES",
    "DEFAULT_KNOWN_TYPES",
    "build_known_types",
]
