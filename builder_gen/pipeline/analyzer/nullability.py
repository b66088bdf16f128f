"""
Nullability classifier.

Decides which fields a generated builder must see set before ``build()``.
"""

from __future__ import annotations

from ..type_shapes import FieldElement, PrimitiveShape
from .ir_nodes import FieldDescriptor

NOT_NULL_MARKER = "NotNull"


class NullabilityClassifier:
    """Classifies fields as required or optional.

    Primitive fields are always required. Any other field is required unless
    it carries the not-null marker: a field marked ``NotNull`` is left
    optional in the builder.
    """

    def __init__(self, not_null_marker: str = NOT_NULL_MARKER):
        self.not_null_marker = not_null_marker

    def is_required(self, field: FieldElement) -> bool:
        if isinstance(field.declared_type, PrimitiveShape):
            return True
        return not self.has_not_null_marker(field)

    def has_not_null_marker(self, field: FieldElement) -> bool:
        # Markers may be reported qualified (org.jetbrains.annotations.NotNull)
        return any(marker.rpartition(".")[2] == self.not_null_marker for marker in field.markers)

    def classify(self, field: FieldElement) -> FieldDescriptor:
        return FieldDescriptor(
            name=field.name,
            declared_type=field.declared_type,
            required=self.is_required(field),
        )
