"""
Descriptor host.

Reads targets from JSON descriptor files, for classes whose metadata was
extracted by another toolchain. A descriptor looks like::

    {
      "targets": [
        {
          "name": "shop.models.Order",
          "kind": "class",
          "fields": [
            {"name": "reference", "type": "java.lang.String"},
            {"name": "quantity", "type": "int"},
            {"name": "tags", "type": {"declared": "java.util.List", "args": ["java.lang.String"]}},
            {"name": "scores", "type": "double[]"},
            {"name": "note", "type": "java.lang.String", "annotations": ["org.jetbrains.annotations.NotNull"]}
          ]
        }
      ]
    }

String types name a primitive kind or a declared type; a ``[]`` suffix
makes an array. Structured types use ``primitive``, ``array`` or
``declared`` (with optional ``args``).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..pipeline.elements import TargetElement
from ..pipeline.errors import DescriptorError, ElementShapeError
from ..pipeline.type_shapes import (
    ArrayShape,
    DeclaredShape,
    ElementKind,
    FieldElement,
    PrimitiveKind,
    PrimitiveShape,
    TypeShape,
)

log = logging.getLogger(__name__)

ARRAY_SUFFIX = "[]"

_PRIMITIVE_NAMES = {kind.value: kind for kind in PrimitiveKind}


def parse_type(raw: Any) -> TypeShape:
    """
    Parse a descriptor type into a type shape.

    Raises:
        ValueError: If ``raw`` is not a valid descriptor type
    """
    if isinstance(raw, str):
        raw = raw.strip()
        if raw.endswith(ARRAY_SUFFIX):
            return ArrayShape(parse_type(raw[: -len(ARRAY_SUFFIX)]))
        if not raw:
            raise ValueError("empty type name")
        if raw in _PRIMITIVE_NAMES:
            return PrimitiveShape(_PRIMITIVE_NAMES[raw])
        return DeclaredShape(raw)

    if not isinstance(raw, dict):
        raise ValueError(f"expected a type name or object, got {raw!r}")

    if "primitive" in raw:
        name = raw["primitive"]
        if name not in _PRIMITIVE_NAMES:
            raise ValueError(f"unknown primitive {name!r}, expected one of {sorted(_PRIMITIVE_NAMES)}")
        return PrimitiveShape(_PRIMITIVE_NAMES[name])
    if "array" in raw:
        return ArrayShape(parse_type(raw["array"]))
    if "declared" in raw:
        name = raw["declared"]
        if not isinstance(name, str) or not name:
            raise ValueError(f"invalid declared type name {name!r}")
        args = raw.get("args", [])
        if not isinstance(args, list):
            raise ValueError(f"type arguments of {name!r} must be a list")
        return DeclaredShape(name, tuple(parse_type(arg) for arg in args))

    raise ValueError(f"type object needs one of 'primitive', 'array' or 'declared': {raw!r}")


def _parse_kind(kind: Any) -> ElementKind:
    try:
        return ElementKind(kind)
    except ValueError:
        return ElementKind.OTHER


class DescriptorElement(TargetElement):
    """One entry of a descriptor file's ``targets`` list."""

    def __init__(self, entry: dict[str, Any], source: str = ""):
        self.entry = entry
        self.source = source
        self.qualified_name = str(entry.get("name", ""))
        self.kind = _parse_kind(entry.get("kind", ElementKind.CLASS.value))

    def fields(self) -> list[FieldElement]:
        raw_fields = self.entry.get("fields", [])
        if not isinstance(raw_fields, list):
            raise ElementShapeError("'fields' must be a list", self.qualified_name)

        fields = []
        for index, raw in enumerate(raw_fields):
            if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
                raise ElementShapeError(f"Field #{index} needs a string 'name'", self.qualified_name)
            name = raw["name"]
            try:
                shape = parse_type(raw.get("type"))
            except ValueError as e:
                raise ElementShapeError(f"Field {name!r}: {e}", self.qualified_name) from e
            markers = raw.get("annotations", [])
            if not isinstance(markers, list) or not all(isinstance(m, str) for m in markers):
                raise ElementShapeError(f"Field {name!r}: 'annotations' must be a list of names", self.qualified_name)
            fields.append(FieldElement(name, shape, frozenset(markers)))
        return fields


def load_descriptors(data: dict[str, Any], source: str = "") -> list[DescriptorElement]:
    """
    Build elements from a parsed descriptor document.

    Raises:
        DescriptorError: If the document has no ``targets`` list
    """
    targets = data.get("targets") if isinstance(data, dict) else None
    if not isinstance(targets, list):
        raise DescriptorError(f"Descriptor {source or '<data>'} must contain a 'targets' list")

    elements = []
    for entry in targets:
        if not isinstance(entry, dict):
            raise DescriptorError(f"Descriptor {source or '<data>'}: every target must be an object, got {entry!r}")
        elements.append(DescriptorElement(entry, source))
    return elements


def load_descriptor_file(path: str | Path) -> list[DescriptorElement]:
    """Read a JSON descriptor file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DescriptorError(f"Cannot read descriptor {path}: {e}") from e

    elements = load_descriptors(data, str(path))
    log.debug("Loaded %d targets from %s", len(elements), path)
    return elements
