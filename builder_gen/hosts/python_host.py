"""
Python host.

Discovers classes marked with ``@builder`` in imported modules and
describes their fields as type shapes.
"""

from __future__ import annotations

import dataclasses
import enum
import importlib
import inspect
import logging
import types
import typing
from types import ModuleType
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from ..markers import is_marked
from ..pipeline.elements import TargetElement
from ..pipeline.errors import ElementShapeError
from ..pipeline.type_shapes import (
    DeclaredShape,
    ElementKind,
    FieldElement,
    PrimitiveKind,
    PrimitiveShape,
    TypeShape,
)

log = logging.getLogger(__name__)

PYTHON_PRIMITIVES: dict[type, PrimitiveKind] = {
    bool: PrimitiveKind.BOOLEAN,
    int: PrimitiveKind.INT,
    float: PrimitiveKind.DOUBLE,
}

_UNION_ORIGINS = (Union, types.UnionType)


def qualified_name_of(obj: Any) -> str:
    return f"{obj.__module__}.{obj.__qualname__}"


def marker_name(marker: Any) -> str:
    """Name of an ``Annotated`` metadata entry as reported to the classifier."""
    if isinstance(marker, str):
        return marker
    if isinstance(marker, type):
        return qualified_name_of(marker)
    return qualified_name_of(type(marker))


def annotation_markers(annotation: Any) -> frozenset[str]:
    origin = get_origin(annotation)
    if origin is Annotated:
        return frozenset(marker_name(m) for m in annotation.__metadata__)
    if origin in _UNION_ORIGINS:
        # Annotated[T, NotNull] | None
        return frozenset().union(*(annotation_markers(arg) for arg in get_args(annotation)))
    return frozenset()


def annotation_to_shape(annotation: Any) -> TypeShape:
    """
    Translate a resolved type annotation into a type shape.

    Args:
        annotation: An annotation as returned by ``typing.get_type_hints``

    Returns:
        The type shape

    Raises:
        ValueError: If the annotation has no type-shape equivalent
    """
    origin = get_origin(annotation)

    if origin is Annotated:
        return annotation_to_shape(get_args(annotation)[0])

    if origin in _UNION_ORIGINS:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            member = members[0]
            if member in PYTHON_PRIMITIVES:
                # int | None is the boxed int, not the primitive
                return DeclaredShape(qualified_name_of(member))
            return annotation_to_shape(member)
        return DeclaredShape("typing.Union", tuple(annotation_to_shape(m) for m in members))

    if annotation in PYTHON_PRIMITIVES:
        return PrimitiveShape(PYTHON_PRIMITIVES[annotation])

    if annotation is Any:
        return DeclaredShape("typing.Any")

    if origin is not None:
        if not isinstance(origin, type):
            raise ValueError(f"Unsupported annotation {annotation!r}")
        args = get_args(annotation)
        if any(arg is Ellipsis or isinstance(arg, list) for arg in args):
            raise ValueError(f"Unsupported type arguments in {annotation!r}")
        return DeclaredShape(qualified_name_of(origin), tuple(annotation_to_shape(arg) for arg in args))

    if isinstance(annotation, type):
        return DeclaredShape(qualified_name_of(annotation))

    raise ValueError(f"Unsupported annotation {annotation!r}")


def _element_kind(obj: Any) -> ElementKind:
    if inspect.isclass(obj):
        if issubclass(obj, BaseException):
            return ElementKind.OTHER
        if getattr(obj, "_is_protocol", False):
            return ElementKind.INTERFACE
        if issubclass(obj, enum.Enum):
            return ElementKind.ENUM
        return ElementKind.CLASS
    if inspect.isroutine(obj):
        return ElementKind.FUNCTION
    if inspect.ismodule(obj):
        return ElementKind.MODULE
    return ElementKind.VARIABLE


class ClassElement(TargetElement):
    """A marked Python object.

    Dataclasses contribute their ``__init__`` fields; other classes
    contribute their annotated class attributes, ``ClassVar`` excluded.
    """

    def __init__(self, obj: Any, name: str | None = None):
        self.obj = obj
        self.kind = _element_kind(obj)
        if hasattr(obj, "__module__") and hasattr(obj, "__qualname__"):
            self.qualified_name = qualified_name_of(obj)
        else:
            self.qualified_name = name or repr(obj)

    def fields(self) -> list[FieldElement]:
        cls = self.obj
        if "." in cls.__qualname__:
            raise ElementShapeError("Nested classes are not supported, move the class to module level", self.qualified_name)

        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except (NameError, TypeError, AttributeError, SyntaxError) as e:
            raise ElementShapeError(f"Cannot resolve annotations: {e}", self.qualified_name) from e

        if dataclasses.is_dataclass(cls):
            names = [f.name for f in dataclasses.fields(cls) if f.init]
        else:
            names = [name for name, hint in hints.items() if get_origin(hint) is not ClassVar and hint is not ClassVar]

        fields = []
        for name in names:
            hint = hints.get(name)
            if hint is None:
                raise ElementShapeError(f"Field {name!r} has no type annotation", self.qualified_name)
            try:
                shape = annotation_to_shape(hint)
            except ValueError as e:
                raise ElementShapeError(f"Field {name!r}: {e}", self.qualified_name) from e
            fields.append(FieldElement(name, shape, annotation_markers(hint)))
        return fields


def discover(module: ModuleType) -> list[ClassElement]:
    """Return the marked objects defined in ``module``, in definition order."""
    elements = []
    for name, obj in vars(module).items():
        if not is_marked(obj):
            continue
        if getattr(obj, "__module__", module.__name__) != module.__name__:
            # Re-exported from elsewhere
            continue
        elements.append(ClassElement(obj, name=f"{module.__name__}.{name}"))
    log.debug("Discovered %d marked objects in %s", len(elements), module.__name__)
    return elements


def discover_module(module_name: str) -> list[ClassElement]:
    """Import ``module_name`` and discover its marked objects."""
    return discover(importlib.import_module(module_name))
