"""
Markers consumed by the Python host.

``@builder`` marks a class for builder generation. ``NotNull`` is attached
to a field through ``typing.Annotated``; a field carrying it is left
optional by the generated builder::

    @builder
    @dataclass
    class Order:
        reference: str
        note: Annotated[str | None, NotNull] = None
"""

from __future__ import annotations

from typing import TypeVar

BUILDER_MARKER_ATTRIBUTE = "__builder_gen__"

T = TypeVar("T")


def builder(obj: T) -> T:
    """Mark ``obj`` for builder generation and return it unchanged."""
    setattr(obj, BUILDER_MARKER_ATTRIBUTE, True)
    return obj


def is_marked(obj: object) -> bool:
    return getattr(obj, BUILDER_MARKER_ATTRIBUTE, False) is True


class NotNull:
    """Field marker, used as ``Annotated[T, NotNull]``."""
