"""
Engine-time errors.

None of these cross a target boundary during a processing round: the
processor converts them into error diagnostics attached to the element
being processed.
"""

from __future__ import annotations


class BuilderGenError(Exception):
    """Base class for all engine-time errors."""

    def __init__(self, message: str, element: str | None = None):
        super().__init__(message)
        self.message = message
        self.element = element


class ConfigurationError(BuilderGenError):
    """Raised when a round cannot run at all (e.g. no output root)."""


class ElementShapeError(BuilderGenError):
    """Raised when a discovered element cannot be turned into a builder.

    This can happen when:
    - The element is not a class
    - A field annotation cannot be expressed as a type shape
    - A field name collides with a generated builder member
    """


class TypeResolutionError(BuilderGenError):
    """Raised when a declared type name is not a valid dotted identifier."""


class EmissionError(BuilderGenError):
    """Raised when generated source fails validation before being written."""


class DescriptorError(BuilderGenError):
    """Raised when a descriptor file cannot be read as a list of targets."""
