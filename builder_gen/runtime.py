"""
Runtime support imported by generated builders.
"""

from __future__ import annotations

from collections.abc import Iterable


class ValidationError(ValueError):
    """Raised by a generated ``build()`` when required fields are still unset.

    Attributes:
        fields: Names of the unset required fields, in declaration order
    """

    def __init__(self, fields: str | Iterable[str]):
        self.fields = [fields] if isinstance(fields, str) else list(fields)
        super().__init__(f"{', '.join(self.fields)} must not be None")

    @property
    def field_name(self) -> str:
        """The first unset required field."""
        return self.fields[0]
