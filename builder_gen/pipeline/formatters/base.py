"""
Base class for generated-code formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..config import FormatterConfig


class Formatter(ABC):
    """Post-processes rendered builder source."""

    name: str = ""

    @abstractmethod
    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the given code.

        Args:
            code: The builder source to format
            config: Formatter configuration

        Returns:
            Formatted code, or ``code`` unchanged when the tool cannot run
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the underlying tool can be used."""
