"""
Black formatter for generated builders.
"""

from __future__ import annotations

import logging

from ..config import FormatterConfig
from .base import Formatter

log = logging.getLogger(__name__)


class BlackFormatter(Formatter):
    """Formatter using the black library."""

    name = "black"

    def __init__(self):
        self._black = None
        self._available = None

    def is_available(self) -> bool:
        if self._available is None:
            try:
                import black

                self._black = black
                self._available = True
            except ImportError:
                self._available = False
        return self._available

    def _target_versions(self, target_version: str) -> set:
        black = self._black
        member = getattr(black.TargetVersion, target_version.upper(), None)
        return {member} if member is not None else set()

    def format(self, code: str, config: FormatterConfig) -> str:
        if not self.is_available():
            log.info("black is not installed, leaving generated code unformatted")
            return code

        black = self._black
        mode = black.Mode(
            target_versions=self._target_versions(config.target_version),
            line_length=config.line_length,
            string_normalization=config.string_normalization,
            magic_trailing_comma=config.magic_trailing_comma,
        )

        try:
            return black.format_str(code, mode=mode)
        except black.InvalidInput as e:
            log.warning("black could not format generated code: %s", e)
            return code
