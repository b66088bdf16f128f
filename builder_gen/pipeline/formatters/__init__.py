"""
Post-processing formatters for generated builders.
"""

from __future__ import annotations

from .base import Formatter
from .black_formatter import BlackFormatter
from .ruff_formatter import RuffFormatter

FORMATTERS: dict[str, type[Formatter]] = {
    "black": BlackFormatter,
    "ruff": RuffFormatter,
}


def get_formatter(tool: str) -> Formatter:
    """Instantiate the formatter registered under ``tool``."""
    try:
        return FORMATTERS[tool]()
    except KeyError:
        raise ValueError(f"Unknown formatter {tool!r}, expected one of {sorted(FORMATTERS)}") from None


__all__ = [
    "Formatter",
    "BlackFormatter",
    "RuffFormatter",
    "FORMATTERS",
    "get_formatter",
]
