"""Builder generator

Generates fluent, validating builder classes for Python classes and for
targets described in JSON descriptor files.
"""

__version__ = "1.0.0"

from .markers import NotNull, builder
from .pipeline import (
    BuilderProcessor,
    Diagnostics,
    GeneratorConfig,
    OutputMode,
    ProcessingRound,
    RoundResult,
)
from .runtime import ValidationError

__all__ = [
    "builder",
    "NotNull",
    "ValidationError",
    "BuilderProcessor",
    "ProcessingRound",
    "RoundResult",
    "GeneratorConfig",
    "OutputMode",
    "Diagnostics",
]
