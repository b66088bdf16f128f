"""
Ruff formatter for generated builders.
"""

from __future__ import annotations

import logging
import subprocess

from ..config import FormatterConfig
from .base import Formatter

log = logging.getLogger(__name__)


class RuffFormatter(Formatter):
    """Formatter running ``ruff format`` over stdin."""

    name = "ruff"

    def __init__(self, executable: str = "ruff"):
        self.executable = executable
        self._available = None

    def is_available(self) -> bool:
        if self._available is None:
            try:
                result = subprocess.run(
                    [self.executable, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, config: FormatterConfig) -> str:
        if not self.is_available():
            log.info("ruff is not available, leaving generated code unformatted")
            return code

        cmd = [self.executable, "format", "--stdin-filename", "builder.py"]
        if config.line_length:
            cmd.extend(["--line-length", str(config.line_length)])
        if config.target_version:
            cmd.extend(["--target-version", config.target_version])

        try:
            result = subprocess.run(cmd, input=code, capture_output=True, text=True, timeout=30)
        except subprocess.SubprocessError as e:
            log.warning("ruff format failed: %s", e)
            return code

        if result.returncode != 0:
            log.warning("ruff format exited with %d: %s", result.returncode, result.stderr.strip())
            return code
        return result.stdout
