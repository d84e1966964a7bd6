"""
Error taxonomy for dualmode.

Record-building errors propagate unmodified to whoever called the builder.
Setup-phase errors (locating and loading a script) carry the path and the
attempted action so a CI log is enough to diagnose them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable


class DualModeError(Exception):
    """Base class for all dualmode errors."""


class InvalidCategory(DualModeError, ValueError):
    """Raised when a category is not one of the allowed values."""

    def __init__(self, value: object, allowed: Iterable[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid category {value!r}. Allowed values: {', '.join(self.allowed)}"
        )


class ScriptNotFound(DualModeError, FileNotFoundError):
    """Raised when the script under test cannot be located."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot locate script to load at {self.path}")


class LoadError(DualModeError, ImportError):
    """Raised when a script's definitions cannot be loaded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load definitions from {self.path}: {reason}")


class AnalysisError(DualModeError):
    """Raised when a script's source cannot be analysed. Diagnostic only."""


__all__ = [
    "DualModeError",
    "InvalidCategory",
    "ScriptNotFound",
    "LoadError",
    "AnalysisError",
]
