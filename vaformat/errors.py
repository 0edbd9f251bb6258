"""
Error types raised by the vaformat package.

Every failure that should stop a run derives from `VaformatError` so the
command-line entry point can report it with a single handler.  Nothing is
retried: the first error aborts the run, and any output files written
before it stay on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class VaformatError(Exception):
    """Base class for all fatal vaformat errors."""


class NoRootError(VaformatError):
    """Raised when no usable project root is available."""

    def __init__(self, root: Optional[Path]) -> None:
        self.root = root
        if root is None:
            message = "No project root is available."
        else:
            message = f"The project root {root} does not exist or is not a directory."
        super().__init__(message)


class ConfigError(VaformatError):
    """Raised when the metadata file exists but cannot be used."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to parse {path}: {detail}")


class AggregationError(VaformatError):
    """Raised when a file or directory under the root cannot be read."""

    def __init__(self, rel_path: str, detail: str) -> None:
        self.rel_path = rel_path
        self.detail = detail
        super().__init__(f"Failed to read {rel_path}: {detail}")


class OutputWriteError(VaformatError):
    """Raised when an output file cannot be written."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to write {path}: {detail}")
