"""
Context builder for vaformat.

This module walks the project directory, filters entries through the
ignore rules and concatenates every admitted file into one text body.
Each file becomes a record::

    File: src/app.py
    --------------
    <full file contents>

followed by a blank line.  Entries within a directory are visited in
lexicographic order of their names, and a directory's subtree appears at
the position of the directory itself.  Ignored directories are not
descended.  Symbolic links are never followed.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple

from .errors import AggregationError
from .ignore_rules import IgnoreRuleSet

SEPARATOR = "--------------"

logger = logging.getLogger(__name__)


class ContextBuilder:
    """Aggregates the files under a project root into a single text body."""

    def __init__(self, base_dir: Path, ignore_rules: IgnoreRuleSet) -> None:
        self.base_dir = Path(base_dir).resolve()
        self.ignore_rules = ignore_rules

    @dataclass
    class FileEntry:
        """Container for an aggregated file."""
        rel_path: str
        content: str

        def render(self) -> str:
            return f"File: {self.rel_path}\n{SEPARATOR}\n{self.content}\n\n"

    def _iter_files(self) -> Iterator[Tuple[str, Path]]:
        """Yield `(rel_path, abs_path)` for every admitted file in walk order."""

        def traverse(current_dir: Path, rel_dir: str) -> Iterator[Tuple[str, Path]]:
            try:
                with os.scandir(current_dir) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as exc:
                raise AggregationError(rel_dir or ".", str(exc)) from exc

            for entry in entries:
                rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
                if entry.is_symlink():
                    logger.debug("Skipping symbolic link %s", rel_path)
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as exc:
                    raise AggregationError(rel_path, str(exc)) from exc

                if is_dir:
                    if self.ignore_rules.matches_dir(rel_path):
                        logger.debug("Skipping ignored directory %s/", rel_path)
                        continue
                    yield from traverse(Path(entry.path), rel_path)
                elif is_file:
                    if self.ignore_rules.matches(rel_path):
                        logger.debug("Skipping ignored file %s", rel_path)
                        continue
                    yield rel_path, Path(entry.path)
                else:
                    logger.debug("Skipping special file %s", rel_path)

        return traverse(self.base_dir, "")

    def list_files(self) -> List[str]:
        """Return the admitted relative file paths in walk order."""
        return [rel_path for rel_path, _ in self._iter_files()]

    def read_file(self, rel_path: str, abs_path: Path) -> "ContextBuilder.FileEntry":
        """Read one file as strict UTF-8.

        Content is kept verbatim, line endings included.  A file that is
        not valid UTF-8 or cannot be opened aborts the walk.
        """
        try:
            with abs_path.open("r", encoding="utf-8", newline="") as f:
                content = f.read()
        except UnicodeDecodeError as exc:
            raise AggregationError(rel_path, f"not valid UTF-8 text ({exc.reason} at byte {exc.start})") from exc
        except OSError as exc:
            raise AggregationError(rel_path, exc.strerror or str(exc)) from exc
        return ContextBuilder.FileEntry(rel_path, content)

    def read_files(self) -> Iterator["ContextBuilder.FileEntry"]:
        for rel_path, abs_path in self._iter_files():
            yield self.read_file(rel_path, abs_path)

    def aggregate(self) -> str:
        """Walk the tree and return the concatenated file records."""
        parts: List[str] = []
        for entry in self.read_files():
            parts.append(entry.render())
        logger.info("Aggregated %d files from %s", len(parts), self.base_dir)
        return "".join(parts)


def aggregate(root: Path, ignore_rules: IgnoreRuleSet) -> str:
    """Aggregate the tree under `root`, honoring `ignore_rules`."""
    return ContextBuilder(root, ignore_rules).aggregate()
