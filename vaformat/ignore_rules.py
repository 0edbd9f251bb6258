"""
Ignore rules for the tree walk.

Patterns follow `.gitignore` syntax and are compiled with `pathspec`.
Queries take a path relative to the aggregation root; directories are
queried with a trailing slash so that directory-only patterns such as
``build/`` apply to them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pathspec


def _compile_line(line: str) -> str:
    """Rewrite a trailing '/**' to the equivalent '/*'.

    'logs/**' must not match the directory query 'logs/' itself, only
    what is inside it.
    """
    stripped = line.rstrip()
    if stripped.endswith("/**") and not stripped.endswith("\\/**"):
        return stripped[:-1]
    return line


def normalize_rel_path(rel_path: str) -> str:
    """Return `rel_path` with forward slashes and no leading './'."""
    norm = rel_path.replace("\\", "/")
    while norm.startswith("./"):
        norm = norm[2:]
    return norm


class IgnoreRuleSet:
    """An immutable, ordered set of gitignore-style patterns."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        lines = [line.rstrip("\r\n") for line in lines]
        self._patterns: List[str] = [
            line for line in lines if line.strip() and not line.lstrip().startswith("#")
        ]
        # Later patterns win, so '!keep.log' after '*.log' re-includes keep.log
        self._spec = pathspec.GitIgnoreSpec.from_lines(_compile_line(line) for line in lines)

    @classmethod
    def build(cls, pattern_text: Optional[str]) -> "IgnoreRuleSet":
        """Compile the contents of an ignore file; None means no rules."""
        if not pattern_text:
            return cls()
        return cls(pattern_text.splitlines())

    @property
    def patterns(self) -> List[str]:
        return list(self._patterns)

    def __bool__(self) -> bool:
        return bool(self._patterns)

    def __repr__(self) -> str:
        return f"IgnoreRuleSet({self._patterns!r})"

    def matches(self, rel_path: str) -> bool:
        """Return True if the root-relative path is ignored."""
        if not self._patterns:
            return False
        norm = normalize_rel_path(rel_path)
        if not norm or norm == "/":
            return False
        return self._spec.match_file(norm)

    def matches_dir(self, rel_path: str) -> bool:
        """Return True if the root-relative directory is ignored."""
        norm = normalize_rel_path(rel_path).rstrip("/")
        return self.matches(norm + "/")
