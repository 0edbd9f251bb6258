"""
Output writer for vaformat.

Small artifacts go to a single `vaformat_output.txt` under the project
root.  Artifacts larger than `SIZE_LIMIT` bytes of UTF-8 are split into
`vaformat_output_part_<n>.txt` files of at most `SIZE_LIMIT` bytes each.

Splitting is byte-exact: the encoded artifact is cut at fixed offsets
and every part is written in binary mode, so concatenating the parts in
order reproduces the original bytes.  A multi-byte character can be cut
across two parts; each part is meant to be read as raw text.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

from .errors import OutputWriteError

SIZE_LIMIT = 50 * 1024 * 1024  # 50 MiB
OUTPUT_FILE = "vaformat_output.txt"
PART_FILE_TEMPLATE = "vaformat_output_part_{index}.txt"

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    """Where the artifact went.

    `primary` is the file to show first; `secondary` files are meant to
    be shown beside it.  `chunks` holds the half-open byte range of the
    encoded artifact stored in each written file, in file order.
    """

    primary: Path
    secondary: List[Path] = field(default_factory=list)
    total_bytes: int = 0
    chunks: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def paths(self) -> List[Path]:
        return [self.primary] + list(self.secondary)

    @property
    def is_split(self) -> bool:
        return bool(self.secondary)


def split_ranges(total: int, size_limit: int = SIZE_LIMIT) -> List[Tuple[int, int]]:
    """Return contiguous `(start, end)` byte ranges covering `total` bytes.

    A total within the limit yields a single range, even when it is zero.
    """
    if size_limit <= 0:
        raise ValueError("size_limit must be positive")
    if total <= size_limit:
        return [(0, total)]
    parts = math.ceil(total / size_limit)
    return [(i * size_limit, min((i + 1) * size_limit, total)) for i in range(parts)]


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        with path.open("wb") as f:
            f.write(data)
    except OSError as exc:
        raise OutputWriteError(path, exc.strerror or str(exc)) from exc
    logger.debug("Wrote %d bytes to %s", len(data), path)


def write_output(content: str, root: Path, size_limit: int = SIZE_LIMIT) -> WriteResult:
    """Persist `content` under `root`, splitting it when it is too large."""
    root = Path(root)
    data = content.encode("utf-8")
    total = len(data)
    ranges = split_ranges(total, size_limit)

    if len(ranges) == 1:
        output_path = root / OUTPUT_FILE
        _write_bytes(output_path, data)
        logger.info("Output written to %s (%d bytes)", output_path, total)
        return WriteResult(primary=output_path, total_bytes=total, chunks=ranges)

    paths: List[Path] = []
    for index, (start, end) in enumerate(ranges, start=1):
        part_path = root / PART_FILE_TEMPLATE.format(index=index)
        _write_bytes(part_path, data[start:end])
        paths.append(part_path)
    logger.info(
        "Output has been split into %d files due to its size (%d bytes > %d bytes)",
        len(paths),
        total,
        size_limit,
    )
    return WriteResult(primary=paths[0], secondary=paths[1:], total_bytes=total, chunks=ranges)
