"""
Entry point for the vaformat command-line interface (exposed as `vaformat`).

Given a project root, vaformat detects the project's language and
environment, reads the optional `.vaformat.yaml` metadata and
`.vaformatignore` rules, concatenates every admitted file, and writes the
result to `vaformat_output.txt` in the root (or to numbered part files
when the result exceeds 50 MiB).

Usage examples::

    # Aggregate the current directory
    vaformat
    # Aggregate another project and report a token estimate
    vaformat path/to/project --count-tokens
    # (alternative during development)
    # python -m vaformat.cli path/to/project

On success the primary output path is printed first, followed by one
`Beside: <path>` line for each secondary part file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import RunConfig, load_ignore_rules
from .context_builder import ContextBuilder
from .environment import detect
from .errors import NoRootError, VaformatError
from .formatting import render_document
from .tokens import DEFAULT_ENCODING, estimate_tokens
from .writer import SIZE_LIMIT, WriteResult, write_output

logger = logging.getLogger("vaformat.cli")


def run(root: Optional[Path], size_limit: int = SIZE_LIMIT) -> WriteResult:
    """Aggregate the project at `root` and write the artifact.

    Raises a `VaformatError` subclass on any fatal failure.  Nothing is
    read or written when the root is unusable or the metadata is malformed.
    """
    if root is None:
        raise NoRootError(None)
    root = Path(root).resolve()
    if not root.is_dir():
        raise NoRootError(root)

    env = detect(root)
    logger.info("Detected language=%s environment=%s", env.language, env.environment)

    config = RunConfig.load(root)
    logger.info("Loaded metadata from %s", config.metadata_path or "defaults")

    ignore_rules = load_ignore_rules(root)
    if ignore_rules:
        logger.info("Using %d ignore patterns", len(ignore_rules.patterns))

    body = ContextBuilder(root, ignore_rules).aggregate()
    document = render_document(env, config, body)
    return write_output(document, root, size_limit=size_limit)


def _report_tokens(result: WriteResult, encoding_name: str) -> None:
    text = b"".join(path.read_bytes() for path in result.paths).decode("utf-8")
    try:
        tokens = estimate_tokens(text, encoding_name)
    except Exception as exc:
        logger.warning("Failed to estimate tokens with encoding %s (%s).", encoding_name, exc)
        return
    logger.info("Token estimate (%s): %d", encoding_name, tokens)


def main(argv: Optional[List[str]] = None) -> int:
    """Primary CLI entry point.

    Parses arguments, aggregates the project and writes outputs to disk.
    Returns an exit code.
    """
    parser = argparse.ArgumentParser(
        description="Concatenate a project's files into a single annotated text file."
    )
    parser.add_argument(
        "root",
        type=Path,
        nargs="?",
        default=None,
        help="Root directory of the project to aggregate (default: current directory).",
    )
    parser.add_argument(
        "--count-tokens",
        action="store_true",
        help="Log a token estimate of the generated output.",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=DEFAULT_ENCODING,
        help=f"tiktoken encoding used by --count-tokens (default: {DEFAULT_ENCODING}).",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=os.environ.get("VAFORMAT_LOGLEVEL", "INFO").upper(),
        help="Logging verbosity (default from env VAFORMAT_LOGLEVEL or INFO).",
    )
    args = parser.parse_args(argv)

    level = getattr(logging, (args.log_level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s %(name)s:%(lineno)d - %(message)s",
    )
    logging.getLogger().setLevel(level)

    root = args.root if args.root is not None else Path.cwd()

    try:
        result = run(root)
    except VaformatError as exc:
        logger.error("%s", exc)
        return 1

    if args.count_tokens:
        _report_tokens(result, args.encoding)

    print(result.primary)
    for path in result.secondary:
        print(f"Beside: {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
