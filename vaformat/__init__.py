"""
vaformat package.

This package concatenates a project's source tree into a single text
file meant to be pasted into a conversation with a language model.  The
generated file contains:

* The detected language and environment of the project.
* The description and problem statement from `.vaformat.yaml`.
* Every file not excluded by `.vaformatignore`, each under its path.
* The numbered questions from `.vaformat.yaml`.

Each component handles a single responsibility.  See `cli.py` for the
entry point.
"""

from .config import RunConfig, load_ignore_rules
from .context_builder import ContextBuilder, aggregate
from .environment import EnvironmentInfo, detect, detect_from_manifest
from .errors import AggregationError, ConfigError, NoRootError, OutputWriteError, VaformatError
from .formatting import render_document, render_footer, render_header
from .ignore_rules import IgnoreRuleSet
from .writer import SIZE_LIMIT, WriteResult, split_ranges, write_output

__all__ = [
    "AggregationError",
    "ConfigError",
    "ContextBuilder",
    "EnvironmentInfo",
    "IgnoreRuleSet",
    "NoRootError",
    "OutputWriteError",
    "RunConfig",
    "SIZE_LIMIT",
    "VaformatError",
    "WriteResult",
    "aggregate",
    "detect",
    "detect_from_manifest",
    "load_ignore_rules",
    "render_document",
    "render_footer",
    "render_header",
    "split_ranges",
    "write_output",
]
