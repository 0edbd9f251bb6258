"""
Configuration management for vaformat.

Two optional files at the project root drive a run:

* `.vaformat.yaml` holds the metadata rendered around the code dump:
  a free-form `description`, a `problem_statement` list and a
  `questions` list.
* `.vaformatignore` holds gitignore-style patterns for files and
  directories that must not be aggregated.

Both files are optional.  When they are absent the run uses empty
metadata and admits every file.  A metadata file that exists but cannot
be parsed is fatal, unlike a missing one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

import yaml

from .errors import AggregationError, ConfigError
from .ignore_rules import IgnoreRuleSet

METADATA_FILE = ".vaformat.yaml"
IGNORE_FILE = ".vaformatignore"

logger = logging.getLogger(__name__)


def _as_string_list(value: Any, key: str, path: Path) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(path, f"'{key}' must be a list of strings")
    items: List[str] = []
    for item in value:
        if isinstance(item, (dict, list)):
            raise ConfigError(path, f"'{key}' entries must be strings")
        items.append("" if item is None else str(item))
    return items


@dataclass
class RunConfig:
    """Metadata for one run, loaded from `.vaformat.yaml`.

    Attributes
    ----------
    description: str
        One-line project description placed after `Description:`.

    problem_statements: List[str]
        Bullet points rendered under `Problem Statement:`, in order.

    questions: List[str]
        Numbered questions rendered after the code dump, in order.

    metadata_path: Path
        The file this object was loaded from, or None when defaults
        were used.  Retained for logging.
    """

    description: str = ""
    problem_statements: List[str] = field(default_factory=list)
    questions: List[str] = field(default_factory=list)
    metadata_path: Optional[Path] = None

    @staticmethod
    def load(root: Path) -> "RunConfig":
        """Load `.vaformat.yaml` from `root`, or return defaults if absent.

        Raises
        ------
        ConfigError
            If the file exists but is not valid YAML, is not a mapping, or
            has a recognized key with the wrong shape.
        """
        config_path = Path(root) / METADATA_FILE
        if not config_path.is_file():
            logger.debug("No %s found in %s; using defaults", METADATA_FILE, root)
            return RunConfig()

        try:
            with config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(config_path, str(exc)) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(config_path, str(exc)) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(config_path, "top-level value must be a mapping")

        description = data.get("description")
        if description is None:
            description = ""
        elif isinstance(description, (dict, list)):
            raise ConfigError(config_path, "'description' must be a string")
        else:
            description = str(description)

        return RunConfig(
            description=description,
            problem_statements=_as_string_list(data.get("problem_statement"), "problem_statement", config_path),
            questions=_as_string_list(data.get("questions"), "questions", config_path),
            metadata_path=config_path,
        )


def load_ignore_rules(root: Path) -> IgnoreRuleSet:
    """Build the ignore rule set from `.vaformatignore`, if present."""
    ignore_path = Path(root) / IGNORE_FILE
    if not ignore_path.is_file():
        logger.debug("No %s found in %s; all files admitted", IGNORE_FILE, root)
        return IgnoreRuleSet()
    try:
        with ignore_path.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise AggregationError(IGNORE_FILE, str(exc)) from exc
    rules = IgnoreRuleSet.build(text)
    logger.debug("Loaded %d ignore patterns from %s", len(rules.patterns), ignore_path)
    return rules
