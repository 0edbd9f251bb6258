"""
Best-effort detection of a project's language and runtime environment.

Detection looks only at marker files in the project root: `go.mod` for Go
modules and `package.json` for Node projects.  The classification itself
is a pure function of the manifest contents so it can be exercised
without touching the file system.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

GO_MOD_FILE = "go.mod"
PACKAGE_JSON_FILE = "package.json"
UNKNOWN = "Unknown"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentInfo:
    language: str = UNKNOWN
    environment: str = UNKNOWN


def _section(manifest: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = manifest.get(key)
    return value if isinstance(value, Mapping) else {}


def detect_from_manifest(go_mod_present: bool, manifest: Optional[Mapping[str, Any]]) -> EnvironmentInfo:
    """Classify a project from its marker files.

    `manifest` is the parsed `package.json`, or None when there is none.
    """
    if go_mod_present:
        return EnvironmentInfo(language="Go")
    if manifest is None:
        return EnvironmentInfo()
    # An empty section still counts as declared
    if manifest.get("dependencies") is None and manifest.get("devDependencies") is None:
        return EnvironmentInfo()

    deps = _section(manifest, "dependencies")
    dev_deps = _section(manifest, "devDependencies")

    def declared(*names: str) -> bool:
        return any(name in deps or name in dev_deps for name in names)

    language = "TypeScript" if declared("typescript") else "JavaScript"
    if declared("react"):
        environment = "React"
    elif declared("angular", "@angular/core"):
        environment = "Angular"
    elif declared("vue"):
        environment = "Vue.js"
    else:
        environment = "Node.js"
    return EnvironmentInfo(language=language, environment=environment)


def detect(root: Path) -> EnvironmentInfo:
    """Inspect marker files under `root` and classify the project."""
    root = Path(root)
    go_mod_present = (root / GO_MOD_FILE).is_file()
    manifest: Optional[Mapping[str, Any]] = None
    package_json = root / PACKAGE_JSON_FILE
    if not go_mod_present and package_json.is_file():
        try:
            with package_json.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", package_json, exc)
        else:
            if isinstance(data, Mapping):
                manifest = data
            else:
                logger.warning("Ignoring %s: top-level value is not an object", package_json)
    return detect_from_manifest(go_mod_present, manifest)
