"""
manifest.py

Responsibility: Rewrite the `name` field of a retrieved template's `package.json`.

Every other field is kept as-is, in its original order. The file is rewritten
with 2-space indentation and a trailing newline so that output is stable.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from start_kit.errors import ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"


def patch_manifest_name(project_dir: str | Path, name: str) -> bool:
    """
    Set `name` in `<project_dir>/package.json`.

    Returns False (and does nothing) if there is no manifest.
    """
    path = Path(project_dir) / MANIFEST_FILENAME
    if not path.is_file():
        logger.debug("No %s in %s, skipping metadata patch", MANIFEST_FILENAME, project_dir)
        return False

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestError(f"Failed reading {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object at the top level.")

    data["name"] = name
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8", newline="\n")
    return True
