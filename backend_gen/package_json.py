"""
package_json.py

Responsibility: Read, patch and rewrite the generated project's `package.json`.

Patches are applied in place on the decoded mapping; callers persist with
`write_package_json` once per step.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from backend_gen.errors import ManifestError

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"


def read_package_json(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object at the top level.")
    return data


def write_package_json(path: Path, data: dict[str, Any]) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    logger.debug("wrote %s", path)


def set_module_type(data: dict[str, Any], module_type: str) -> dict[str, Any]:
    data["type"] = module_type
    return data


def finalize(
    data: dict[str, Any],
    *,
    main: str,
    scripts: dict[str, str],
    engines: dict[str, str],
) -> dict[str, Any]:
    """
    Point `main` at the server entry, merge `scripts` over the existing ones and
    add any `engines` constraint the project does not already declare.
    """
    data["main"] = main

    existing_scripts = data.get("scripts")
    if not isinstance(existing_scripts, dict):
        existing_scripts = {}
    data["scripts"] = {**existing_scripts, **scripts}

    existing_engines = data.get("engines")
    if not isinstance(existing_engines, dict):
        existing_engines = {}
    for name, constraint in engines.items():
        existing_engines.setdefault(name, constraint)
    if existing_engines:
        data["engines"] = existing_engines
    return data
