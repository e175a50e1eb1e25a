"""package.json dependency detection for config auto-scan."""

from __future__ import annotations

import json
import logging
import os
from typing import List

from constants import Constants

logger = logging.getLogger(__name__)

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def _parse_package_json(package_json_path: str) -> List[str]:
    """Parse package.json and extract direct and dev dependency names.

    Args:
        package_json_path: Path to package.json

    Returns:
        List of dependency names in manifest order, without duplicates.
    """
    try:
        with open(package_json_path, "r", encoding="utf-8") as file:
            filex = json.load(file)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Failed to parse %s: %s", Constants.PACKAGE_JSON_FILE, e)
        return []

    if not isinstance(filex, dict):
        logger.warning(
            "Failed to parse %s: top-level value is not an object",
            Constants.PACKAGE_JSON_FILE,
        )
        return []

    deps: List[str] = []
    for section in DEPENDENCY_SECTIONS:
        entries = filex.get(section)
        if not isinstance(entries, dict):
            continue
        for name in entries:
            if name not in deps:
                deps.append(name)
    return deps


def detect_package_json(dir_name: str) -> List[str]:
    """Return dependency names from ``<dir_name>/package.json``.

    A missing file yields an empty list; a malformed one is logged as a
    warning and also yields an empty list.
    """
    package_json_path = os.path.join(dir_name, Constants.PACKAGE_JSON_FILE)
    if not os.path.isfile(package_json_path):
        logger.debug("No %s in %s", Constants.PACKAGE_JSON_FILE, dir_name)
        return []
    return _parse_package_json(package_json_path)
