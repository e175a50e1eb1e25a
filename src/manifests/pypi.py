"""requirements.txt package-name detection for config auto-scan."""

from __future__ import annotations

import logging
import os
import re
from typing import List, Optional

from constants import Constants

logger = logging.getLogger(__name__)

# Name ends at the first version operator or extras bracket.
_NAME_TERMINATORS = re.compile(r"[=<>!~\[]")


def requirement_name(line: str) -> Optional[str]:
    """Extract the package name from one requirements line.

    Returns None for blank lines and comments.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    name = _NAME_TERMINATORS.split(stripped, maxsplit=1)[0].strip()
    return name or None


def detect_requirements_txt(dir_name: str) -> List[str]:
    """Return package names from ``<dir_name>/requirements.txt`` in file order.

    A missing file yields an empty list; an unreadable one is logged as a
    warning and also yields an empty list.
    """
    req_path = os.path.join(dir_name, Constants.REQUIREMENTS_FILE)
    if not os.path.isfile(req_path):
        logger.debug("No %s in %s", Constants.REQUIREMENTS_FILE, dir_name)
        return []

    try:
        with open(req_path, "r", encoding="utf-8") as fh:
            lines = fh.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to parse %s: %s", Constants.REQUIREMENTS_FILE, e)
        return []

    names: List[str] = []
    for line in lines:
        name = requirement_name(line)
        if name and name not in names:
            names.append(name)
    return names
