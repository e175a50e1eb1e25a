"""Manifest detectors used when ``scan-config`` is enabled."""

from __future__ import annotations

from typing import List

from manifests.npm import detect_package_json
from manifests.pypi import detect_requirements_txt

__all__ = ["detect_packages", "detect_package_json", "detect_requirements_txt"]


def detect_packages(dir_name: str) -> List[str]:
    """Union of package.json and requirements.txt names, first-seen order."""
    detected: List[str] = []
    for name in detect_package_json(dir_name) + detect_requirements_txt(dir_name):
        if name not in detected:
            detected.append(name)
    return detected
