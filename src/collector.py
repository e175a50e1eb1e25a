"""Collect the ordered, de-duplicated set of package identifiers to scan."""

from __future__ import annotations

import logging
from typing import Iterable, List

from config import ScanConfig
from manifests import detect_packages

logger = logging.getLogger(__name__)


def split_identifiers(raw_entries: Iterable[str]) -> List[str]:
    """Split comma-separated entries, trimming and dropping blanks."""
    identifiers: List[str] = []
    for raw in raw_entries:
        for part in raw.split(","):
            part = part.strip()
            if part:
                identifiers.append(part)
    return identifiers


def merge_unique(*sources: Iterable[str]) -> List[str]:
    """Concatenate sources keeping the first occurrence of each identifier."""
    seen = set()
    merged: List[str] = []
    for source in sources:
        for identifier in source:
            if identifier not in seen:
                seen.add(identifier)
                merged.append(identifier)
    return merged


def collect_identifiers(config: ScanConfig) -> List[str]:
    """Explicit identifiers first, then auto-detected ones when enabled."""
    explicit = split_identifiers(config.packages)
    detected: List[str] = []
    if config.scan_config:
        detected = detect_packages(config.workspace)
        logger.info("Auto-detected %d packages from config files", len(detected))
    return merge_unique(explicit, detected)
