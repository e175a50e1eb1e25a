"""Match requested identifiers against registry entries and resolve ratings."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from constants import Constants, Rating, ThresholdMode
from analysis.threshold import exceeds_threshold
from models import RunOutcome, ScanResult, SkillEntry

logger = logging.getLogger(__name__)


def matches(entry: SkillEntry, identifier: str) -> bool:
    """Slug and package alias compare exactly; display name ignores case."""
    if entry.slug is not None and entry.slug == identifier:
        return True
    if entry.name is not None and entry.name.lower() == identifier.lower():
        return True
    return entry.package_name is not None and entry.package_name == identifier


def find_entry(identifier: str, entries: Sequence[SkillEntry]) -> Optional[SkillEntry]:
    """First matching entry in registry order, or None."""
    return next((e for e in entries if matches(e, identifier)), None)


def resolve_rating(entry: SkillEntry) -> Rating:
    return Rating.parse(entry.rating_value)


def entry_url(entry: SkillEntry, identifier: str, api_url: str) -> str:
    if entry.url:
        return entry.url
    return f"{api_url.rstrip('/')}{Constants.SKILL_PAGE_PATH}{entry.slug or identifier}"


def resolve(
    identifier: str,
    entries: Sequence[SkillEntry],
    fail_on: ThresholdMode,
    api_url: str,
) -> ScanResult:
    """Build the ScanResult for one identifier against a fetched snapshot."""
    entry = find_entry(identifier, entries)
    if entry is None:
        logger.debug("%s: not found in registry", identifier)
        return ScanResult(
            identifier=identifier,
            found=False,
            rating=Rating.UNKNOWN,
            exceeds=exceeds_threshold(Rating.UNKNOWN, fail_on),
            reason=Constants.NOT_FOUND_REASON,
        )

    rating = resolve_rating(entry)
    logger.debug("%s: matched %s rated %s", identifier, entry.slug, rating.value)
    return ScanResult(
        identifier=identifier,
        found=True,
        rating=rating,
        exceeds=exceeds_threshold(rating, fail_on),
        name=entry.name or identifier,
        url=entry_url(entry, identifier, api_url),
        description=entry.description,
        findings=entry.findings,
    )


def resolve_all(
    identifiers: Iterable[str],
    entries: Sequence[SkillEntry],
    fail_on: ThresholdMode,
    api_url: str,
) -> RunOutcome:
    """Resolve every identifier in order; the snapshot is never mutated."""
    results: List[ScanResult] = [
        resolve(identifier, entries, fail_on, api_url) for identifier in identifiers
    ]
    return RunOutcome.from_results(results)
