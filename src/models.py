"""Data models for registry entries and scan outcomes."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from constants import Rating

# Registry field names probed in order; upstream has renamed these before.
RATING_FIELDS = ("safety_rating", "rating", "risk_level")
FINDINGS_FIELDS = ("issues", "findings")


def _first_present(record: Dict[str, Any], names: Tuple[str, ...]) -> Any:
    for name in names:
        value = record.get(name)
        if value:
            return value
    return None


def _first_not_none(record: Dict[str, Any], names: Tuple[str, ...]) -> Any:
    for name in names:
        value = record.get(name)
        if value is not None:
            return value
    return None


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class SkillEntry:
    """Read-only view of one trust-registry record."""
    slug: Optional[str]
    name: Optional[str]
    package_name: Optional[str]
    rating_value: Optional[str]
    description: str = ""
    url: Optional[str] = None
    findings: Tuple[Any, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SkillEntry":
        findings = _first_not_none(record, FINDINGS_FIELDS)
        if findings is None:
            findings = []
        if not isinstance(findings, list):
            findings = [findings]
        rating_value = _first_present(record, RATING_FIELDS)
        return cls(
            slug=_str_or_none(record.get("slug")),
            name=_str_or_none(record.get("name")),
            package_name=_str_or_none(record.get("package_name")),
            rating_value=rating_value if isinstance(rating_value, str) else None,
            description=record.get("description") or "",
            url=_str_or_none(record.get("url")),
            findings=tuple(findings),
            raw=record,
        )


@dataclass(frozen=True)
class ScanResult:
    """Outcome for one requested package identifier."""
    identifier: str
    found: bool
    rating: Rating
    exceeds: bool
    name: Optional[str] = None
    url: Optional[str] = None
    description: str = ""
    findings: Tuple[Any, ...] = ()
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "slug": self.identifier,
            "found": self.found,
            "rating": self.rating.value,
            "exceeds": self.exceeds,
        }
        if self.found:
            data.update({
                "name": self.name or self.identifier,
                "description": self.description,
                "url": self.url,
                "issues": list(self.findings),
            })
        else:
            data["reason"] = self.reason
        return data


@dataclass(frozen=True)
class RunOutcome:
    """Terminal artifact of a scan: ordered results plus the gate decision."""
    results: Tuple[ScanResult, ...]
    has_issues: bool

    @classmethod
    def empty(cls) -> "RunOutcome":
        return cls(results=(), has_issues=False)

    @classmethod
    def from_results(cls, results: List[ScanResult]) -> "RunOutcome":
        return cls(results=tuple(results), has_issues=any(r.exceeds for r in results))

    def to_records(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.results]

    def to_json(self) -> str:
        return json.dumps(self.to_records(), ensure_ascii=False)
