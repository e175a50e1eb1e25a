"""Markdown summary and machine-readable outputs for a scan run."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Tuple

from constants import Rating, ThresholdMode
from models import RunOutcome, ScanResult

logger = logging.getLogger(__name__)

SUMMARY_TITLE = "## 🛡️ AgentAudit Security Scan Results"
STATUS_OK = "✅ OK"
STATUS_EXCEEDS = "❌ Exceeds threshold"
STATUS_NOT_FOUND = "❓ Not in database"
EXCEEDED_WARNING = "> ⚠️ **Some packages exceed the configured risk threshold!**"


def _status(result: ScanResult) -> str:
    if not result.found:
        return STATUS_NOT_FOUND
    return STATUS_EXCEEDS if result.exceeds else STATUS_OK


def _package_cell(result: ScanResult) -> str:
    if result.found:
        return f"[{result.name or result.identifier}]({result.url})"
    return result.identifier


def render_summary(outcome: RunOutcome, fail_on: ThresholdMode) -> str:
    """Render the markdown report, one table row per result in scan order."""
    lines = [
        SUMMARY_TITLE,
        "",
        "| Package | Rating | Status |",
        "|---------|--------|--------|",
    ]
    for r in outcome.results:
        lines.append(
            f"| {_package_cell(r)} | {r.rating.emoji} {r.rating.value} | {_status(r)} |"
        )
    lines.append("")
    lines.append(
        f"**Threshold:** fail on `{fail_on.value}` | "
        f"**Scanned:** {len(outcome.results)} packages"
    )
    if outcome.has_issues:
        lines.append("")
        lines.append(EXCEEDED_WARNING)
    return "\n".join(lines) + "\n"


def write_summary(summary: str, path: Optional[str]) -> None:
    """Append the report to the step-summary file, or log it when there is none."""
    if not path:
        logger.info(summary)
        return
    with open(path, "a", encoding="utf-8") as fh:
        fh.write(summary)


def set_outputs(outcome: RunOutcome, path: Optional[str]) -> None:
    """Publish ``results`` and ``has-issues`` as step outputs."""
    outputs = {
        "results": outcome.to_json(),
        "has-issues": "true" if outcome.has_issues else "false",
    }
    if not path:
        for name, value in outputs.items():
            logger.info("Output %s=%s", name, value)
        return
    with open(path, "a", encoding="utf-8") as fh:
        for name, value in outputs.items():
            fh.write(f"{name}={value}\n")


def export_json(outcome: RunOutcome, path: str) -> None:
    """Exports the scan results to a JSON file.

    Args:
        outcome (RunOutcome): Completed scan.
        path (str): File path to export the JSON.

    Raises:
        OSError: The file couldn't be written.
    """
    with open(path, "w", encoding="utf-8") as file:
        json.dump(outcome.to_records(), file, ensure_ascii=False, indent=4)
    logger.info("JSON file has been successfully exported at: %s", path)


def parse_results(text: str) -> List[Tuple[str, Rating, bool]]:
    """Read serialized results back as (identifier, rating, exceeds) triples."""
    records: Any = json.loads(text)
    return [
        (rec["slug"], Rating.parse(rec.get("rating")), bool(rec.get("exceeds")))
        for rec in records
    ]
