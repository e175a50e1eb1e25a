"""Shared fixtures for AuditGate tests."""

import json
import os

import pytest

from models import SkillEntry


@pytest.fixture(autouse=True)
def clean_actions_env(monkeypatch):
    """Keep runner variables from a real CI job out of the tests."""
    for key in list(os.environ):
        if key.startswith("INPUT_") or key.startswith("GITHUB_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("AUDITGATE_LOG_LEVEL", raising=False)


@pytest.fixture
def skill_records():
    """Registry records using each of the tolerated rating field names."""
    return [
        {"slug": "safe-pkg", "name": "Safe Package", "safety_rating": "safe",
         "description": "Does nothing risky", "url": "https://example.test/skills/safe-pkg"},
        {"slug": "risky-pkg", "name": "Risky Package", "rating": "UNSAFE",
         "issues": ["exfiltrates env vars"]},
        {"slug": "careful-pkg", "name": "careful", "risk_level": "Caution",
         "findings": ["shell access"]},
        {"slug": "mystery-pkg", "name": "Mystery"},
        {"slug": "aliased", "name": "Aliased Tool", "package_name": "@scope/aliased",
         "safety_rating": "safe"},
    ]


@pytest.fixture
def skill_entries(skill_records):
    return [SkillEntry.from_record(r) for r in skill_records]


class DummyResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, text="", history=None):
        self.status_code = status_code
        self.text = text
        self.history = history or []


@pytest.fixture
def make_response():
    def _make(status_code=200, data=None, text=None):
        if text is None:
            text = json.dumps(data)
        return DummyResponse(status_code, text)
    return _make
