"""AgentAudit trust-registry client.

Fetches the full skill listing once per run and normalizes the response
envelope so matching code only ever sees a list of SkillEntry records.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from constants import Constants
from common.http_client import get_json
from common.logging_utils import extra_context, is_debug_enabled
from models import SkillEntry

logger = logging.getLogger(__name__)

# Envelope keys probed in order when the payload is an object.
ENVELOPE_KEYS = ("skills", "data")

REQUEST_HEADERS = {
    "Accept": "application/json",
    "User-Agent": Constants.USER_AGENT,
}


def skills_endpoint(api_url: str) -> str:
    return f"{api_url.rstrip('/')}{Constants.SKILLS_ENDPOINT}"


def normalize_payload(payload: Any) -> List[Dict[str, Any]]:
    """Return the skill records from any supported response shape.

    Accepts a bare list, or an object exposing the list under ``skills`` or
    ``data``. Anything else yields an empty list; non-object records are
    dropped.
    """
    if isinstance(payload, list):
        records = payload
    elif isinstance(payload, dict):
        records = []
        for key in ENVELOPE_KEYS:
            if payload.get(key) is not None:
                records = payload[key]
                break
        if not isinstance(records, list):
            records = []
    else:
        records = []

    skills = [r for r in records if isinstance(r, dict)]
    dropped = len(records) - len(skills)
    if dropped and is_debug_enabled(logger):
        logger.debug(
            "Dropped non-object skill records",
            extra=extra_context(component="registry", action="normalize", count=dropped),
        )
    return skills


def fetch_skills(api_url: str) -> List[SkillEntry]:
    """Fetch every skill from the registry in a single request.

    Raises:
        RegistryError: Propagated from the HTTP helper on any failure.
    """
    endpoint = skills_endpoint(api_url)
    logger.info("Fetching skills from %s", endpoint)
    payload = get_json(endpoint, context=Constants.REGISTRY_NAME, headers=REQUEST_HEADERS)
    entries = [SkillEntry.from_record(r) for r in normalize_payload(payload)]
    logger.info("Retrieved %d skills from %s", len(entries), Constants.REGISTRY_NAME)
    return entries
