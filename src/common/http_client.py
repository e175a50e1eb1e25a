"""Shared HTTP helpers used by the registry client.

Encapsulates request/timeout error handling and JSON decoding so the
registry module only deals with payload shapes. Failures are raised as
RegistryError and left for the CLI to report.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.errors import RegistryError, RegistryTimeoutError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> requests.Response:
    """Perform a single GET request with consistent error handling and DEBUG traces.

    Redirects are followed by requests; only the final response is returned.

    Raises:
        RegistryTimeoutError: The request exceeded Constants.REQUEST_TIMEOUT.
        RegistryError: Any other transport failure.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context,
                ),
            )
        try:
            res = requests.get(
                url,
                headers=headers,
                timeout=Constants.REQUEST_TIMEOUT,
                allow_redirects=True,
                **kwargs,
            )
        except requests.Timeout as exc:
            raise RegistryTimeoutError("Request timeout") from exc
        except requests.RequestException as exc:  # includes ConnectionError
            raise RegistryError(f"{context} connection error: {exc}") from exc

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context,
                redirects=len(getattr(res, "history", None) or []) or None,
            ),
        )
    return res


def get_json(
    url: str,
    *,
    context: str,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any,
) -> Any:
    """Perform a GET request and parse the JSON body.

    Args:
        url: Target URL
        context: Human-readable source tag for logs and errors
        headers: Optional request headers
        **kwargs: Additional requests.get parameters

    Returns:
        The decoded JSON document.

    Raises:
        RegistryError: On a non-200 final status or an undecodable body.
    """
    res = safe_get(url, context=context, headers=headers, **kwargs)
    if res.status_code != 200:
        raise RegistryError(
            f"HTTP {res.status_code}: {res.text}",
            status_code=res.status_code,
            body=res.text,
        )
    try:
        return json.loads(res.text)
    except json.JSONDecodeError as exc:
        if is_debug_enabled(logger):
            logger.debug(
                "JSON decode error",
                extra=extra_context(
                    event="parse",
                    component="http_client",
                    action="get_json",
                    outcome="json_decode_error",
                    target=safe_url(url),
                ),
            )
        raise RegistryError(
            f"JSON parse error: {exc}", status_code=res.status_code, body=res.text
        ) from exc
