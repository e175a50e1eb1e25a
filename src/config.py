"""Run configuration assembled from CLI flags, Action inputs and a config file.

Precedence, highest first: CLI flag, ``INPUT_*`` environment variable set by
the Actions runner, config file, built-in default. Empty strings count as
unset. The resulting ScanConfig is immutable and passed explicitly to every
component.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from jsonschema import Draft7Validator

from constants import Constants, ThresholdMode
from common.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "packages": {
            "anyOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "scan-config": {"type": ["boolean", "string"]},
        "fail-on": {"type": "string"},
        "api-url": {"type": "string"},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class ScanConfig:
    """Immutable settings for a single scan run."""

    packages: Tuple[str, ...] = ()
    scan_config: bool = False
    fail_on: ThresholdMode = ThresholdMode.UNSAFE
    api_url: str = Constants.DEFAULT_API_URL
    workspace: str = "."
    summary_path: Optional[str] = None
    outputs_path: Optional[str] = None
    output_file: Optional[str] = None

    @classmethod
    def from_args(cls, args: Any, environ: Optional[Mapping[str, str]] = None) -> "ScanConfig":
        """Create config from CLI arguments and the process environment.

        Raises:
            ConfigError: Unknown fail-on value or unusable config file.
        """
        env = os.environ if environ is None else environ
        file_cfg = load_config_file(getattr(args, "CONFIG", None))

        cli_packages = getattr(args, "PACKAGES", None)
        packages_value: Any = ",".join(cli_packages) if cli_packages else None
        packages = _first_set(
            packages_value, get_input(env, "packages"), file_cfg.get("packages")
        ) or ""
        if isinstance(packages, list):
            packages = ",".join(packages)

        scan_config = _first_set(
            getattr(args, "SCAN_CONFIG", None),
            get_input(env, "scan-config"),
            file_cfg.get("scan-config"),
            "false",
        )
        fail_on = _first_set(
            getattr(args, "FAIL_ON", None),
            get_input(env, "fail-on"),
            file_cfg.get("fail-on"),
            Constants.DEFAULT_FAIL_ON,
        )
        api_url = _first_set(
            getattr(args, "API_URL", None),
            get_input(env, "api-url"),
            file_cfg.get("api-url"),
            Constants.DEFAULT_API_URL,
        )

        return cls(
            packages=tuple(str(packages).split(",")),
            scan_config=parse_bool_input(scan_config),
            fail_on=ThresholdMode.parse(fail_on),
            api_url=str(api_url).rstrip("/"),
            workspace=_first_set(
                getattr(args, "WORKSPACE", None), env.get(Constants.ENV_WORKSPACE), "."
            ),
            summary_path=_first_set(
                getattr(args, "SUMMARY_FILE", None), env.get(Constants.ENV_STEP_SUMMARY)
            ),
            outputs_path=_first_set(env.get(Constants.ENV_OUTPUT)),
            output_file=_first_set(getattr(args, "OUTPUT", None)),
        )


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is None or value == "":
            continue
        return value
    return None


def get_input(environ: Mapping[str, str], name: str) -> Optional[str]:
    """Read an Action input the way the runner exposes it (``INPUT_FAIL-ON``)."""
    value = environ.get(f"{Constants.INPUT_PREFIX}{name.replace(' ', '_').upper()}")
    if value is None:
        return None
    return value.strip()


def parse_bool_input(value: Any) -> bool:
    """Only the literal ``true`` (any case) enables a boolean input."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load and validate a YAML or JSON config file.

    Args:
        config_path: Path to the file, or None.

    Returns:
        Mapping of input name to value; empty when no path is given.

    Raises:
        ConfigError: Missing file, unparseable content or schema violation.
    """
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if data is None:
        return {}
    validator = Draft7Validator(CONFIG_SCHEMA)
    errs = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errs:
        first = errs[0]
        path = "/".join(str(p) for p in first.path)
        raise ConfigError(f"Invalid config at '{path}': {first.message}")

    logger.debug("Loaded config file %s", config_path)
    return data
