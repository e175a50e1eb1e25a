"""Constants used in the project."""

from enum import Enum
from typing import Optional

from common.errors import ConfigError


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    CONFIG_ERROR = 1
    CONNECTION_ERROR = 2
    THRESHOLD_EXCEEDED = 3


class Rating(Enum):
    """Registry verdict for a package.

    UNKNOWN marks missing data; it has no level on the risk scale.
    """

    SAFE = "safe"
    CAUTION = "caution"
    UNSAFE = "unsafe"
    UNKNOWN = "unknown"

    @property
    def level(self) -> Optional[int]:
        return _RATING_LEVELS.get(self)

    @property
    def emoji(self) -> str:
        return _RATING_EMOJI[self]

    @classmethod
    def parse(cls, value) -> "Rating":
        """Map a raw registry value onto the enumeration (case-insensitive)."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.lower())
        except ValueError:
            return cls.UNKNOWN


_RATING_LEVELS = {
    Rating.SAFE: 0,
    Rating.CAUTION: 1,
    Rating.UNSAFE: 2,
}

_RATING_EMOJI = {
    Rating.SAFE: "✅",
    Rating.CAUTION: "⚠️",
    Rating.UNSAFE: "🚨",
    Rating.UNKNOWN: "❓",
}


class ThresholdMode(Enum):
    """Sensitivity controlling which ratings fail the build.

    Args:
        Enum (string): Threshold modes accepted by ``fail-on``.
    """

    UNSAFE = "unsafe"
    CAUTION = "caution"
    ANY = "any"

    @classmethod
    def parse(cls, value: str) -> "ThresholdMode":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ConfigError(
                f"Invalid fail-on value '{value}'. Expected one of: {allowed}"
            ) from None


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERSION = "1.0.0"
    DEFAULT_API_URL = "https://www.agentaudit.dev"
    SKILLS_ENDPOINT = "/api/skills"
    SKILL_PAGE_PATH = "/skills/"
    USER_AGENT = f"AuditGate/{VERSION}"
    REGISTRY_NAME = "AgentAudit"
    REQUIREMENTS_FILE = "requirements.txt"
    PACKAGE_JSON_FILE = "package.json"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVEL_ENV = "AUDITGATE_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for the registry request

    DEFAULT_FAIL_ON = ThresholdMode.UNSAFE.value
    NOT_FOUND_REASON = "Not found in AgentAudit database"

    # GitHub Actions runtime environment
    ENV_ACTIONS = "GITHUB_ACTIONS"
    ENV_WORKSPACE = "GITHUB_WORKSPACE"
    ENV_STEP_SUMMARY = "GITHUB_STEP_SUMMARY"
    ENV_OUTPUT = "GITHUB_OUTPUT"
    INPUT_PREFIX = "INPUT_"
