"""Exception types raised by AuditGate components and handled by the CLI."""

from __future__ import annotations

from typing import Optional


class AuditGateError(Exception):
    """Base class for fatal scan errors."""


class ConfigError(AuditGateError, ValueError):
    """Raised when inputs or the config file cannot be used."""


class RegistryError(AuditGateError):
    """Raised when the trust registry cannot be queried or answers badly."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RegistryTimeoutError(RegistryError):
    """Raised when the registry request exceeds the request timeout."""
