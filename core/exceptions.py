"""Custom exception hierarchy for the relay."""

from typing import Any


class RelayError(Exception):
    """Base exception for all relay errors."""


class ConfigurationError(RelayError):
    """Raised when configuration is missing or invalid."""


class UpstreamError(RelayError):
    """Raised when the upstream API answers with a non-success status.

    Attributes:
        message: Fixed, request-kind specific error message
        status_code: HTTP status code from upstream (optional)
        details: Upstream body, parsed JSON or raw text
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class UpstreamConnectionError(RelayError):
    """Raised when unable to reach the upstream API."""


class UpstreamResponseError(RelayError):
    """Raised when a successful upstream response has no JSON body."""
