"""Shared protocol definitions."""

from typing import Protocol


class RequestLogger(Protocol):
    """Protocol for request logging (Dashboard, ConsoleLogger)."""

    def log_request(self, kind: str, url: str) -> None: ...
    def log_error(self, kind: str, status: int, message: str) -> None: ...
