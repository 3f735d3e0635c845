"""Shared request data types."""

from dataclasses import dataclass, field
from urllib.parse import urlencode


@dataclass(frozen=True)
class UpstreamRequest:
    """A single outbound call to the upstream API."""

    endpoint: str
    params: dict[str, str] = field(default_factory=dict)
    kind: str = "request"

    def query_string(self) -> str:
        return urlencode(self.params)

    def url(self, base_url: str) -> str:
        """Full upstream URL including the query string."""
        return f"{base_url}{self.endpoint}?{self.query_string()}"
