"""Route table - maps each inbound endpoint to its upstream call."""

from dataclasses import dataclass
from typing import Literal

from core.request_types import UpstreamRequest


@dataclass(frozen=True)
class RouteSpec:
    """Everything that differs between the relay's endpoints."""

    name: str
    path: str
    kind: str
    endpoint: str
    source: Literal["path", "query"]
    input_name: str
    param_name: str
    missing_message: str = ""
    default: str | None = None
    fixed_params: tuple[tuple[str, str], ...] = ()

    def build_request(self, value: str) -> UpstreamRequest:
        """Map the caller's input onto the upstream parameters."""
        params = {self.param_name: value}
        params.update(self.fixed_params)
        return UpstreamRequest(self.endpoint, params, self.kind)

    @property
    def bare_path(self) -> str | None:
        """Path without the trailing segment, for path-sourced inputs."""
        if self.source != "path":
            return None
        return self.path.rsplit("/", 1)[0]


STREAM = RouteSpec(
    name="stream",
    path="/stream/{videoid}",
    kind="stream",
    endpoint="/dl",
    source="path",
    input_name="videoid",
    param_name="id",
    missing_message="Missing video ID in the URL path.",
    fixed_params=(("region", "DE"),),
)

SHORT = RouteSpec(
    name="short",
    path="/short/{channelid}",
    kind="shorts",
    endpoint="/channel/shorts",
    source="path",
    input_name="channelid",
    param_name="id",
    missing_message="Missing channel ID in the URL path.",
)

SEARCH = RouteSpec(
    name="search",
    path="/search",
    kind="search",
    endpoint="/search",
    source="query",
    input_name="q",
    param_name="query",
    missing_message="Missing search query. Usage: /search?q=your_term",
)

TREND = RouteSpec(
    name="trend",
    path="/trend",
    kind="trending",
    endpoint="/trending",
    source="query",
    input_name="geo",
    param_name="geo",
    default="US",
)

ROUTES: tuple[RouteSpec, ...] = (STREAM, SHORT, SEARCH, TREND)
