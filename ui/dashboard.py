"""Real-time CLI dashboard for relay monitoring."""

from datetime import datetime
from threading import Lock

from rich.console import Console
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import Config
from core.routes import ROUTES
from ui.log_utils import write_cli_log

console = Console()


class RequestInfo:
    """Info about a single forwarded request."""

    def __init__(self, kind: str, url: str, timestamp: datetime):
        self.kind = kind
        self.url = url[:80] + "..." if len(url) > 80 else url
        self.timestamp = timestamp


class Dashboard:
    """Real-time dashboard showing forwarded requests per route."""

    def __init__(self, config: Config):
        self.config = config
        self._lock = Lock()
        self._recent: list[RequestInfo] = []
        self._max_recent = 8
        self._request_count = {route.kind: 0 for route in ROUTES}
        self._errors: list[str] = []
        self._live: Live | None = None

    def start(self) -> "Dashboard":
        """Start the live dashboard."""
        self._live = Live(
            self._build_layout(),
            console=console,
            refresh_per_second=4,
            screen=False,
        )
        self._live.start()
        return self

    def stop(self) -> None:
        """Stop the live dashboard."""
        if self._live:
            self._live.stop()

    @property
    def request_count(self) -> dict[str, int]:
        with self._lock:
            return dict(self._request_count)

    @property
    def errors(self) -> list[str]:
        with self._lock:
            return list(self._errors)

    def log_request(self, kind: str, url: str) -> None:
        """Log a request forwarded upstream."""
        with self._lock:
            self._request_count[kind] = self._request_count.get(kind, 0) + 1
            self._recent.insert(0, RequestInfo(kind, url, datetime.now()))
            self._recent = self._recent[: self._max_recent]
            self._refresh()
            write_cli_log("REQUEST", url, kind=kind)

    def log_error(self, kind: str, status: int, message: str) -> None:
        """Log an error."""
        with self._lock:
            truncated = message[:50] + "..." if len(message) > 50 else message
            self._errors.insert(0, f"{kind} {status}: {truncated}")
            self._errors = self._errors[:3]
            self._refresh()
            write_cli_log("ERROR", message[:200], kind=kind, status=status)

    def _refresh(self) -> None:
        """Refresh the display."""
        if self._live:
            self._live.update(self._build_layout())

    def _build_layout(self) -> Layout:
        """Build the dashboard layout."""
        layout = Layout()

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="requests"),
            Layout(name="footer", size=5),
        )

        layout["header"].update(self._build_header())
        layout["requests"].update(self._build_requests_panel())
        layout["footer"].update(self._build_footer())

        return layout

    def _build_header(self) -> Panel:
        """Build header with per-route counters."""
        stats = Text()
        stats.append("YT Relay", style="bold cyan")
        for kind, count in self._request_count.items():
            stats.append("  |  ")
            stats.append(f"{kind}: {count}", style="blue")
        stats.append("  |  ")
        stats.append(f"Port: {self.config.server.port}", style="dim")

        return Panel(stats, style="cyan")

    def _build_requests_panel(self) -> Panel:
        """Build the recent requests panel."""
        if self._recent:
            table = Table(show_header=True, header_style="bold", expand=True, box=None)
            table.add_column("Time", style="dim", width=8)
            table.add_column("Kind", width=10)
            table.add_column("URL", ratio=1)

            for info in self._recent:
                table.add_row(
                    info.timestamp.strftime("%H:%M:%S"),
                    info.kind,
                    Text(info.url),
                )

            content = table
        else:
            content = Text("Waiting for requests...", style="dim")

        return Panel(content, title="[blue]Recent requests[/blue]", border_style="blue")

    def _build_footer(self) -> Panel:
        """Build footer with errors and status."""
        if self._errors:
            error_text = Text()
            for err in self._errors:
                error_text.append("! ", style="red bold")
                error_text.append(err + "\n", style="red")
            content = error_text
        elif not self.config.rapidapi.api_key:
            content = Text("RAPIDAPI_KEY is not set; every request will fail", style="yellow")
        else:
            content = Text(
                f"Try http://localhost:{self.config.server.port}/trend?geo=US",
                style="dim",
            )

        return Panel(content, title="[dim]Status[/dim]", border_style="dim")
