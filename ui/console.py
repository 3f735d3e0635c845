"""Line-based request logging for non-interactive runs."""

from pathlib import Path

from rich.console import Console
from rich.text import Text

from ui.log_utils import write_cli_log


class ConsoleLogger:
    """Print one line per upstream request or error."""

    def __init__(self, console: Console | None = None, log_file: Path | None = None):
        self._console = console or Console()
        self._log_file = log_file

    def log_request(self, kind: str, url: str) -> None:
        self._console.print(Text(f"Processing {kind} request to: {url}"))
        write_cli_log("REQUEST", url, log_file=self._log_file, kind=kind)

    def log_error(self, kind: str, status: int, message: str) -> None:
        truncated = message[:200]
        self._console.print(Text.assemble((f"{kind} {status}:", "red"), f" {truncated}"))
        write_cli_log("ERROR", truncated, log_file=self._log_file, kind=kind, status=status)
