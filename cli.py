"""CLI entry point for yt-relay."""

import sys
from datetime import datetime

from rich.console import Console

from app import create_app
from auth import check_auth, has_credentials
from core.config import Config, load_config
from core.headers import HeaderBuilder
from core.routes import ROUTES
from ui.console import ConsoleLogger
from ui.dashboard import Dashboard
from ui.log_utils import clear_logs, redact_headers, write_cli_log

console = Console()


def main():
    """Main CLI entry point."""
    config = load_config()
    plain = False

    # Handle CLI arguments
    if len(sys.argv) > 1:
        arg = sys.argv[1]

        if arg in ("--check", "--auth"):
            check_auth(config)
            return

        if arg == "--config":
            _print_config(config)
            return

        if arg in ("--help", "-h"):
            _print_help()
            return

        plain = arg == "--plain"

    clear_logs()
    _warn_missing_key(config)

    dashboard = None if plain else Dashboard(config)
    logger = ConsoleLogger(console) if dashboard is None else dashboard

    import uvicorn

    app = create_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level="warning",
    )
    server = uvicorn.Server(uvicorn_config)

    console.print(f"Server running with {len(ROUTES)} routes on port {config.server.port}")
    if dashboard:
        dashboard.start()
    start_time = datetime.now()
    write_cli_log("STARTUP", "Relay started", port=config.server.port)
    try:
        server.run()
    finally:
        duration = datetime.now() - start_time
        write_cli_log("SHUTDOWN", "Relay stopped", duration=str(duration))
        if dashboard:
            dashboard.stop()


def _warn_missing_key(config: Config, out: Console = console) -> bool:
    """Warn when RAPIDAPI_KEY is unset; returns True if a warning was shown."""
    # Not fatal: each request fails with a 500 instead
    if has_credentials(config):
        return False
    out.print("[yellow]WARNING:[/yellow] RAPIDAPI_KEY is not set in environment variables.")
    write_cli_log("WARNING", "RAPIDAPI_KEY is not set")
    return True


def _print_config(config: Config):
    """Print the effective configuration with secrets masked."""
    headers = HeaderBuilder().build_rapidapi_headers(
        config.rapidapi.host, config.rapidapi.api_key
    )
    console.print(f"[bold]Listen:[/bold] {config.server.host}:{config.server.port}")
    console.print(f"[bold]Upstream:[/bold] {config.rapidapi.base_url}")
    for key, value in redact_headers(headers).items():
        console.print(f"[bold]{key}:[/bold] {value or '[dim]unset[/dim]'}")


def _print_help():
    """Print help message."""
    help_text = """
[bold cyan]YT Relay[/bold cyan]

Forwards /stream, /short, /search and /trend to the RapidAPI yt-api service.

[bold]Usage:[/bold]
    yt-relay              Start with live dashboard
    yt-relay --plain      Start with one log line per request
    yt-relay --check      Check RapidAPI key status
    yt-relay --config     Show effective configuration
    yt-relay --help       Show this help

[bold]Environment:[/bold]
    RAPIDAPI_KEY   RapidAPI key sent upstream (required for forwarding)
    PORT           Listening port (default 3000)
    HOST           Listening interface (default 0.0.0.0)
"""
    console.print(help_text)


if __name__ == "__main__":
    main()
