"""RapidAPI credential status - the key comes from RAPIDAPI_KEY."""

from rich.console import Console

from core.config import Config, load_config
from ui.log_utils import mask_secret

console = Console()


def has_credentials(config: Config) -> bool:
    return bool(config.rapidapi.api_key)


def check_auth(config: Config) -> bool:
    """Print whether forwarding can authenticate upstream."""
    if has_credentials(config):
        key = mask_secret(config.rapidapi.api_key)
        console.print(f"[green]Configured[/green] RapidAPI key {key} for {config.rapidapi.host}")
        return True
    console.print("[yellow]Not configured[/yellow]")
    console.print("\n[dim]Set the RapidAPI key before starting the relay:[/dim]")
    console.print("  export RAPIDAPI_KEY=...")
    return False


def main():
    """CLI entry point for auth check."""
    check_auth(load_config())


if __name__ == "__main__":
    main()
