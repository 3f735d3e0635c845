"""Tests for CLI startup checks."""

from io import StringIO

from rich.console import Console

import cli
from core.config import Config, RapidApiSettings


def captured_console() -> tuple[Console, StringIO]:
    output = StringIO()
    return Console(file=output, width=200), output


class TestWarnMissingKey:
    def test_warns_and_logs_when_key_unset(self, monkeypatch):
        logged = []
        monkeypatch.setattr(cli, "write_cli_log", lambda *args, **kwargs: logged.append(args))
        out, output = captured_console()

        assert cli._warn_missing_key(Config(), out) is True

        assert "WARNING: RAPIDAPI_KEY is not set in environment variables." in output.getvalue()
        assert logged == [("WARNING", "RAPIDAPI_KEY is not set")]

    def test_silent_when_key_configured(self, monkeypatch):
        logged = []
        monkeypatch.setattr(cli, "write_cli_log", lambda *args, **kwargs: logged.append(args))
        out, output = captured_console()
        config = Config(rapidapi=RapidApiSettings(api_key="secret"))

        assert cli._warn_missing_key(config, out) is False

        assert output.getvalue() == ""
        assert logged == []
