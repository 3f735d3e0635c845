"""Shared fixtures: a recording logger and a relay wired to a mock upstream."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config, RapidApiSettings
from doubles import MockUpstream, RecordingLogger


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def config() -> Config:
    return Config(rapidapi=RapidApiSettings(api_key="test-key-1234567890"))


@pytest.fixture
def make_client(config: Config, logger: RecordingLogger):
    """Return a factory building a TestClient around a mock upstream."""
    clients: list[TestClient] = []

    def factory(
        upstream: MockUpstream,
        cfg: Config | None = None,
        *,
        raise_server_exceptions: bool = True,
    ) -> TestClient:
        app = create_app(
            cfg if cfg is not None else config,
            logger,
            transport=httpx.MockTransport(upstream),
        )
        client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)
