"""Configuration models and loading."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError

DEFAULT_PORT = 3000


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


class RapidApiSettings(BaseModel):
    host: str = "yt-api.p.rapidapi.com"
    api_key: str = ""

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"


class Config(BaseModel):
    server: ServerSettings = Field(default_factory=ServerSettings)
    rapidapi: RapidApiSettings = Field(default_factory=RapidApiSettings)


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Load configuration from environment variables."""
    env = os.environ if environ is None else environ

    server: dict[str, str] = {}
    if env.get("HOST"):
        server["host"] = env["HOST"]
    if env.get("PORT"):
        server["port"] = env["PORT"]

    try:
        server_settings = ServerSettings.model_validate(server)
    except ValidationError:
        # Unparsable PORT: keep serving on the default
        server_settings = ServerSettings(host=server.get("host", "0.0.0.0"))

    return Config(
        server=server_settings,
        rapidapi=RapidApiSettings(api_key=env.get("RAPIDAPI_KEY", "")),
    )
