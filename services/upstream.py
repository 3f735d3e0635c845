"""HTTP forwarding to the RapidAPI video-metadata service."""

from json import JSONDecodeError
from typing import Any

import httpx

from core.config import Config
from core.exceptions import (
    ConfigurationError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamResponseError,
)
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.request_types import UpstreamRequest


class UpstreamClient:
    """Forward one request to the upstream API and normalize failures."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: Config,
        logger: RequestLogger,
        header_builder: HeaderBuilder | None = None,
    ) -> None:
        self._client = client
        self._settings = config.rapidapi
        self._logger = logger
        self._headers = header_builder or HeaderBuilder()

    async def fetch(self, request: UpstreamRequest) -> Any:
        """Issue a single GET and return the parsed JSON body.

        Raises:
            ConfigurationError: RAPIDAPI_KEY is not set; nothing is sent.
            UpstreamError: Upstream answered with a non-2xx status.
            UpstreamConnectionError: Upstream could not be reached.
            UpstreamResponseError: A 2xx body was not valid JSON.
        """
        if not self._settings.api_key:
            raise ConfigurationError("Server configuration error: RAPIDAPI_KEY not set.")

        url = request.url(self._settings.base_url)
        # Full URL, caller-supplied values included
        self._logger.log_request(request.kind, url)

        headers = self._headers.build_rapidapi_headers(
            self._settings.host, self._settings.api_key
        )
        try:
            response = await self._client.get(url, headers=headers)
        except httpx.RequestError as e:
            self._logger.log_error(request.kind, 500, str(e))
            raise UpstreamConnectionError(f"Upstream connection error: {e}") from e

        if not response.is_success:
            details = self._error_details(response)
            self._logger.log_error(request.kind, response.status_code, response.text)
            raise UpstreamError(
                f"External RapidAPI request failed ({request.kind}).",
                status_code=response.status_code,
                details=details,
            )

        try:
            return response.json()
        except (JSONDecodeError, UnicodeDecodeError) as e:
            self._logger.log_error(request.kind, response.status_code, "Invalid JSON body")
            raise UpstreamResponseError(f"Invalid JSON from upstream ({request.kind}).") from e

    @staticmethod
    def _error_details(response: httpx.Response) -> Any:
        """Upstream error body as JSON, or as text when it is not JSON."""
        try:
            return response.json()
        except (JSONDecodeError, UnicodeDecodeError):
            return response.text
