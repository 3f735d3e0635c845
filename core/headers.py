"""Header construction for upstream requests."""


class HeaderBuilder:
    """Build upstream headers for the RapidAPI gateway."""

    def build_rapidapi_headers(self, host: str, api_key: str) -> dict[str, str]:
        """Attach the RapidAPI host identifier and key."""
        return {
            "x-rapidapi-host": host,
            "x-rapidapi-key": api_key,
        }
