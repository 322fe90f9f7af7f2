"""HTTP access to the RapidAPI Yahoo Finance provider."""

from typing import Any

import httpx

from stockr.config import Settings
from stockr.errors import DecodeError, NetworkError
from stockr.logging import logger


class RapidApiClient:
    """
    🔌 Thin async client for the quote provider.

    Every request is a single GET carrying the two RapidAPI credential
    headers. A fresh ``httpx.AsyncClient`` is opened per call, so the
    client itself holds no connection state.
    """

    def __init__(
        self,
        api_key: str,
        api_host: str,
        base_url: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: RapidAPI key sent as ``x-rapidapi-key``
            api_host: RapidAPI host sent as ``x-rapidapi-host``
            base_url: Base URL for requests (defaults to ``https://{api_host}``)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.api_key = api_key
        self.api_host = api_host
        self.base_url = base_url or f"https://{api_host}"
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "RapidApiClient":
        if not settings.rapidapi_key:
            raise ValueError("RAPIDAPI_KEY is not configured")
        return cls(
            api_key=settings.rapidapi_key,
            api_host=settings.rapidapi_host,
            base_url=settings.get_api_base_url(),
            timeout=settings.request_timeout,
            transport=transport,
        )

    def headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.api_host,
            "accept": "application/json",
        }

    async def get_json(self, path: str, params: dict[str, str]) -> Any:
        """
        📥 GET ``path`` and return the decoded JSON body.

        Query parameters are percent-encoded by httpx.

        Raises:
            NetworkError: transport failure, timeout or non-2xx status
            DecodeError: the body is not valid JSON
        """
        logger.debug("GET {path} params={params}", path=path, params=params)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params, headers=self.headers())
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {path} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {path} is not valid JSON: {e}") from e
