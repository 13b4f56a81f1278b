"""Async HTTP client built on curl_cffi."""

import json
from dataclasses import dataclass
from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger


class NetworkError(Exception):
    """Request did not produce an HTTP response (DNS, TLS, timeout, reset...)."""

    pass


@dataclass
class HTTPResponse:
    """Status and decoded body of a finished request."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decoded JSON body, or None when the body is empty or not JSON."""
        if not self.text:
            return None
        try:
            return json.loads(self.text)
        except ValueError:
            return None


class AsyncHTTPClient:
    """Thin wrapper over curl_cffi that opens a session per request."""

    def __init__(self, timeout: float = 30.0):
        """
        Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        """
        Send a request and return the response regardless of its status code.

        Raises:
            NetworkError: If no response was received
        """
        logger.debug(f"{method} {url}")

        try:
            async with AsyncSession(timeout=self.timeout) as session:
                response = await session.request(method, url, headers=headers, json=json_body)
        except CurlError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return HTTPResponse(status_code=response.status_code, text=response.text)

