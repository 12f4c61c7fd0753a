"""HTTP transport for Game Jolt API requests."""

from __future__ import annotations

from typing import Protocol

import aiohttp
from yarl import URL

from .config import DEFAULT_REQUEST_TIMEOUT
from .errors import (
    GameJoltConnectionError,
    GameJoltDecodingError,
    GameJoltResponseError,
    GameJoltTimeout,
)


class GameJoltTransport(Protocol):
    """Issues a single GET and returns the raw response body."""

    async def get(self, url: str) -> bytes:
        """Fetch ``url``.

        Raises:
            GameJoltTransportError: On any failure below the application layer.
        """
        ...


class GameJoltHttpTransport:
    """aiohttp-backed transport. The caller owns the ClientSession."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._session = session
        self._timeout = timeout

    async def get(self, url: str) -> bytes:
        """Send a GET request and return the body of a 200 response."""
        # The URL is already signed; re-quoting it would break the signature.
        request_url = URL(url, encoded=True)
        try:
            async with self._session.get(
                request_url,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    raise GameJoltResponseError(
                        resp.status, f"Request failed with HTTP {resp.status}"
                    )
                return await resp.read()
        except TimeoutError as err:
            raise GameJoltTimeout("Request timed out") from err
        except aiohttp.ClientPayloadError as err:
            raise GameJoltDecodingError("Failed to read response body") from err
        except aiohttp.ClientError as err:
            raise GameJoltConnectionError("Request failed") from err
