"""Signed-request client for the Game Jolt game API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from .config import SUPPORTED_API_VERSIONS, GameJoltConfig
from .errors import GameJoltConfigurationError, GameJoltDecodingError
from .http import GameJoltHttpTransport, GameJoltTransport
from .protocol import raise_for_envelope, unwrap_envelope
from .signing import SignedRequest

if TYPE_CHECKING:
    import aiohttp

_LOGGER = logging.getLogger(__name__)


class GameJoltApiClient:
    """Builds, signs and dispatches API calls, and unwraps the replies.

    Usage:
        async with aiohttp.ClientSession() as http:
            transport = GameJoltHttpTransport(http)
            client = GameJoltApiClient(GameJoltConfig("12345", "key"), transport)
            payload = await client.call("trophies/", ["username=a", "user_token=b"])
    """

    def __init__(self, config: GameJoltConfig, transport: GameJoltTransport) -> None:
        self._config = config
        self._transport = transport

    @classmethod
    def from_session(
        cls, session: aiohttp.ClientSession, config: GameJoltConfig
    ) -> GameJoltApiClient:
        """Create a client that sends requests over an aiohttp session."""
        return cls(
            config, GameJoltHttpTransport(session, timeout=config.request_timeout)
        )

    @property
    def config(self) -> GameJoltConfig:
        return self._config

    @property
    def base_url(self) -> str:
        """Base URL for the configured API version.

        Raises:
            GameJoltConfigurationError: If the version is not supported.
        """
        version = str(self._config.api_version)
        if version not in SUPPORTED_API_VERSIONS:
            raise GameJoltConfigurationError(f"Unsupported API version: {version}")
        return f"https://{self._config.api_host}/api/game/{version}/"

    def sign(self, endpoint: str, queries: Sequence[str] = ()) -> SignedRequest:
        """Sign a request for ``endpoint``; ``game_id`` is always the first query."""
        if not self._config.game_id or not self._config.game_key:
            raise GameJoltConfigurationError("Game ID and private key are required")
        return SignedRequest.build(
            self.base_url,
            endpoint,
            self._config.game_id,
            queries,
            self._config.game_key,
        )

    async def call(self, endpoint: str, queries: Sequence[str] = ()) -> dict[str, Any]:
        """Perform one API call and return the ``response`` payload.

        Raises:
            GameJoltConfigurationError: Before any network activity, if the
                configuration is unusable.
            GameJoltTransportError: On network, HTTP or decoding failure.
            GameJoltApiError: If the server reports ``success: "false"``.
        """
        request = self.sign(endpoint, queries)
        _LOGGER.debug(
            "[%s] GET %s (%d queries)",
            self._config.game_id,
            endpoint,
            len(request.queries),
        )
        body = await self._transport.get(request.url)
        envelope = unwrap_envelope(body)
        if not envelope.success:
            _LOGGER.warning(
                "[%s] %s rejected by server: %s",
                self._config.game_id,
                endpoint,
                envelope.message,
            )
        raise_for_envelope(envelope)
        return envelope.payload

    async def get_server_time(self, local_time: bool = True) -> datetime:
        """Return the server's current time.

        Args:
            local_time: Convert to the local time zone; otherwise UTC.
        """
        payload = await self.call("time/")
        timestamp = payload.get("timestamp")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, str)):
            raise GameJoltDecodingError("Server time has no valid timestamp")
        try:
            server_time = datetime.fromtimestamp(int(timestamp), tz=UTC)
        except (OverflowError, OSError, ValueError) as err:
            raise GameJoltDecodingError("Server time has no valid timestamp") from err
        return server_time.astimezone() if local_time else server_time
