"""Test the aiohttp transport adapter."""

from __future__ import annotations

from unittest.mock import MagicMock

import aiohttp
import pytest
from yarl import URL

from gamejolt_client import GameJoltHttpTransport
from gamejolt_client.errors import (
    GameJoltConnectionError,
    GameJoltDecodingError,
    GameJoltResponseError,
    GameJoltTimeout,
    GameJoltTransportError,
)

from .conftest import create_mock_response

SIGNED_URL = (
    "https://api.gamejolt.com/api/game/v1_2/time/?game_id=12345"
    "&signature=0123456789abcdef0123456789abcdef"
)


class TestHttpTransport:
    """Test GameJoltHttpTransport.get()."""

    async def test_get_returns_body(self, mock_session: MagicMock) -> None:
        """200 response returns the raw body bytes."""
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.return_value = create_mock_response(
            status=200, read_data=b'{"response": {"success": "true"}}'
        )

        body = await transport.get(SIGNED_URL)

        assert body == b'{"response": {"success": "true"}}'
        mock_session.get.assert_called_once()

    async def test_url_sent_without_requoting(self, mock_session: MagicMock) -> None:
        """The signed URL is passed as a pre-encoded yarl URL."""
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.return_value = create_mock_response(read_data=b"{}")

        await transport.get(SIGNED_URL)

        sent = mock_session.get.call_args.args[0]
        assert isinstance(sent, URL)
        assert str(sent) == SIGNED_URL

    async def test_uses_configured_timeout(self, mock_session: MagicMock) -> None:
        transport = GameJoltHttpTransport(mock_session, timeout=3)
        mock_session.get.return_value = create_mock_response(read_data=b"{}")

        await transport.get(SIGNED_URL)

        timeout = mock_session.get.call_args.kwargs.get("timeout")
        assert timeout is not None
        assert timeout.total == 3

    async def test_non_200_raises_response_error(
        self, mock_session: MagicMock
    ) -> None:
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.return_value = create_mock_response(status=503)

        with pytest.raises(GameJoltResponseError, match="HTTP 503") as exc_info:
            await transport.get(SIGNED_URL)
        assert exc_info.value.status == 503

    async def test_timeout_raises_timeout(self, mock_session: MagicMock) -> None:
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.side_effect = TimeoutError("Request timed out")

        with pytest.raises(GameJoltTimeout, match="Request timed out"):
            await transport.get(SIGNED_URL)

    async def test_timeout_is_connection_error(self, mock_session: MagicMock) -> None:
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.side_effect = TimeoutError()

        with pytest.raises(GameJoltConnectionError):
            await transport.get(SIGNED_URL)

    async def test_client_error_raises_connection_error(
        self, mock_session: MagicMock
    ) -> None:
        transport = GameJoltHttpTransport(mock_session)
        mock_session.get.side_effect = aiohttp.ClientError("Connection refused")

        with pytest.raises(GameJoltConnectionError, match="Request failed"):
            await transport.get(SIGNED_URL)

    async def test_payload_error_raises_decoding_error(
        self, mock_session: MagicMock
    ) -> None:
        transport = GameJoltHttpTransport(mock_session)
        response = create_mock_response(status=200)
        response.read.side_effect = aiohttp.ClientPayloadError("truncated")
        mock_session.get.return_value = response

        with pytest.raises(GameJoltDecodingError) as exc_info:
            await transport.get(SIGNED_URL)
        assert isinstance(exc_info.value, GameJoltTransportError)
