"""Pytest configuration and fixtures for gamejolt_client tests."""

from __future__ import annotations

import asyncio
import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from gamejolt_client import GameJoltApiClient, GameJoltConfig, GameJoltSession

GAME_ID = "12345"
GAME_KEY = "s3cr3t-key"
BASE_URL = "https://api.gamejolt.com/api/game/v1_2/"


def envelope(success: bool = True, **fields: Any) -> bytes:
    """Encode a server reply as the API wraps it."""
    response: dict[str, Any] = {"success": "true" if success else "false"}
    response.update(fields)
    return json.dumps({"response": response}).encode("utf-8")


def trophy_payload(**overrides: Any) -> dict[str, Any]:
    """Build a trophy object as the API returns it."""
    payload: dict[str, Any] = {
        "id": "7",
        "title": "First Blood",
        "difficulty": "Gold",
        "description": "Defeat the first boss.",
        "image_url": "https://m.gjcdn.net/trophy/7.png",
        "achieved": "3 days ago",
    }
    payload.update(overrides)
    return payload


def user_payload(**overrides: Any) -> dict[str, Any]:
    """Build a user object as the API returns it."""
    payload: dict[str, Any] = {
        "id": "42",
        "type": "Developer",
        "username": "alice",
        "avatar_url": "https://m.gjcdn.net/user-avatar/42.png",
        "signed_up": "4 years ago",
        "signed_up_timestamp": 1500000000,
        "last_logged_in": "Online Now",
        "last_logged_in_timestamp": 1700000000,
        "status": "Active",
        "developer_name": "Alice Games",
        "developer_website": "https://alice.example",
        "developer_description": "Makes games.",
    }
    payload.update(overrides)
    return payload


class StubTransport:
    """Transport that replays canned bodies and records requested URLs."""

    def __init__(self, *replies: bytes | BaseException) -> None:
        self.replies = list(replies)
        self.urls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.urls)

    async def get(self, url: str) -> bytes:
        self.urls.append(url)
        # Suspend once, like a real network round trip.
        await asyncio.sleep(0)
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def config() -> GameJoltConfig:
    return GameJoltConfig(game_id=GAME_ID, game_key=GAME_KEY)


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def client(config: GameJoltConfig, transport: StubTransport) -> GameJoltApiClient:
    return GameJoltApiClient(config, transport)


@pytest.fixture
def session(client: GameJoltApiClient) -> GameJoltSession:
    return GameJoltSession(client)


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


def create_mock_response(
    status: int = 200,
    read_data: bytes | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        read_data: Data to return from read() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if read_data is not None:
        response.read.return_value = read_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
