"""Client configuration for the Game Jolt game API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_API_HOST = "api.gamejolt.com"
DEFAULT_REQUEST_TIMEOUT = 10.0


class ApiVersion(StrEnum):
    """Known API versions. Only those in SUPPORTED_API_VERSIONS can be used."""

    V1_2 = "v1_2"


SUPPORTED_API_VERSIONS: tuple[str, ...] = (ApiVersion.V1_2,)


@dataclass(frozen=True, slots=True)
class GameJoltConfig:
    """Per-game settings, created once and shared by a client.

    Attributes:
        game_id: The game's numeric ID, as shown on the game dashboard.
        game_key: The game's private key, used only for signing.
        api_version: API version path segment.
        api_host: Host serving the game API.
        request_timeout: Total timeout for a single request (seconds).
    """

    game_id: str
    game_key: str
    api_version: ApiVersion | str = ApiVersion.V1_2
    api_host: str = DEFAULT_API_HOST
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __repr__(self) -> str:
        return (
            f"GameJoltConfig(game_id={self.game_id!r}, game_key='***', "
            f"api_version={str(self.api_version)!r}, api_host={self.api_host!r}, "
            f"request_timeout={self.request_timeout!r})"
        )
