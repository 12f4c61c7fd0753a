"""Client error types for Game Jolt API interactions."""

from __future__ import annotations


class GameJoltClientError(Exception):
    """Base error for Game Jolt client failures."""


class GameJoltTransportError(GameJoltClientError):
    """Failure below the application layer (network, HTTP or payload)."""


class GameJoltConnectionError(GameJoltTransportError):
    """Network connection to the API host failed."""


class GameJoltTimeout(GameJoltConnectionError):
    """Timeout while communicating with the API host."""


class GameJoltResponseError(GameJoltTransportError):
    """HTTP response error from the API host."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class GameJoltDecodingError(GameJoltTransportError):
    """Response body could not be decoded into the expected shape."""


class GameJoltApiError(GameJoltClientError):
    """The server rejected the request, or returned a value we cannot accept."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class GameJoltAuthorizationError(GameJoltClientError):
    """Operation requires an authenticated session."""


class GameJoltSessionBusyError(GameJoltClientError):
    """Authentication rejected: already authenticated or authenticating."""


class GameJoltConfigurationError(GameJoltClientError):
    """Client configuration is invalid or unsupported."""
