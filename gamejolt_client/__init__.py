"""Asyncio client for the Game Jolt game API."""

__version__ = "0.1.0"

from .client import GameJoltApiClient
from .config import SUPPORTED_API_VERSIONS, ApiVersion, GameJoltConfig
from .domains import (
    TrophyDifficulty,
    TrophyRecord,
    UserRecord,
    UserStatus,
    UserType,
)
from .errors import (
    GameJoltApiError,
    GameJoltAuthorizationError,
    GameJoltClientError,
    GameJoltConfigurationError,
    GameJoltConnectionError,
    GameJoltDecodingError,
    GameJoltResponseError,
    GameJoltSessionBusyError,
    GameJoltTimeout,
    GameJoltTransportError,
)
from .http import GameJoltHttpTransport, GameJoltTransport
from .protocol import ResponseEnvelope, unwrap_envelope
from .session import (
    Credential,
    GameJoltSession,
    SessionState,
    TrophyEvent,
    TrophyEventType,
)
from .signing import SignedRequest, sign_url

__all__ = [
    "SUPPORTED_API_VERSIONS",
    "ApiVersion",
    "Credential",
    "GameJoltApiClient",
    "GameJoltApiError",
    "GameJoltAuthorizationError",
    "GameJoltClientError",
    "GameJoltConfig",
    "GameJoltConfigurationError",
    "GameJoltConnectionError",
    "GameJoltDecodingError",
    "GameJoltHttpTransport",
    "GameJoltResponseError",
    "GameJoltSession",
    "GameJoltSessionBusyError",
    "GameJoltTimeout",
    "GameJoltTransport",
    "GameJoltTransportError",
    "ResponseEnvelope",
    "SessionState",
    "SignedRequest",
    "TrophyDifficulty",
    "TrophyEvent",
    "TrophyEventType",
    "TrophyRecord",
    "UserRecord",
    "UserStatus",
    "UserType",
    "__version__",
    "sign_url",
    "unwrap_envelope",
]
