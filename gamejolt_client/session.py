"""Authenticated player session for the Game Jolt game API.

The session owns the player's credential and the authentication state
machine::

    UNAUTHENTICATED -> AUTHENTICATING -> AUTHENTICATED
          ^                  |                 |
          +---- failure -----+                 |
                             ^-- forced=True --+

Trophy and user operations are only legal while AUTHENTICATED; anything else
fails locally without touching the network. Listeners registered with
``on_authenticated``/``on_trophy`` are notified only after the server has
confirmed the change.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from .client import GameJoltApiClient
from .domains import (
    TrophyRecord,
    UserRecord,
    decode_trophies,
    decode_users,
)
from .errors import (
    GameJoltApiError,
    GameJoltAuthorizationError,
    GameJoltSessionBusyError,
)
from .protocol import build_query, join_values

_LOGGER = logging.getLogger(__name__)

_EventT = TypeVar("_EventT")

AuthenticatedCallback = Callable[[], Awaitable[None] | None]
TrophyCallback = Callable[["TrophyEvent"], Awaitable[None] | None]


class SessionState(Enum):
    """Authentication state of a session."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class TrophyEventType(Enum):
    """Kind of trophy change confirmed by the server."""

    GRANT = "grant"
    REVOKE = "revoke"


@dataclass(frozen=True, slots=True)
class Credential:
    """Username/token pair of an authenticated player."""

    username: str = ""
    token: str = ""

    def __bool__(self) -> bool:
        return bool(self.username and self.token)

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, token='***')"


@dataclass(frozen=True, slots=True)
class TrophyEvent:
    """Notification payload for a granted or revoked trophy."""

    kind: TrophyEventType
    trophy_id: int


class GameJoltSession:
    """Authentication state machine and player-scoped API operations.

    Usage:
        session = GameJoltSession(client)
        session.on_trophy(my_trophy_handler)
        await session.authenticate("alice", "tok123")
        await session.grant_trophy(1234)
        trophies = await session.list_trophies(all=False, achieved=True)
    """

    def __init__(self, client: GameJoltApiClient) -> None:
        self._client = client
        self._state = SessionState.UNAUTHENTICATED
        self._credential = Credential()

        # Listeners
        self._authenticated_callbacks: list[AuthenticatedCallback] = []
        self._trophy_callbacks: list[TrophyCallback] = []

    # -------------------------------------------------------------------------
    # Public API: State
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def username(self) -> str:
        return self._credential.username

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    @property
    def is_authenticating(self) -> bool:
        return self._state is SessionState.AUTHENTICATING

    # -------------------------------------------------------------------------
    # Public API: Callbacks
    # -------------------------------------------------------------------------

    def on_authenticated(self, callback: AuthenticatedCallback) -> Callable[[], None]:
        """Register a listener for successful authentication.

        Returns:
            A function that removes the listener.
        """
        return _subscribe(self._authenticated_callbacks, callback)

    def on_trophy(self, callback: TrophyCallback) -> Callable[[], None]:
        """Register a listener for server-confirmed trophy grants and revokes.

        Returns:
            A function that removes the listener.
        """
        return _subscribe(self._trophy_callbacks, callback)

    # -------------------------------------------------------------------------
    # Public API: Authentication
    # -------------------------------------------------------------------------

    async def authenticate(
        self, username: str, token: str, *, forced: bool = False
    ) -> None:
        """Authenticate a player with their username and game token.

        Args:
            username: The player's Game Jolt username.
            token: The player's game token.
            forced: Re-authenticate even if already authenticated.

        Raises:
            GameJoltSessionBusyError: If an attempt is already in flight, or
                the session is authenticated and ``forced`` is false. No
                request is made.
            GameJoltApiError: If ``username`` or ``token`` is empty. No
                request is made and the state is unchanged.
            GameJoltClientError: Whatever the API call raised. The session is
                reset to UNAUTHENTICATED with an empty credential first.
        """
        # Checked and set before the first await, so a concurrent attempt can
        # never get past this point.
        if self._state is SessionState.AUTHENTICATING or (
            self._state is SessionState.AUTHENTICATED and not forced
        ):
            _LOGGER.warning(
                "[%s] Already authenticated or is currently authenticating",
                self._credential.username or username,
            )
            raise GameJoltSessionBusyError(
                "Already authenticated or is currently authenticating."
            )

        if not username or not token:
            _LOGGER.warning("Attempt to authenticate without a username or token")
            raise GameJoltApiError("Username and token are required.")

        _LOGGER.info("[%s] Attempting to authenticate", username)
        self._set_state(SessionState.AUTHENTICATING)
        try:
            await self._client.call(
                "users/auth/",
                [build_query("username", username), build_query("user_token", token)],
            )
        except BaseException:
            # Includes cancellation; never stay in AUTHENTICATING.
            self._credential = Credential()
            self._set_state(SessionState.UNAUTHENTICATED)
            _LOGGER.warning("[%s] Authentication failed", username)
            raise

        self._credential = Credential(username, token)
        self._set_state(SessionState.AUTHENTICATED)
        _LOGGER.info("[%s] Successfully authenticated", username)
        await self._notify(self._authenticated_callbacks, "Authenticated")

    # -------------------------------------------------------------------------
    # Public API: Users
    # -------------------------------------------------------------------------

    async def fetch_users(
        self, users: Sequence[str | int], *, by_id: bool = False
    ) -> list[UserRecord]:
        """Fetch user profiles by username, or by user ID when ``by_id``."""
        self._require_authenticated(
            "Attempt to fetch user data without an authenticated user."
        )
        key = "user_id" if by_id else "username"
        csv = join_values(users)
        _LOGGER.debug("[%s] Fetching user data for %s", self.username, csv)
        payload = await self._client.call("users/", [build_query(key, csv)])
        return decode_users(payload)

    async def fetch_user(self, user: str | int, *, by_id: bool = False) -> UserRecord:
        """Fetch a single user profile.

        Raises:
            GameJoltApiError: If the server returned no matching user.
        """
        users = await self.fetch_users([user], by_id=by_id)
        if not users:
            raise GameJoltApiError(f"User {user} not found.")
        return users[0]

    # -------------------------------------------------------------------------
    # Public API: Trophies
    # -------------------------------------------------------------------------

    async def grant_trophy(self, trophy_id: int) -> None:
        """Mark a trophy as achieved by the authenticated player."""
        self._require_authenticated(
            "Attempt to grant trophy without an authenticated user."
        )
        _LOGGER.debug("[%s] Granting trophy %d", self.username, trophy_id)
        await self._client.call(
            "trophies/add-achieved/", self._trophy_queries(trophy_id)
        )
        _LOGGER.info("[%s] Trophy %d granted", self.username, trophy_id)
        await self._notify(
            self._trophy_callbacks,
            "Trophy",
            TrophyEvent(TrophyEventType.GRANT, trophy_id),
        )

    async def revoke_trophy(self, trophy_id: int) -> None:
        """Remove a trophy from the authenticated player."""
        self._require_authenticated(
            "Attempt to revoke trophy without an authenticated user."
        )
        _LOGGER.debug("[%s] Revoking trophy %d", self.username, trophy_id)
        await self._client.call(
            "trophies/remove-achieved/", self._trophy_queries(trophy_id)
        )
        _LOGGER.info("[%s] Trophy %d revoked", self.username, trophy_id)
        await self._notify(
            self._trophy_callbacks,
            "Trophy",
            TrophyEvent(TrophyEventType.REVOKE, trophy_id),
        )

    async def fetch_trophy(self, trophy_id: int) -> TrophyRecord:
        """Fetch one trophy, including its achieved state for the player.

        Raises:
            GameJoltApiError: If the server returned no matching trophy.
        """
        self._require_authenticated(
            "Attempt to fetch trophy data without an authenticated user."
        )
        _LOGGER.debug("[%s] Fetching trophy data for %d", self.username, trophy_id)
        payload = await self._client.call("trophies/", self._trophy_queries(trophy_id))
        trophies = decode_trophies(payload)
        if not trophies:
            raise GameJoltApiError(f"Trophy {trophy_id} not found.")
        return trophies[0]

    async def list_trophies(
        self, *, all: bool = True, achieved: bool = True
    ) -> list[TrophyRecord]:
        """List the game's trophies.

        Args:
            all: Return every trophy; ``achieved`` is ignored when set.
            achieved: Only achieved trophies if true, only unachieved if false.
        """
        self._require_authenticated(
            "Attempt to list trophies without an authenticated user."
        )
        queries = self._credential_queries()
        if not all:
            queries.append(build_query("achieved", achieved))
        _LOGGER.debug("[%s] Fetching trophy list", self.username)
        payload = await self._client.call("trophies/", queries)
        return decode_trophies(payload)

    # -------------------------------------------------------------------------
    # Public API: Misc
    # -------------------------------------------------------------------------

    async def get_server_time(self, local_time: bool = True) -> datetime:
        """Return the server's current time. Does not require authentication."""
        return await self._client.get_server_time(local_time)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _set_state(self, state: SessionState) -> None:
        if self._state is not state:
            _LOGGER.debug(
                "[%s] State: %s → %s",
                self._credential.username or "-",
                self._state.value,
                state.value,
            )
            self._state = state

    def _require_authenticated(self, message: str) -> None:
        if self._state is not SessionState.AUTHENTICATED:
            _LOGGER.warning(message)
            raise GameJoltAuthorizationError(message)

    def _credential_queries(self) -> list[str]:
        return [
            build_query("username", self._credential.username),
            build_query("user_token", self._credential.token),
        ]

    def _trophy_queries(self, trophy_id: int) -> list[str]:
        return [*self._credential_queries(), build_query("trophy_id", trophy_id)]

    async def _notify(
        self, callbacks: list[Callable[..., Any]], name: str, *args: Any
    ) -> None:
        # Snapshot so listeners may unsubscribe while being notified.
        for callback in list(callbacks):
            try:
                result = callback(*args)
                if inspect.isawaitable(result):
                    await result
            except Exception as err:
                _LOGGER.exception(
                    "[%s] %s callback error: %s", self.username, name, err
                )


def _subscribe(
    callbacks: list[_EventT], callback: _EventT
) -> Callable[[], None]:
    callbacks.append(callback)

    def _unsubscribe() -> None:
        if callback in callbacks:
            callbacks.remove(callback)

    return _unsubscribe
