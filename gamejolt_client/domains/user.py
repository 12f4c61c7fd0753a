"""User domain records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from .common import decode_array, read_enum, read_int, read_str, read_timestamp


class UserType(Enum):
    """Account types, as labelled on the wire."""

    USER = "User"
    DEVELOPER = "Developer"
    MODERATOR = "Moderator"
    ADMINISTRATOR = "Administrator"


class UserStatus(Enum):
    """Account status, as labelled on the wire."""

    ACTIVE = "Active"
    BANNED = "Banned"


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A Game Jolt user profile.

    Timestamps are kept twice: the server's display string (e.g. "2 weeks
    ago") and the parsed instant.

    Attributes:
        id: User ID.
        type: Account type.
        username: Login name.
        avatar_url: URL of the avatar image.
        signed_up: Display string for the sign-up date.
        signed_up_at: Sign-up instant (UTC).
        last_logged_in: Display string for the last login ("Online Now" while
            the user is playing).
        last_logged_in_at: Last login instant (UTC).
        status: Account status.
        display_name: Developer display name.
        website: Developer website.
        description: Developer profile description.
    """

    id: int
    type: UserType
    username: str
    avatar_url: str
    signed_up: str
    signed_up_at: datetime
    last_logged_in: str
    last_logged_in_at: datetime
    status: UserStatus
    display_name: str = ""
    website: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        return {
            "id": self.id,
            "type": self.type.value,
            "username": self.username,
            "avatar_url": self.avatar_url,
            "signed_up": self.signed_up,
            "signed_up_timestamp": int(self.signed_up_at.timestamp()),
            "last_logged_in": self.last_logged_in,
            "last_logged_in_timestamp": int(self.last_logged_in_at.timestamp()),
            "status": self.status.value,
            "developer_name": self.display_name,
            "developer_website": self.website,
            "developer_description": self.description,
        }


def decode_user(obj: Mapping[str, Any]) -> UserRecord:
    """Decode a single user object."""
    return UserRecord(
        id=read_int(obj, "id"),
        type=read_enum(obj, "type", UserType, "Unknown user type."),
        username=read_str(obj, "username"),
        avatar_url=read_str(obj, "avatar_url"),
        signed_up=read_str(obj, "signed_up"),
        signed_up_at=read_timestamp(obj, "signed_up_timestamp"),
        last_logged_in=read_str(obj, "last_logged_in"),
        last_logged_in_at=read_timestamp(obj, "last_logged_in_timestamp"),
        status=read_enum(obj, "status", UserStatus, "Unknown user status."),
        display_name=read_str(obj, "developer_name"),
        website=read_str(obj, "developer_website"),
        description=read_str(obj, "developer_description"),
    )


def decode_users(payload: Mapping[str, Any]) -> list[UserRecord]:
    """Decode the ``users`` array of a response payload."""
    return decode_array(payload, "users", decode_user)
