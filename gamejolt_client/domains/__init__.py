"""Typed records decoded from Game Jolt API payloads."""

from .trophy import (
    NOT_ACHIEVED,
    TrophyDifficulty,
    TrophyRecord,
    decode_trophies,
    decode_trophy,
)
from .user import UserRecord, UserStatus, UserType, decode_user, decode_users

__all__ = [
    "NOT_ACHIEVED",
    "TrophyDifficulty",
    "TrophyRecord",
    "UserRecord",
    "UserStatus",
    "UserType",
    "decode_trophies",
    "decode_trophy",
    "decode_user",
    "decode_users",
]
