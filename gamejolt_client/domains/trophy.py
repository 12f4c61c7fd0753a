"""Trophy domain records."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .common import decode_array, read_enum, read_int, read_str

# Value of the ``achieved`` field for trophies the user has not achieved.
NOT_ACHIEVED = "false"


class TrophyDifficulty(Enum):
    """Trophy difficulty tiers, as labelled on the wire."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


@dataclass(frozen=True, slots=True)
class TrophyRecord:
    """A trophy as seen by the authenticated user.

    Attributes:
        id: Trophy ID.
        title: Trophy title.
        difficulty: Difficulty tier.
        description: Trophy description.
        image_url: URL of the trophy image.
        achieved: Human-readable achievement date (e.g. "3 days ago"), or
            ``NOT_ACHIEVED``.
    """

    id: int
    title: str
    difficulty: TrophyDifficulty
    description: str
    image_url: str
    achieved: str = NOT_ACHIEVED

    @property
    def is_achieved(self) -> bool:
        return self.achieved != NOT_ACHIEVED

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for wire format."""
        return {
            "id": self.id,
            "title": self.title,
            "difficulty": self.difficulty.value,
            "description": self.description,
            "image_url": self.image_url,
            "achieved": self.achieved,
        }

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Title: {self.title}, "
            f"Difficulty: {self.difficulty.value}, "
            f"Description: {self.description}, Achieved: {self.achieved}"
        )


def decode_trophy(obj: Mapping[str, Any]) -> TrophyRecord:
    """Decode a single trophy object."""
    achieved = obj.get("achieved")
    return TrophyRecord(
        id=read_int(obj, "id"),
        title=read_str(obj, "title"),
        difficulty=read_enum(
            obj, "difficulty", TrophyDifficulty, "Unknown trophy difficulty."
        ),
        description=read_str(obj, "description"),
        image_url=read_str(obj, "image_url"),
        # Some responses send a JSON false instead of the string.
        achieved=NOT_ACHIEVED if achieved in (None, False) else str(achieved),
    )


def decode_trophies(payload: Mapping[str, Any]) -> list[TrophyRecord]:
    """Decode the ``trophies`` array of a response payload."""
    return decode_array(payload, "trophies", decode_trophy)
