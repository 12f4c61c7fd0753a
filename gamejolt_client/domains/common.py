"""Field readers shared by the domain decoders."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any, TypeVar

from ..errors import GameJoltApiError, GameJoltDecodingError

_EnumT = TypeVar("_EnumT", bound=Enum)
_RecordT = TypeVar("_RecordT")


def read_str(obj: Mapping[str, Any], key: str) -> str:
    """Read a string field; absent or null becomes an empty string."""
    value = obj.get(key)
    if value is None:
        return ""
    return str(value)


def read_int(obj: Mapping[str, Any], key: str) -> int:
    """Read a required integer field (the API sends most numbers as strings)."""
    value = obj.get(key)
    if isinstance(value, bool) or (
        isinstance(value, float) and not value.is_integer()
    ):
        raise GameJoltDecodingError(f"Field '{key}' is not an integer")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as err:
        raise GameJoltDecodingError(f"Field '{key}' is not an integer") from err


def read_timestamp(obj: Mapping[str, Any], key: str) -> datetime:
    """Read a Unix epoch seconds field as an aware UTC datetime."""
    try:
        return datetime.fromtimestamp(read_int(obj, key), tz=UTC)
    except (OverflowError, OSError, ValueError) as err:
        raise GameJoltDecodingError(f"Field '{key}' is not a valid timestamp") from err


def read_enum(
    obj: Mapping[str, Any], key: str, enum_type: type[_EnumT], error: str
) -> _EnumT:
    """Map a wire label onto ``enum_type`` by exact, case-sensitive value.

    Raises:
        GameJoltApiError: With ``error`` as the message, for any label
            outside the enum's fixed set.
    """
    label = obj.get(key)
    for member in enum_type:
        if member.value == label:
            return member
    raise GameJoltApiError(error)


def decode_array(
    payload: Mapping[str, Any],
    key: str,
    decoder: Callable[[Mapping[str, Any]], _RecordT],
) -> list[_RecordT]:
    """Decode each element of ``payload[key]``; absent or null yields ``[]``."""
    items = payload.get(key)
    if items is None:
        return []
    if not isinstance(items, list):
        raise GameJoltDecodingError(f"Field '{key}' is not an array")
    records: list[_RecordT] = []
    for item in items:
        if not isinstance(item, Mapping):
            raise GameJoltDecodingError(f"Element of '{key}' is not an object")
        records.append(decoder(item))
    return records
