"""Request signing for the Game Jolt game API.

Every request is a GET whose full URL, minus the trailing signature, is
concatenated with the game's private key and hashed. The server recomputes
the digest from the URL it received, so the canonical string below must be
byte-for-byte what goes over the wire.

The server expects MD5. This is an interop contract, not a security choice.
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterable
from dataclasses import dataclass


def canonical_request(
    base_url: str, endpoint: str, game_id: str, queries: Iterable[str]
) -> str:
    """Build the unsigned request URL.

    ``game_id`` always comes first; ``queries`` follow in caller order.
    """
    request = f"{base_url}{endpoint}?game_id={game_id}"
    for query in queries:
        request += f"&{query}"
    return request


def compute_signature(data: str, secret: str) -> str:
    """Return the 32-character lowercase hex digest of ``data + secret``."""
    return hashlib.md5((data + secret).encode("utf-8")).hexdigest().zfill(32)


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """A fully signed request. Built fresh for every call."""

    base_url: str
    endpoint: str
    game_id: str
    queries: tuple[str, ...]
    signature: str

    @classmethod
    def build(
        cls,
        base_url: str,
        endpoint: str,
        game_id: str,
        queries: Iterable[str],
        secret: str,
    ) -> SignedRequest:
        """Sign a request from its parts."""
        queries = tuple(queries)
        unsigned = canonical_request(base_url, endpoint, game_id, queries)
        return cls(
            base_url=base_url,
            endpoint=endpoint,
            game_id=game_id,
            queries=queries,
            signature=compute_signature(unsigned, secret),
        )

    @property
    def unsigned_url(self) -> str:
        return canonical_request(
            self.base_url, self.endpoint, self.game_id, self.queries
        )

    @property
    def url(self) -> str:
        return f"{self.unsigned_url}&signature={self.signature}"


def sign_url(
    base_url: str,
    endpoint: str,
    game_id: str,
    queries: Iterable[str],
    secret: str,
) -> str:
    """Return the final request URL with ``&signature=<digest>`` appended."""
    return SignedRequest.build(base_url, endpoint, game_id, queries, secret).url
