"""Four-byte double SHA-256 checksum of a short payload."""

from __future__ import annotations

from digestkit.sha256 import sha256

_MAX_PAYLOAD = 55
CHECKSUM_SIZE = 4


def sha256_checksum(data) -> bytes:
    """Return the first four bytes of SHA-256(SHA-256(data)).

    The payload must fit with its padding in a single 64-byte block,
    so at most 55 bytes are accepted.
    """
    raw = memoryview(data).tobytes()
    if len(raw) > _MAX_PAYLOAD:
        raise ValueError(
            f"payload must be at most {_MAX_PAYLOAD} bytes, got {len(raw)}"
        )
    return sha256(sha256(raw))[:CHECKSUM_SIZE]