"""RIPEMD-160 hasher with MD4-style final padding and a split byte counter."""

from __future__ import annotations

import struct

from digestkit.ripemd160 import _INITIAL_STATE, _compress

_MASK = 0xFFFFFFFF
RMD160_BLOCKBYTES = 64
RMD160_BLOCKWORDS = 16
RMD160_HASHBYTES = 20
RMD160_HASHWORDS = 5


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


def _finish(state: tuple[int, ...], tail: bytes, bytes_lo: int, bytes_hi: int) -> tuple[int, ...]:
    """Pad the trailing bytes, append the bit length and compress."""
    block = bytearray(RMD160_BLOCKBYTES)
    used = bytes_lo & 63
    block[:used] = tail[:used]
    block[used] = 0x80
    if used > 55:
        state = _compress(state, bytes(block))
        block = bytearray(RMD160_BLOCKBYTES)
    low_bits = (bytes_lo << 3) & _MASK
    high_bits = ((bytes_lo >> 29) | (bytes_hi << 3)) & _MASK
    block[56:64] = struct.pack("<2I", low_bits, high_bits)
    return _compress(state, bytes(block))


class RMD160:
    """Incremental RIPEMD-160 hasher."""

    name = "rmd160"
    digest_size = RMD160_HASHBYTES
    block_size = RMD160_BLOCKBYTES

    def __init__(self, data=b"") -> None:
        self._state = _INITIAL_STATE
        self._pending = b""
        self._bytes_lo = 0
        self._bytes_hi = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        raw = _as_bytes(data)
        total = self._bytes_lo + len(raw)
        self._bytes_hi = (self._bytes_hi + (total >> 32)) & _MASK
        self._bytes_lo = total & _MASK

        chunk = self._pending + raw
        full = len(chunk) - len(chunk) % RMD160_BLOCKBYTES
        state = self._state
        for offset in range(0, full, RMD160_BLOCKBYTES):
            state = _compress(state, chunk[offset:offset + RMD160_BLOCKBYTES])
        self._state = state
        self._pending = chunk[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        state = _finish(self._state, self._pending, self._bytes_lo, self._bytes_hi)
        return struct.pack("<5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "RMD160":
        """Return an independent copy of this hasher."""
        other = RMD160()
        other._state = self._state
        other._pending = self._pending
        other._bytes_lo = self._bytes_lo
        other._bytes_hi = self._bytes_hi
        return other


def rmd160_data(data) -> bytes:
    """Return the RIPEMD-160 digest of data."""
    return RMD160(data).digest()