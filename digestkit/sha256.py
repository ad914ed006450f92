"""SHA-256 message digest with a hashlib-like interface."""

from __future__ import annotations

import os
import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 32
_FILE_CHUNK = 8192

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _schedule(block: bytes) -> list[int]:
    words = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        w15 = words[i - 15]
        w2 = words[i - 2]
        s0 = _ror(w15, 7) ^ _ror(w15, 18) ^ (w15 >> 3)
        s1 = _ror(w2, 17) ^ _ror(w2, 19) ^ (w2 >> 10)
        words.append((words[i - 16] + s0 + words[i - 7] + s1) & _MASK)
    return words


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Process one 64-byte block and return the new state."""
    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K, _schedule(block)):
        big_s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + ch + k + w) & _MASK
        big_s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK, c, b, a, (t1 + t2) & _MASK
    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e, f, g, h)))


def _pack(state: tuple[int, ...]) -> bytes:
    return struct.pack(">8I", *state)


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


def _single_block(raw: bytes, expected: int) -> bytes:
    if len(raw) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(raw)}")
    total = len(raw) + 1 + 8
    padded = raw + b"\x80" + bytes(-total % _BLOCK_SIZE) + struct.pack(">Q", expected << 3)
    state = _INITIAL_STATE
    for offset in range(0, len(padded), _BLOCK_SIZE):
        state = _compress(state, padded[offset:offset + _BLOCK_SIZE])
    return _pack(state)


class SHA256:
    """Incremental SHA-256 hasher."""

    name = "sha256"
    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data=b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        raw = _as_bytes(data)
        self._length += len(raw)
        chunk = self._buffer + raw
        full = len(chunk) - len(chunk) % _BLOCK_SIZE
        state = self._state
        for offset in range(0, full, _BLOCK_SIZE):
            state = _compress(state, chunk[offset:offset + _BLOCK_SIZE])
        self._state = state
        self._buffer = chunk[full:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        pad_len = 1 + (119 - self._length % 64) % 64
        tail = self._buffer + b"\x80" + bytes(pad_len - 1)
        tail += struct.pack(">Q", (self._length << 3) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + _BLOCK_SIZE])
        return _pack(state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "SHA256":
        """Return an independent copy of this hasher."""
        other = SHA256()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def sha256(data) -> bytes:
    """Return the SHA-256 digest of data."""
    return SHA256(data).digest()


def sha256_33(data) -> bytes:
    """Digest exactly 33 bytes (a compressed public key) in one block."""
    return _single_block(_as_bytes(data), 33)


def sha256_65(data) -> bytes:
    """Digest exactly 65 bytes (an uncompressed public key) in two blocks."""
    return _single_block(_as_bytes(data), 65)


def sha256_hex(digest) -> str:
    """Format a 32-byte digest as lowercase hex."""
    raw = _as_bytes(digest)
    if len(raw) != _DIGEST_SIZE:
        raise ValueError(f"expected a {_DIGEST_SIZE}-byte digest, got {len(raw)}")
    return raw.hex()


def sha256_file(path: str | os.PathLike) -> bytes:
    """Return the SHA-256 digest of a file's contents."""
    hasher = SHA256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_FILE_CHUNK), b""):
            hasher.update(chunk)
    return hasher.digest()