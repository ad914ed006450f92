"""RIPEMD-160 message digest with a hashlib-like interface."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 20
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

_R_LEFT = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_R_RIGHT = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_S_LEFT = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_S_RIGHT = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)
_K_LEFT = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_K_RIGHT = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & _MASK & z)


def _f3(x: int, y: int, z: int) -> int:
    return (x | (~y & _MASK)) ^ z


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (~z & _MASK & y)


def _f5(x: int, y: int, z: int) -> int:
    return x ^ (y | (~z & _MASK))


_F_LEFT = (_f1, _f2, _f3, _f4, _f5)
_F_RIGHT = (_f5, _f4, _f3, _f2, _f1)


def _line(state, words, order, shifts, funcs, constants):
    a, b, c, d, e = state
    for step, (index, shift) in enumerate(zip(order, shifts)):
        rnd = step // 16
        t = _rol((a + funcs[rnd](b, c, d) + words[index] + constants[rnd]) & _MASK, shift)
        t = (t + e) & _MASK
        a, b, c, d, e = e, t, b, _rol(c, 10), d
    return a, b, c, d, e


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    words = struct.unpack("<16I", block)
    a1, b1, c1, d1, e1 = _line(state, words, _R_LEFT, _S_LEFT, _F_LEFT, _K_LEFT)
    a2, b2, c2, d2, e2 = _line(state, words, _R_RIGHT, _S_RIGHT, _F_RIGHT, _K_RIGHT)
    h0, h1, h2, h3, h4 = state
    return (
        (h1 + c1 + d2) & _MASK,
        (h2 + d1 + e2) & _MASK,
        (h3 + e1 + a2) & _MASK,
        (h4 + a1 + b2) & _MASK,
        (h0 + b1 + c2) & _MASK,
    )


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


class RIPEMD160:
    """Incremental RIPEMD-160 hasher."""

    name = "ripemd160"
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
        chunk = self._buffer + _as_bytes(data)
        self._length += len(chunk) - len(self._buffer)
        full = len(chunk) - len(chunk) % _BLOCK_SIZE
        state = self._state
        for offset in range(0, full, _BLOCK_SIZE):
            state = _compress(state, chunk[offset:offset + _BLOCK_SIZE])
        self._state = state
        self._buffer = chunk[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        pad_len = 1 + (119 - self._length % 64) % 64
        tail = self._buffer + b"\x80" + bytes(pad_len - 1)
        tail += struct.pack("<Q", (self._length << 3) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + _BLOCK_SIZE])
        return struct.pack("<5I", *state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "RIPEMD160":
        """Return an independent copy of this hasher."""
        other = RIPEMD160()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def ripemd160(data) -> bytes:
    """Return the RIPEMD-160 digest of data."""
    return RIPEMD160(data).digest()


def ripemd160_32(data) -> bytes:
    """Digest exactly 32 bytes in a single compression."""
    raw = _as_bytes(data)
    if len(raw) != 32:
        raise ValueError(f"expected 32 bytes, got {len(raw)}")
    block = raw + b"\x80" + bytes(23) + struct.pack("<Q", 32 << 3)
    return struct.pack("<5I", *_compress(_INITIAL_STATE, block))


def ripemd160_hex(digest) -> str:
    """Format a 20-byte digest as lowercase hex."""
    raw = _as_bytes(digest)
    if len(raw) != _DIGEST_SIZE:
        raise ValueError(f"expected a {_DIGEST_SIZE}-byte digest, got {len(raw)}")
    return raw.hex()


def ripemd160_comp_hash(h0, h1) -> bool:
    """Tell whether the first 20 bytes of two hashes are equal."""
    a = _as_bytes(h0)
    b = _as_bytes(h1)
    if len(a) < _DIGEST_SIZE or len(b) < _DIGEST_SIZE:
        raise ValueError(f"hashes must hold at least {_DIGEST_SIZE} bytes")
    return a[:_DIGEST_SIZE] == b[:_DIGEST_SIZE]