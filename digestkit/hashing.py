"""One-shot SHA-256, RIPEMD-160 and Keccak-256 helpers."""

from __future__ import annotations

import hashlib
import os

from Crypto.Hash import RIPEMD160 as _RIPEMD160
from Crypto.Hash import keccak as _keccak

_FILE_CHUNK = 8192


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


def _same_length(blocks: tuple[bytes, ...]) -> None:
    if len({len(block) for block in blocks}) != 1:
        raise ValueError("all four inputs must have the same length")


def sha256(data) -> bytes:
    """Return the SHA-256 digest of data."""
    return hashlib.sha256(_as_bytes(data)).digest()


def rmd160(data) -> bytes:
    """Return the RIPEMD-160 digest of data."""
    return _RIPEMD160.new(_as_bytes(data)).digest()


def keccak(data) -> bytes:
    """Return the original Keccak-256 digest of data (not SHA3-256)."""
    return _keccak.new(digest_bits=256, data=_as_bytes(data)).digest()


def sha256_4(data0, data1, data2, data3) -> tuple[bytes, bytes, bytes, bytes]:
    """Hash four equal-length inputs with SHA-256."""
    blocks = tuple(_as_bytes(d) for d in (data0, data1, data2, data3))
    _same_length(blocks)
    return tuple(sha256(block) for block in blocks)


def rmd160_4(data0, data1, data2, data3) -> tuple[bytes, bytes, bytes, bytes]:
    """Hash four equal-length inputs with RIPEMD-160."""
    blocks = tuple(_as_bytes(d) for d in (data0, data1, data2, data3))
    _same_length(blocks)
    return tuple(rmd160(block) for block in blocks)


def sha256_file(path: str | os.PathLike) -> bytes:
    """Return the SHA-256 digest of a file's contents."""
    hasher = hashlib.sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_FILE_CHUNK), b""):
            hasher.update(chunk)
    return hasher.digest()