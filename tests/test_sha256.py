import hashlib

import pytest

from digestkit.sha256 import (
    SHA256,
    sha256,
    sha256_33,
    sha256_65,
    sha256_file,
    sha256_hex,
)


def test_empty_input_digest():
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_abc_digest():
    assert SHA256(b"abc").hexdigest() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("length", [1, 31, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200, 1000])
def test_matches_hashlib_across_padding_boundaries(length):
    data = bytes(i % 251 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_digest_size():
    assert len(sha256(b"some data")) == 32


def test_incremental_updates_equal_one_shot():
    data = bytes(range(256)) * 3
    hasher = SHA256()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == sha256(data)


def test_digest_does_not_consume_state():
    hasher = SHA256(b"hello")
    first = hasher.digest()
    hasher.update(b" world")
    assert first == sha256(b"hello")
    assert hasher.digest() == sha256(b"hello world")


def test_copy_is_independent():
    original = SHA256(b"prefix-")
    clone = original.copy()
    clone.update(b"branch")
    assert original.digest() == sha256(b"prefix-")
    assert clone.digest() == sha256(b"prefix-branch")


def test_accepts_bytearray_and_memoryview():
    data = b"buffer protocol input"
    assert sha256(bytearray(data)) == sha256(data)
    assert sha256(memoryview(data)) == sha256(data)


def test_sha256_33_matches_general_hash():
    key = b"\x02" + bytes(range(32))
    assert sha256_33(key) == sha256(key)


def test_sha256_33_rejects_wrong_length():
    with pytest.raises(ValueError):
        sha256_33(bytes(32))


def test_sha256_65_matches_general_hash():
    key = b"\x04" + bytes(range(64))
    assert sha256_65(key) == sha256(key)
    assert sha256_65(key) == hashlib.sha256(key).digest()


def test_sha256_65_rejects_wrong_length():
    with pytest.raises(ValueError):
        sha256_65(bytes(33))


def test_sha256_hex_round_trip():
    digest = sha256(b"round trip")
    text = sha256_hex(digest)
    assert len(text) == 64
    assert bytes.fromhex(text) == digest
    assert text == SHA256(b"round trip").hexdigest()


def test_sha256_hex_rejects_wrong_length():
    with pytest.raises(ValueError):
        sha256_hex(bytes(20))


def test_sha256_file_matches_content_hash(tmp_path):
    content = bytes(range(256)) * 100
    target = tmp_path / "data.bin"
    target.write_bytes(content)
    assert sha256_file(target) == sha256(content)
    assert sha256_file(str(target)) == hashlib.sha256(content).digest()


def test_sha256_file_empty_file(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert sha256_file(target) == sha256(b"")


def test_sha256_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        sha256_file(tmp_path / "absent.bin")