import pytest
from Crypto.Hash import RIPEMD160 as ReferenceRIPEMD160

from digestkit.ripemd160 import (
    RIPEMD160,
    ripemd160,
    ripemd160_32,
    ripemd160_comp_hash,
    ripemd160_hex,
)

SOURCE_MESSAGES = [
    b"This is a test message to test01",
    b"This is a test message to test02",
    b"This is a test message to test03",
    b"This is a test message to test04",
]


def reference(data: bytes) -> bytes:
    return ReferenceRIPEMD160.new(data).digest()


def test_empty_vector():
    assert RIPEMD160().hexdigest() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"


def test_abc_vector():
    assert ripemd160(b"abc").hex() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


@pytest.mark.parametrize("length", [1, 31, 32, 55, 56, 57, 63, 64, 65, 119, 128, 1000])
def test_matches_reference_implementation(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert ripemd160(data) == reference(data)


def test_incremental_update_matches_one_shot():
    data = bytes(range(256)) * 3
    hasher = RIPEMD160()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == ripemd160(data)


def test_digest_does_not_change_state():
    hasher = RIPEMD160(b"hello")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" world")
    assert hasher.digest() == ripemd160(b"hello world")


def test_copy_is_independent():
    hasher = RIPEMD160(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.digest() == ripemd160(b"prefix")
    assert clone.digest() == ripemd160(b"prefix-more")


def test_update_rejects_str():
    with pytest.raises(TypeError):
        RIPEMD160().update("text")


@pytest.mark.parametrize("message", SOURCE_MESSAGES)
def test_ripemd160_32_matches_general_hash(message):
    assert len(message) == 32
    assert ripemd160_32(message) == ripemd160(message)


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_ripemd160_32_rejects_other_lengths(length):
    with pytest.raises(ValueError):
        ripemd160_32(bytes(length))


def test_hex_matches_hexdigest():
    hasher = RIPEMD160(b"keyhunt")
    assert ripemd160_hex(hasher.digest()) == hasher.hexdigest()
    assert len(hasher.hexdigest()) == 40


def test_hex_rejects_wrong_length():
    with pytest.raises(ValueError):
        ripemd160_hex(bytes(19))


def test_comp_hash():
    h0 = ripemd160(SOURCE_MESSAGES[0])
    h1 = ripemd160(SOURCE_MESSAGES[1])
    assert ripemd160_comp_hash(h0, bytes(h0)) is True
    assert ripemd160_comp_hash(h0, h1) is False


def test_comp_hash_ignores_trailing_bytes():
    h0 = ripemd160(b"x")
    assert ripemd160_comp_hash(h0 + b"\x00", h0 + b"\xff") is True


def test_comp_hash_rejects_short_input():
    with pytest.raises(ValueError):
        ripemd160_comp_hash(bytes(10), bytes(20))