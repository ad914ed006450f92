import pytest

from digestkit.hashing import rmd160
from digestkit.ripemd160 import ripemd160
from digestkit.rmd160 import RMD160, rmd160_data


def test_empty_vector():
    assert rmd160_data(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"


def test_abc_vector():
    assert RMD160(b"abc").hexdigest() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


def test_message_digest_vector():
    assert rmd160_data(b"message digest").hex() == "5d0689ef49d2fae572b881b123a85ffa21595f36"


@pytest.mark.parametrize("length", [0, 1, 54, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200])
def test_matches_other_implementations_around_padding(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    result = rmd160_data(data)
    assert result == ripemd160(data)
    assert result == rmd160(data)
    assert len(result) == 20


@pytest.mark.parametrize("split", [0, 1, 13, 63, 64, 65, 100, 150])
def test_incremental_equals_one_shot(split):
    data = bytes(range(256))[:150] + b"tail"
    hasher = RMD160()
    hasher.update(data[:split])
    hasher.update(data[split:])
    assert hasher.digest() == rmd160_data(data)


def test_many_small_updates():
    data = b"abcdefghijklmnopqrstuvwxyz" * 9
    hasher = RMD160()
    for byte in data:
        hasher.update(bytes([byte]))
    assert hasher.digest() == rmd160_data(data)


def test_digest_does_not_reset_state():
    hasher = RMD160(b"first")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b" second")
    assert hasher.digest() == rmd160_data(b"first second")


def test_copy_is_independent():
    hasher = RMD160(b"shared prefix ")
    clone = hasher.copy()
    clone.update(b"branch")
    assert hasher.digest() == rmd160_data(b"shared prefix ")
    assert clone.digest() == rmd160_data(b"shared prefix branch")


def test_hexdigest_matches_digest():
    hasher = RMD160(b"hex check")
    assert hasher.hexdigest() == hasher.digest().hex()


def test_accepts_bytearray_and_memoryview():
    data = b"buffer protocol input"
    assert rmd160_data(bytearray(data)) == rmd160_data(data)
    assert rmd160_data(memoryview(data)) == rmd160_data(data)


def test_rejects_text():
    with pytest.raises(TypeError):
        rmd160_data("text")
    with pytest.raises(TypeError):
        RMD160().update("text")


def test_sizes():
    assert RMD160.digest_size == 20
    assert len(RMD160().digest()) == RMD160.block_size // 64 * 20