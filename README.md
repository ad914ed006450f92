# digestkit

Message digests for key and address tooling. SHA-256, SHA-512 and
RIPEMD-160 are written in plain Python. Fixed-size shortcuts, a Base58Check
style checksum, HMAC-SHA512 and PBKDF2-HMAC-SHA512 are included. The
`digestkit.hashing` module groups one-shot helpers, including Keccak-256,
and those helpers rely on `hashlib` and `pycryptodome`.

## Installation

```
pip install digestkit
```

## Hash objects

`SHA256` (in `digestkit.sha256`), `SHA512` (in `digestkit.sha512`),
`RIPEMD160` (in `digestkit.ripemd160`) and `RMD160` (in `digestkit.rmd160`)
follow the familiar `hashlib` interface:

- Build one, optionally passing initial data.
- Feed it with `update()`.
- Read `digest()` or `hexdigest()`.
- Use `copy()` to fork the running state.

Each class also carries `name`, `digest_size` and `block_size`.

```python
from digestkit.sha256 import SHA256
from digestkit.ripemd160 import RIPEMD160

h = SHA256(b"hello ")
h.update(b"world")
print(h.hexdigest())

print(RIPEMD160(b"abc").hexdigest())
```

`RMD160` computes the same RIPEMD-160 digest as `RIPEMD160`. It keeps its
byte count as a low and a high 32-bit word and finishes with MD4-style
padding.

## One-shot functions

```python
from digestkit.sha256 import sha256, sha256_33, sha256_65, sha256_hex, sha256_file
from digestkit.ripemd160 import ripemd160, ripemd160_32, ripemd160_hex, ripemd160_comp_hash
from digestkit.rmd160 import rmd160_data
from digestkit.sha512 import sha512, sha512_hex, hmac_sha512, pbkdf2_hmac_sha512
from digestkit.checksum import sha256_checksum

digest = sha256(b"data")
print(sha256_hex(digest))

# Fixed-size variants: exactly 33 bytes (compressed key) or 65 bytes
# (uncompressed key) for SHA-256, exactly 32 bytes for RIPEMD-160.
# Any other length raises ValueError.
sha256_33(bytes(33))
sha256_65(bytes(65))
ripemd160_32(bytes(32))

# True when the first 20 bytes of both hashes match.
ripemd160_comp_hash(ripemd160(b"a"), ripemd160(b"a"))

# First four bytes of SHA-256(SHA-256(data)); payloads over 55 bytes raise ValueError.
sha256_checksum(b"\x00" * 21)

# HMAC and PBKDF2 over SHA-512.
mac = hmac_sha512(b"secret", b"message")
password = b"password"
seed = pbkdf2_hmac_sha512(password, b"mnemonic", 2048, 64)
```

Some functions raise or behave in ways worth knowing:

- The `*_hex` functions raise `ValueError` unless given a digest of exactly
  the right size.
- `hmac_sha512` truncates keys longer than 128 bytes instead of hashing them.
- `pbkdf2_hmac_sha512` first hashes passwords of 128 bytes or more with
  SHA-512.
- In `pbkdf2_hmac_sha512`, an iteration count of zero behaves as one.
- `pbkdf2_hmac_sha512` raises `ValueError` for a negative iteration count or
  length.

`sha256_file(path)` hashes a file in 8192-byte chunks and returns its SHA-256
digest.

## Batch helpers

`digestkit.hashing` offers `sha256`, `rmd160`, `keccak`, `sha256_4`,
`rmd160_4` and `sha256_file`. These use `hashlib` and `pycryptodome`.

```python
from digestkit.hashing import sha256, rmd160, keccak, sha256_4, rmd160_4, sha256_file

keccak(b"")                         # Keccak-256 with the original padding, not SHA3-256
sha256_4(b"a", b"b", b"c", b"d")    # tuple of four digests
```

`sha256_4` and `rmd160_4` raise `ValueError` unless all four inputs have the
same length. They hash the inputs one after another.

## What this package does not do

This is a library only. There is no command-line tool, no key search and no
storage of any kind. The four-at-a-time helpers are a convenience and do not
hash in parallel.

## Running the tests

```
pip install digestkit[test]
pytest
```