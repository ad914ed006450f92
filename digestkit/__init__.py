"""Message digests: SHA-256, SHA-512, RIPEMD-160, Keccak-256, checksums, HMAC-SHA512 and PBKDF2."""

__version__ = "0.1.0"

__all__ = ["checksum", "hashing", "ripemd160", "rmd160", "sha256", "sha512"]