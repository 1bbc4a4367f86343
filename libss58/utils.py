import hashlib
import string

SS58_PREFIX = b"SS58PRE"

_HEX_DIGITS = frozenset(string.hexdigits)


def ss58_hash(data: bytes) -> bytes:
    """Return blake2b-512(b"SS58PRE" + data)"""
    return hashlib.blake2b(SS58_PREFIX + data, digest_size=64).digest()


def is_hex_string(value: str) -> bool:
    # bytes.fromhex tolerates whitespace, so check the characters first
    return all(char in _HEX_DIGITS for char in value)


__all__ = ["SS58_PREFIX", "ss58_hash", "is_hex_string"]
