from functools import wraps
from typing import Callable, TypeVar, Union

__b58chars = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
__b58base = len(__b58chars)
__b58index = {char: idx for idx, char in enumerate(__b58chars)}

bytes_types = (bytes, bytearray)  # Types acceptable as binary data
BytesTypes = Union[bytes, bytearray]
ConvertableBytesTypes = Union[str, bytes, bytearray, memoryview]
T = TypeVar("T")


def _bytes_from_decode_data(s: ConvertableBytesTypes) -> BytesTypes:
    if isinstance(s, str):
        try:
            return s.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError("string argument should contain only ASCII characters")
    if isinstance(s, bytes_types):
        return s
    try:
        return memoryview(s).tobytes()
    except TypeError:
        raise TypeError(
            "argument should be a bytes-like object or ASCII "
            "string, not %r" % s.__class__.__name__
        ) from None


def arg_to_bytes(f: Callable[[BytesTypes], T]) -> Callable[[ConvertableBytesTypes], T]:
    @wraps(f)
    def decorator(arg):
        return f(_bytes_from_decode_data(arg))

    return decorator


def b58encode_int(i: int) -> bytes:
    """
    Encode a non-negative integer using Base58
    """
    string = b""
    while i:
        i, idx = divmod(i, __b58base)
        string = __b58chars[idx : idx + 1] + string
    return string


@arg_to_bytes
def b58decode_int(v: BytesTypes) -> int:
    """
    Decode a Base58 encoded string as an integer
    """
    decimal = 0
    for pos, char in enumerate(v):
        try:
            digit = __b58index[char]
        except KeyError:
            raise ValueError(
                "invalid base58 character %r at position %d" % (chr(char), pos)
            ) from None
        decimal = decimal * __b58base + digit
    return decimal


@arg_to_bytes
def b58encode(v: BytesTypes) -> bytes:
    """
    Encode a byte string using Base58, keeping leading zero bytes as '1'
    """
    n_pad = len(v)
    v = v.lstrip(b"\0")
    n_pad -= len(v)

    acc = int.from_bytes(v, "big")
    return __b58chars[0:1] * n_pad + b58encode_int(acc)


@arg_to_bytes
def b58decode(v: BytesTypes) -> bytes:
    """
    Decode a Base58 encoded string

    Unlike many base58 helpers this does not strip surrounding whitespace:
    anything outside the alphabet raises ValueError.
    """
    n_pad = len(v)
    v = v.lstrip(__b58chars[0:1])
    n_pad -= len(v)

    acc = b58decode_int(v)

    result = []
    while acc > 0:
        acc, mod = divmod(acc, 256)
        result.append(mod)

    return b"\0" * n_pad + bytes(reversed(result))
