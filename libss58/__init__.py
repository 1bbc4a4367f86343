"""Python library to convert between SS58 addresses and raw public keys"""

__version__ = "0.1.0"

from .address import (
    Address,
    decode_ss58,
    encode_hex,
    encode_ss58,
    is_valid_ss58_address,
    parse,
)
from .errors import AddressError, ChecksumError, FormatError
