import logging
from dataclasses import dataclass

from . import base58
from .errors import ChecksumError, FormatError
from .network import GenericSubstrate
from .utils import is_hex_string, ss58_hash

logger = logging.getLogger(__name__)

PUB_KEY_LENGTH = 32
CHECKSUM_LENGTH = 2
HEX_MARKER = "0x"


@dataclass(frozen=True)
class Address:
    """A 32-byte public key and its text projections.

    The key is opaque: any 32 bytes are accepted, nothing checks that they
    lie on a curve.
    """

    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise FormatError(
                f"address must be bytes-like, not {type(self.raw).__name__}"
            )
        raw = bytes(self.raw)
        if len(raw) != PUB_KEY_LENGTH:
            raise FormatError(
                f"address must be {PUB_KEY_LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "raw", raw)

    def __repr__(self):
        return f"Address({self.to_hex()})"

    def __bytes__(self):
        return self.raw

    @classmethod
    def parse(cls, value: str) -> "Address":
        return parse(value)

    @classmethod
    def from_hex(cls, value: str) -> "Address":
        """Load the Address from hex, with or without the 0x marker."""
        if value.startswith(HEX_MARKER):
            value = value[len(HEX_MARKER) :]
        if not is_hex_string(value):
            raise FormatError("Invalid hex key")
        try:
            raw = bytes.fromhex(value)
        except ValueError as err:
            raise FormatError(f"Invalid hex key: {err}") from err
        if len(raw) != PUB_KEY_LENGTH:
            raise FormatError(
                f"hex key must decode to {PUB_KEY_LENGTH} bytes, got {len(raw)}"
            )
        return cls(raw)

    @classmethod
    def from_ss58(cls, value: str) -> "Address":
        return decode_ss58(value)

    def to_hex(self) -> str:
        return encode_hex(self)

    def to_ss58(self) -> str:
        return encode_ss58(self)

    def to_bytes(self) -> bytes:
        return self.raw


def parse(value: str) -> Address:
    """Parse either text form, picking hex when the 0x marker is present."""
    if value.startswith(HEX_MARKER):
        return Address.from_hex(value)
    return decode_ss58(value)


def encode_hex(address: Address) -> str:
    return HEX_MARKER + address.raw.hex().upper()


def encode_ss58(address: Address) -> str:
    # Prepend the format tag byte
    tagged = GenericSubstrate.PREFIX.to_bytes(1, "big") + address.raw
    # Return a base58 encoded address with a truncated checksum
    checksum = ss58_hash(tagged)
    return base58.b58encode(tagged + checksum[:CHECKSUM_LENGTH]).decode("ascii")


def decode_ss58(value: str) -> Address:
    """Decode an SS58 string, verifying its checksum.

    Only the trailing 34 bytes are read as key + checksum. Longer buffers
    are accepted; their extra leading bytes are covered by the checksum
    but otherwise ignored.
    """
    try:
        raw = base58.b58decode(value)
    except (TypeError, ValueError) as err:
        logger.debug("Rejecting %r: %s", value, err)
        raise FormatError(f"Wrong base58: {err}") from err

    if len(raw) <= PUB_KEY_LENGTH + CHECKSUM_LENGTH:
        logger.debug("Rejecting %r: decoded to %d bytes", value, len(raw))
        raise FormatError(
            "Address length must be greater than "
            f"{PUB_KEY_LENGTH + CHECKSUM_LENGTH} bytes, got {len(raw)}"
        )

    checksum = raw[-CHECKSUM_LENGTH:]
    key = raw[-PUB_KEY_LENGTH - CHECKSUM_LENGTH : -CHECKSUM_LENGTH]
    if ss58_hash(raw[:-CHECKSUM_LENGTH])[:CHECKSUM_LENGTH] != checksum:
        logger.debug("Rejecting %r: checksum mismatch", value)
        raise ChecksumError("Wrong address checksum")
    return Address(key)


def is_valid_ss58_address(value: str) -> bool:
    try:
        decode_ss58(value)
    except (FormatError, ChecksumError):
        return False
    return True
