class AddressError(ValueError):
    pass


class FormatError(AddressError):
    """Input is not valid hex or base58, or has the wrong length."""


class ChecksumError(AddressError):
    """The embedded checksum does not match the payload."""
