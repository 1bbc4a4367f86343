class AddressFormat:
    NAME: str
    PREFIX: int = 0x00


class GenericSubstrate(AddressFormat):
    """Generic Substrate address format
    Prefix registry:
    https://github.com/paritytech/ss58-registry/blob/main/ss58-registry.json
    """
    NAME = "Generic Substrate"
    PREFIX = 0x2A  # int(0x2A) = 42  # Single-byte format tag
