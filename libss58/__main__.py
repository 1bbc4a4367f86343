"""Command-line entrypoint: print every view of an SS58 or hex address."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from .address import parse
from .errors import AddressError

logger = logging.getLogger("libss58")


class UTCFormatter(logging.Formatter):
    """Formatter that renders timestamps in UTC ISO-8601."""

    converter = time.gmtime

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)sZ %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def setup_logging(*, level: int = logging.WARNING) -> logging.Logger:
    root = logging.getLogger("libss58")
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(UTCFormatter())
    root.addHandler(handler)
    return root


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ss58", description="Convert between SS58 and hex public keys"
    )
    parser.add_argument("value", help="SS58 address or 0x-prefixed hex key")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        address = parse(args.value)
    except AddressError as err:
        logger.error("Cannot parse %r: %s", args.value, err)
        return 1

    print(f"SS58: {address.to_ss58()}")
    print(f"Hex: {address.to_hex()}")
    print(f"Bytes: {list(address.to_bytes())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
