import argparse
import sys

from .ChecksumEncoder import encode
from .Errors import ChecksumError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m Eip55Checksum",
        description="Print the EIP-55 checksum encoding of each address",
    )
    parser.add_argument("addresses", nargs="+", metavar="ADDRESS", help="40 hex chars, optionally prefixed with 0x")
    args = parser.parse_args(argv)

    failed = False
    for address in args.addresses:
        try:
            print(encode(address))
        except ChecksumError as e:
            print(f"error: {e}", file=sys.stderr)
            failed = True
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
