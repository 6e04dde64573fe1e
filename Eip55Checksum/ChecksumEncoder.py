from typing import cast

from eth_hash.auto import keccak
from eth_typing import ChecksumAddress

from .Errors import ChecksumError, InvalidHexCharacter, LengthError, PrefixError

PREFIX = "0x"
ADDRESS_LENGTHS = (40, 40 + len(PREFIX))
DIGEST_SIZE = 32

DIGITS = set("0123456789")
HEX_LETTERS = set("abcdef")

# ascii only, so the body keeps its length and indexes stay stable
_TO_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def encode(address: str) -> ChecksumAddress:
    """
    EIP-55 mixed-case checksum encoding of a 40 char hex address, optionally prefixed with "0x".

    Input casing is ignored. The prefix, if any, is passed through as given.
    Raises LengthError, PrefixError or InvalidHexCharacter, whichever applies first.
    """
    if not isinstance(address, str):
        raise TypeError(f"Address must be str, got {type(address).__name__}")

    if len(address) == ADDRESS_LENGTHS[0]:
        prefix = ""
    elif len(address) == ADDRESS_LENGTHS[1]:
        prefix = address[:len(PREFIX)]
        if prefix != PREFIX:
            raise PrefixError(expected=PREFIX, actual=prefix)
    else:
        raise LengthError(expected=ADDRESS_LENGTHS, actual=len(address))

    return cast(ChecksumAddress, prefix + _recase(address[len(prefix):]))


def _recase(body: str) -> str:
    normalized_body = body.translate(_TO_LOWER)
    hashed_body = keccak(normalized_body.encode("utf-8", errors="surrogatepass"))
    assert len(hashed_body) == DIGEST_SIZE, f"keccak returned {len(hashed_body)} bytes"

    recased = []
    for i, char in enumerate(normalized_body):
        if char in DIGITS:
            recased.append(char)
        elif char in HEX_LETTERS:
            recased.append(char.upper() if _nibble_at(hashed_body, i) >= 8 else char)
        else:
            raise InvalidHexCharacter(value=char, index=i)
    return "".join(recased)


def _nibble_at(digest: bytes, i: int) -> int:
    # even positions use the high nibble, odd positions the low one
    if i % 2 == 0:
        return digest[i // 2] >> 4
    return digest[i // 2] & 0x0f


def is_checksum_address(address) -> bool:
    try:
        return encode(address) == address
    except (ChecksumError, TypeError):
        return False
