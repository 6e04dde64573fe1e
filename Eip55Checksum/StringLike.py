from eth_typing import ChecksumAddress

from .ChecksumEncoder import encode
from .Errors import DecodeError

BytesLike = bytes | bytearray | memoryview


def encode_str(address: str) -> ChecksumAddress:
    return encode(address)


def encode_bytes(address: BytesLike) -> ChecksumAddress:
    """ASCII address text given as raw bytes, e.g. b"0xe0fc04fa...". Not the 20 byte binary address."""
    raw = bytes(address)
    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise DecodeError(value=raw, reason=str(e)) from e
    return encode(text)


def checksum(address: str | BytesLike) -> ChecksumAddress:
    if isinstance(address, str):
        return encode_str(address)
    elif isinstance(address, (bytes, bytearray, memoryview)):
        return encode_bytes(address)
    else:
        raise TypeError("Address must be str or bytes-like")
