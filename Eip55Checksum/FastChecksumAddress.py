import os
from functools import lru_cache

from eth_typing import ChecksumAddress

from .StringLike import BytesLike, checksum


@lru_cache(maxsize=int(os.getenv("CHECKSUM_CACHE_SIZE", 16384)))
def _cached_checksum(address: str | bytes) -> ChecksumAddress:
    return checksum(address)


def to_checksum_address(address: str | BytesLike) -> ChecksumAddress:
    """Checksum address with caching. Failed lookups are not cached."""
    if isinstance(address, (bytearray, memoryview)):
        # unhashable, can't be a cache key
        address = bytes(address)
    return _cached_checksum(address)
