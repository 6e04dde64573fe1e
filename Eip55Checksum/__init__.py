from .ChecksumEncoder import encode, is_checksum_address
from .Errors import ChecksumError, DecodeError, InvalidHexCharacter, LengthError, PrefixError
from .FastChecksumAddress import to_checksum_address
from .StringLike import checksum, encode_bytes, encode_str
