import unittest
from unittest.mock import patch

from .Errors import InvalidHexCharacter
from .FastChecksumAddress import _cached_checksum, to_checksum_address

LOWER = "0xe0fc04fa2d34a66b779fd5cee748268032a146c0"
CHECKSUMMED = "0xe0FC04FA2d34a66B779fd5CEe748268032a146c0"


class TestFastChecksumAddress(unittest.TestCase):

    def setUp(self):
        _cached_checksum.cache_clear()

    def test_checksum(self):
        self.assertEqual(to_checksum_address(LOWER), CHECKSUMMED)
        self.assertEqual(to_checksum_address(LOWER.encode()), CHECKSUMMED)

    def test_repeated_calls_hit_cache(self):
        with patch("Eip55Checksum.FastChecksumAddress.checksum", return_value=CHECKSUMMED) as mock_checksum:
            to_checksum_address(LOWER)
            to_checksum_address(LOWER)
        mock_checksum.assert_called_once_with(LOWER)
        self.assertEqual(_cached_checksum.cache_info().hits, 1)

    def test_unhashable_bytes(self):
        self.assertEqual(to_checksum_address(bytearray(LOWER.encode())), CHECKSUMMED)
        self.assertEqual(to_checksum_address(memoryview(LOWER.encode())), CHECKSUMMED)

    def test_errors_are_not_cached(self):
        for _ in range(2):
            with self.assertRaises(InvalidHexCharacter):
                to_checksum_address("0x" + "q" * 40)
        self.assertEqual(_cached_checksum.cache_info().currsize, 0)


if __name__ == '__main__':
    unittest.main()
