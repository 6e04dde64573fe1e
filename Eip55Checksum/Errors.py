class ChecksumError(ValueError):
    pass


class LengthError(ChecksumError):
    def __init__(self, expected: tuple[int, ...], actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Address must be {' or '.join(str(length) for length in expected)} characters long, got {actual}")


class PrefixError(ChecksumError):
    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Address with prefix must start with {expected!r}, got {actual!r}")


class InvalidHexCharacter(ChecksumError):
    def __init__(self, value: str, index: int):
        self.value = value
        self.index = index
        super().__init__(f"Invalid hex character {value!r} at index {index}")


class DecodeError(ChecksumError):
    """
    Raised by the bytes overloads when the raw value is not ASCII text.
    Always chained from the original UnicodeDecodeError.
    """
    def __init__(self, value: bytes, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Address bytes are not valid ASCII text: {reason}")
