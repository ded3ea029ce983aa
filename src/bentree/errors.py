"""
Exceptions raised while decoding Bencoded data.
"""

__all__ = [
    "BencodeDecodeError",
    "UnexpectedEndOfInput",
    "MalformedLength",
    "MalformedInteger",
    "UnexpectedKeyType",
    "MalformedInput",
    "LimitExceeded",
    "TrailingData",
    "NonCanonicalKeys",
]

FRAGMENT_LEN = 16


class BencodeDecodeError(Exception):
    """
    Base class for Bencode decoding errors.
    offset is the index in the input where the problem was found,
    fragment the bytes starting there (truncated).
    """
    def __init__(self, message: str, offset: int = None, fragment: bytes = b""):
        self.message = message
        self.offset = offset
        self.fragment = bytes(fragment[:FRAGMENT_LEN])
        super().__init__(self._format())

    def _format(self):
        if self.offset is None:
            return self.message
        return f"{self.message} at index {self.offset}: {self.fragment!r}"


class UnexpectedEndOfInput(BencodeDecodeError):
    """Input ended before a string, integer or container was complete."""


class MalformedLength(BencodeDecodeError):
    """String length prefix is not a valid length or exceeds the input."""


class MalformedInteger(BencodeDecodeError):
    """Integer text is not canonical or does not fit in 64 bits."""


class UnexpectedKeyType(BencodeDecodeError):
    """A dictionary key is not a byte string."""


class MalformedInput(BencodeDecodeError):
    """Leading byte does not start any Bencode value."""


class LimitExceeded(BencodeDecodeError):
    """Nesting depth or string length is over the configured limit."""


class TrailingData(BencodeDecodeError):
    """Bytes remain after the first complete value."""


class NonCanonicalKeys(BencodeDecodeError):
    """Dictionary keys are unsorted or duplicated (strict mode)."""
