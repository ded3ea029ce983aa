"""
Bencode decoder producing immutable value trees.
"""
from dataclasses import replace
from typing import Optional, Tuple

from .errors import (
    LimitExceeded,
    MalformedInput,
    MalformedInteger,
    MalformedLength,
    NonCanonicalKeys,
    TrailingData,
    UnexpectedEndOfInput,
    UnexpectedKeyType,
)
from .limits import INT64_MAX, INT64_MIN, DecodeOptions
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType

TOKEN_INTEGER = b'i'
TOKEN_LIST = b'l'
TOKEN_DICT = b'd'
TOKEN_END = b'e'
TOKEN_STRING_SEPARATOR = b':'

# digits in INT64_MIN / INT64_MAX
MAX_INT64_DIGITS = len(str(INT64_MAX))


class BencodeDecoder:
    """
    Decodes one Bencoded value from a byte buffer.
    After decode(), `position` is the index of the first unconsumed byte.
    """
    def __init__(self, data: bytes, options: Optional[DecodeOptions] = None):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError('The data to decode must be bytes.')
        self.data = bytes(data)
        self.options = options or DecodeOptions()
        self.i = 0  # cursor index

    @property
    def position(self) -> int:
        return self.i

    def decode(self) -> BencodeType:
        """Decodes a single value starting at the cursor."""
        try:
            return self._parse_value(depth=0)
        except RecursionError as exc:
            # max_depth set above what the interpreter stack can hold
            raise LimitExceeded(
                f"Nesting too deep for the interpreter stack (max_depth={self.options.max_depth})", self.i
            ) from exc

    # --------------------------
    # Low-level utilities
    # --------------------------

    def _peek(self, what="value"):
        if self.i >= len(self.data):
            raise UnexpectedEndOfInput(f"Unexpected end of input while reading {what}", self.i)
        return self.data[self.i:self.i+1]

    def _consume(self, n=1):
        """Moves cursor forward by n bytes and returns the consumed chunk."""
        chunk = self.data[self.i:self.i+n]
        self.i += n
        return chunk

    def _enter(self, depth, start):
        if depth > self.options.max_depth:
            raise LimitExceeded(
                f"Nesting deeper than {self.options.max_depth} levels", start, self.data[start:]
            )

    # --------------------------
    # Parsing functions
    # --------------------------

    def _parse_value(self, depth):
        ch = self._peek()

        if ch == TOKEN_INTEGER:
            return self._parse_int()

        if ch.isdigit():  # Bencode strings start with length, which is a digit
            return self._parse_string()

        if ch == TOKEN_LIST:
            return self._parse_list(depth + 1)

        if ch == TOKEN_DICT:
            return self._parse_dict(depth + 1)

        raise MalformedInput(f"Invalid token {ch!r}", self.i, self.data[self.i:])

    def _parse_int(self):
        """Parses an integer from the Bencoded data."""
        start = self.i
        self._consume(1)  # skip 'i'

        end_pos = self.data.find(TOKEN_END, self.i)
        if end_pos == -1:
            raise UnexpectedEndOfInput("Integer missing 'e' terminator", start, self.data[start:])

        number_bytes = self.data[self.i:end_pos]
        negative = number_bytes.startswith(b'-')
        digits = number_bytes[1:] if negative else number_bytes

        if not digits:
            raise MalformedInteger("Integer has no digits", start, self.data[start:end_pos+1])
        if not digits.isdigit():
            raise MalformedInteger("Integer contains non-digit characters", start, self.data[start:end_pos+1])
        if digits[:1] == b'0' and (len(digits) > 1 or negative):
            # only "0" itself may start with a zero; "-0" is never valid
            raise MalformedInteger("Integer is not in canonical form", start, self.data[start:end_pos+1])
        if len(digits) > MAX_INT64_DIGITS:
            raise MalformedInteger("Integer does not fit in 64 bits", start, self.data[start:end_pos+1])

        num = int(number_bytes)
        if not INT64_MIN <= num <= INT64_MAX:
            raise MalformedInteger("Integer does not fit in 64 bits", start, self.data[start:end_pos+1])

        self.i = end_pos + 1  # skip 'e'
        return BencodeInt(num)

    def _parse_string(self):
        """Parses a byte string from the Bencoded data."""
        start = self.i

        # read length until ':'
        colon = self.data.find(TOKEN_STRING_SEPARATOR, self.i)
        if colon == -1:
            if self.data[self.i:].isdigit():
                raise UnexpectedEndOfInput("String length missing ':' separator", start, self.data[start:])
            colon = len(self.data)
        length_bytes = self.data[self.i:colon]

        if not length_bytes.isdigit():
            raise MalformedLength("Invalid string length", start, length_bytes)
        if length_bytes[:1] == b'0' and len(length_bytes) > 1:
            raise MalformedLength("String length has a leading zero", start, length_bytes)
        if len(length_bytes) > len(str(len(self.data))):
            raise MalformedLength("Declared length exceeds the input", start, length_bytes)

        length = int(length_bytes)
        limit = self.options.max_string_length
        if limit is not None and length > limit:
            raise LimitExceeded(f"String of {length} bytes is over the {limit} byte limit", start, length_bytes)

        body = colon + 1
        if length > len(self.data) - body:
            raise MalformedLength(
                f"Declared length {length} exceeds the {len(self.data) - body} remaining bytes",
                start, self.data[start:],
            )

        self.i = body
        string_bytes = self._consume(length)

        return BencodeString(string_bytes)

    def _parse_list(self, depth):
        """Parses a list from the Bencoded data."""
        start = self.i
        self._enter(depth, start)
        self._consume(1)  # skip 'l'
        items = []

        while self._peek("list") != TOKEN_END:
            items.append(self._parse_value(depth))

        self._consume(1)  # skip 'e'
        return BencodeList(items)

    def _parse_dict(self, depth):
        """Parses a dictionary from the Bencoded data."""
        start = self.i
        self._enter(depth, start)
        self._consume(1)  # skip 'd'
        obj = {}
        last_key = None

        while self._peek("dictionary") != TOKEN_END:
            # keys MUST be strings
            key_pos = self.i
            key = self._parse_value(depth)
            if not isinstance(key, BencodeString):
                raise UnexpectedKeyType(
                    f"Dictionary key must be a string, got {type(key).__name__}",
                    key_pos, self.data[key_pos:self.i],
                )
            key = key.value

            if self.options.strict and last_key is not None and key <= last_key:
                reason = "Duplicate dictionary key" if key == last_key else "Dictionary keys out of order"
                raise NonCanonicalKeys(f"{reason} {key!r}", key_pos, self.data[key_pos:self.i])
            last_key = key

            self._peek("dictionary value")
            value = self._parse_value(depth)
            obj[key] = value

        self._consume(1)  # skip 'e'
        return BencodeDict(obj)


def _resolve_options(options, overrides) -> DecodeOptions:
    if options is None:
        return DecodeOptions(**overrides)
    if overrides:
        return replace(options, **overrides)
    return options


def decode(data: bytes, *, options: Optional[DecodeOptions] = None, **overrides) -> Tuple[BencodeType, bytes]:
    """
    Decodes the first Bencoded value in `data`.
    Returns (value, remaining bytes).

    Keyword overrides (max_depth, max_string_length, strict) are applied on
    top of `options`.
    """
    decoder = BencodeDecoder(data, _resolve_options(options, overrides))
    value = decoder.decode()
    return value, decoder.data[decoder.position:]


def decode_all(data: bytes, *, options: Optional[DecodeOptions] = None, **overrides) -> BencodeType:
    """
    Decodes `data`, which must hold exactly one Bencoded value.
    """
    decoder = BencodeDecoder(data, _resolve_options(options, overrides))
    value = decoder.decode()

    if decoder.position != len(decoder.data):
        pos = decoder.position
        raise TrailingData(
            f"{len(decoder.data) - pos} trailing bytes after value", pos, decoder.data[pos:]
        )
    return value
