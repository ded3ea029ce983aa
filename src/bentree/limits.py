"""
Decoding limits and option defaults.
"""
from dataclasses import dataclass
from typing import Optional

# IntegerValue range (signed 64-bit)
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# Deep enough for any real torrent or DHT message, well below the interpreter's recursion limit
DEFAULT_MAX_DEPTH = 256

# None = only bounded by the size of the input buffer
DEFAULT_MAX_STRING_LENGTH = None


@dataclass(frozen=True)
class DecodeOptions:
    """
    Knobs for a single decode call.

    max_depth:         deepest allowed container nesting ("le" is depth 1)
    max_string_length: largest declared string length accepted, or None
    strict:            reject dictionaries whose keys are unsorted or repeated
    """
    max_depth: int = DEFAULT_MAX_DEPTH
    max_string_length: Optional[int] = DEFAULT_MAX_STRING_LENGTH
    strict: bool = False

    def __post_init__(self):
        if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool) or self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth!r}")
        if self.max_string_length is not None:
            if not isinstance(self.max_string_length, int) or self.max_string_length < 0:
                raise ValueError(
                    f"max_string_length must be a non-negative integer or None, got {self.max_string_length!r}"
                )
