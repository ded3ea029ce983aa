"""
Data structures for representing Bencoded types.
"""
from types import MappingProxyType

from .limits import INT64_MAX, INT64_MIN

__all__ = [
    "BencodeType",
    "BencodeInt",
    "BencodeString",
    "BencodeList",
    "BencodeDict",
    "from_python",
    "render",
]


class BencodeType:
    """Base class for all Bencode data types."""
    __slots__ = ("_value",)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, val):
        if hasattr(self, "_value"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, val)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __str__(self):
        return render(self)

    def to_python(self):
        """Unwraps the value into plain bytes/int/list/dict."""
        raise NotImplementedError


class BencodeInt(BencodeType):
    """Represents a Bencoded integer (signed 64-bit)."""
    __slots__ = ()

    def __init__(self, value: int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("BencodeInt requires an integer.")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"BencodeInt out of 64-bit range: {value}")
        self._value = value

    def to_python(self):
        return self._value

    def __repr__(self):
        return f"BencodeInt({self._value})"


class BencodeString(BencodeType):
    """Represents a Bencoded byte string."""
    __slots__ = ()

    def __init__(self, value: bytes):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError("BencodeString requires bytes.")
        self._value = bytes(value)

    def __len__(self):
        return len(self._value)

    def to_python(self):
        return self._value

    def __repr__(self):
        return f"BencodeString({self._value!r})"


class BencodeList(BencodeType):
    """Represents a Bencoded list. Items are kept in a tuple."""
    __slots__ = ()

    def __init__(self, value=()):
        if not isinstance(value, (list, tuple)):
            raise TypeError("BencodeList requires a list.")
        for item in value:
            if not isinstance(item, BencodeType):
                raise TypeError(f"BencodeList items must be Bencode values, got {type(item).__name__}")
        self._value = tuple(value)

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def __getitem__(self, index):
        return self._value[index]

    def to_python(self):
        return [item.to_python() for item in self._value]

    def __repr__(self):
        return f"BencodeList({list(self._value)!r})"


class BencodeDict(BencodeType):
    """Represents a Bencoded dictionary keyed by raw byte strings."""
    __slots__ = ()

    def __init__(self, value=None):
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise TypeError("BencodeDict requires a dict.")
        items = {}
        for k, v in value.items():
            # keys must be bytes (bencode requirement)
            if not isinstance(k, (bytes, bytearray)):
                raise TypeError("BencodeDict keys must be bytes.")
            if not isinstance(v, BencodeType):
                raise TypeError(f"BencodeDict values must be Bencode values, got {type(v).__name__}")
            items[bytes(k)] = v
        self._value = MappingProxyType(items)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return dict(self._value) == dict(other._value)

    def __hash__(self):
        return hash(("BencodeDict", frozenset(self._value.items())))

    def __len__(self):
        return len(self._value)

    def __iter__(self):
        return iter(self._value)

    def __contains__(self, key):
        return key in self._value

    def __getitem__(self, key):
        return self._value[key]

    def get(self, key, default=None):
        return self._value.get(key, default)

    def sorted_items(self):
        """Key/value pairs in ascending raw-byte key order."""
        return sorted(self._value.items())

    def to_python(self):
        return {k: v.to_python() for k, v in self._value.items()}

    def __repr__(self):
        return f"BencodeDict({dict(self._value)!r})"


def from_python(obj) -> BencodeType:
    """
    Wraps a native Python object into a Bencode value tree.
    str is stored as its UTF-8 bytes, tuples become lists.
    """
    if isinstance(obj, BencodeType):
        return obj

    if isinstance(obj, bool):
        raise TypeError("Cannot bencode object of type <class 'bool'>")

    if isinstance(obj, int):
        return BencodeInt(obj)

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BencodeString(obj)

    if isinstance(obj, str):
        return BencodeString(obj.encode())

    if isinstance(obj, (list, tuple)):
        return BencodeList([from_python(x) for x in obj])

    if isinstance(obj, dict):
        items = {}
        for key, val in obj.items():
            if isinstance(key, str):
                key = key.encode()
            elif isinstance(key, BencodeString):
                key = key.value
            elif not isinstance(key, (bytes, bytearray)):
                raise TypeError(f"Dictionary keys must be bytes or str, not {type(key)}")
            items[bytes(key)] = from_python(val)
        return BencodeDict(items)

    raise TypeError(f"Cannot bencode object of type {type(obj)}")


# ------------------------------------------------------------
#   Diagnostic rendering (not the wire format)
# ------------------------------------------------------------

def _quote(b: bytes) -> str:
    # invalid UTF-8 shows up as \xNN escapes
    return '"' + b.decode("utf-8", errors="backslashreplace") + '"'


def render(value: BencodeType) -> str:
    """
    Renders a value tree in a JSON-like form for printing:
    strings quoted, integers bare, lists as [...], dictionaries as {...}.
    """
    if isinstance(value, BencodeString):
        return _quote(value.value)

    if isinstance(value, BencodeInt):
        return str(value.value)

    if isinstance(value, BencodeList):
        return "[" + ", ".join(render(item) for item in value.value) + "]"

    if isinstance(value, BencodeDict):
        entries = (f"{_quote(k)}: {render(v)}" for k, v in value.sorted_items())
        return "{" + ", ".join(entries) + "}"

    raise TypeError(f"Cannot render object of type {type(value)}")
