"""
Bencode encoder for immutable value trees.
"""
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, from_python


def encode(obj) -> bytes:
    """
    Encodes a Bencode value tree into canonical bencoded bytes.
    Plain ints, bytes, str, lists and dicts are wrapped with from_python first.
    """
    value = from_python(obj)
    out = []
    _encode_into(value, out)
    return b"".join(out)


def _encode_into(value, out: list):
    if isinstance(value, BencodeString):
        out.append(encode_bytes(value.value))

    elif isinstance(value, BencodeInt):
        out.append(encode_int(value.value))

    elif isinstance(value, BencodeList):
        out.append(b"l")
        for item in value.value:
            _encode_into(item, out)
        out.append(b"e")

    elif isinstance(value, BencodeDict):
        out.append(b"d")
        # keys sorted by raw bytes no matter how the dict was built
        for key, item in value.sorted_items():
            out.append(encode_bytes(key))
            _encode_into(item, out)
        out.append(b"e")

    else:
        raise TypeError(f"Cannot bencode object of type {type(value)}")


# ------------------------------------------------------------
#   Encoding primitives
# ------------------------------------------------------------

def encode_int(n: int) -> bytes:
    """Encodes an integer to bencoded bytes (e.g., i123e)."""
    return f"i{n:d}e".encode()


def encode_bytes(b: bytes) -> bytes:
    """Encodes bytes to bencoded bytes (e.g., 4:spam)."""
    return str(len(b)).encode() + b":" + bytes(b)


def encode_list(lst) -> bytes:
    """Encodes a list to bencoded bytes (e.g., l4:spame)."""
    return encode(BencodeList([from_python(x) for x in lst]))


def encode_dict(d: dict) -> bytes:
    """Encodes a dictionary to bencoded bytes (e.g., d3:cow3:moo4:spam4:eggse)."""
    return encode(from_python(dict(d)))
