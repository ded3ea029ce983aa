"""
Bencode decoding and encoding into immutable value trees.
"""
from .decoder import BencodeDecoder, decode, decode_all
from .encoder import encode
from .errors import (
    BencodeDecodeError,
    LimitExceeded,
    MalformedInput,
    MalformedInteger,
    MalformedLength,
    NonCanonicalKeys,
    TrailingData,
    UnexpectedEndOfInput,
    UnexpectedKeyType,
)
from .limits import DecodeOptions
from .structure import BencodeDict, BencodeInt, BencodeList, BencodeString, BencodeType, from_python, render

__all__ = [
    'decode', 'decode_all', 'encode', 'render', 'from_python',
    'BencodeDecoder', 'DecodeOptions',
    'BencodeType', 'BencodeInt', 'BencodeString', 'BencodeList', 'BencodeDict',
    'BencodeDecodeError', 'UnexpectedEndOfInput', 'MalformedLength', 'MalformedInteger',
    'UnexpectedKeyType', 'MalformedInput', 'LimitExceeded', 'TrailingData', 'NonCanonicalKeys',
]
