from bentree.decoder import decode, decode_all
from bentree.encoder import encode
from bentree.structure import BencodeInt, BencodeString, BencodeList, BencodeDict


def test_int():
    print("Testing integer decoding...")
    obj = decode_all(b"i42e")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeInt)
    assert obj.value == 42

    print("Testing integer encoding...")
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"i42e"


def test_string():
    print("Testing string decoding...")
    obj, rest = decode(b"4:spam")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeString)
    assert obj.value == b"spam"
    assert rest == b""

    print("Testing string encoding...")
    assert encode(obj) == b"4:spam"


def test_list():
    print("Testing list decoding...")
    obj = decode_all(b"l4:spam4:eggse")
    print("Decoded:", obj)
    assert obj == BencodeList([BencodeString(b"spam"), BencodeString(b"eggs")])
    assert encode(obj) == b"l4:spam4:eggse"


def test_dict():
    print("Testing dictionary decoding & encoding...")
    obj = decode_all(b"d3:foo3:bar5:helloi52ee")
    print("Decoded:", obj)
    assert isinstance(obj, BencodeDict)
    assert obj == BencodeDict({b"foo": BencodeString(b"bar"), b"hello": BencodeInt(52)})
    assert obj.value[b"foo"].value == b"bar"
    enc = encode(obj)
    print("Re-encoded:", enc)
    assert enc == b"d3:foo3:bar5:helloi52ee"


def test_empty_containers():
    assert decode_all(b"le") == BencodeList([])
    assert decode_all(b"de") == BencodeDict({})
    assert decode_all(b"0:") == BencodeString(b"")


def test_roundtrip_nested():
    tree = BencodeDict({
        b"announce": BencodeString(b"http://tracker.example/announce"),
        b"info": BencodeDict({
            b"length": BencodeInt(123456),
            b"name": BencodeString(b"test.txt"),
            b"piece length": BencodeInt(32768),
            b"pieces": BencodeString(b"\x00\xff" * 10),
        }),
        b"url-list": BencodeList([BencodeList([]), BencodeInt(-7), BencodeDict({})]),
    })
    raw = encode(tree)
    print("Encoded:", raw)
    assert decode_all(raw) == tree
    assert encode(decode_all(raw)) == raw
