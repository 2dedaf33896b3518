import io
import logging

import pytest
from bdecoder import constants
from bdecoder.decoder import Decoder, decode, decode_prefix, iter_decode, load
from bdecoder.errors import (
    DecodeError,
    DuplicateKey,
    InvalidTypeTag,
    KeysNotSorted,
    MalformedInteger,
    MalformedLength,
    MissingValue,
    NestingTooDeep,
    NonStringKey,
    TrailingData,
    TruncatedString,
    UnexpectedEof,
    UnexpectedType,
    UnterminatedDict,
    UnterminatedList,
)



# Names of the error kinds
TAXONOMY = {
    "UnexpectedEof", "InvalidTypeTag", "MalformedInteger", "MalformedLength",
    "TruncatedInput", "TruncatedString", "UnterminatedList", "UnterminatedDict",
    "NonStringKey", "KeysNotSorted", "DuplicateKey", "NestingTooDeep",
    "SourceIoError", "TrailingData", "UnexpectedType",
}


class TrickleSource(object):
    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        return self._data.read(min(size, 1))


def test_decode_values():
    """ test decoding capabilities of bencode module
    """
    assert decode(b"4:spam") == b"spam"
    assert decode(b"i42e") == 42
    assert decode(b"i-3e") == -3
    assert decode(b"i0e") == 0
    assert decode(b"0:") == b""
    assert decode(b"le") == []
    assert decode(b"de") == {}
    assert decode(b"l4:spam4:eggse") == [b"spam", b"eggs"]
    assert decode(b"13:aaaaaaaaaaa\xc5\xbc") == b"aaaaaaaaaaa\xc5\xbc"
    assert decode(b"li1eli2eli3eeee") == [1, [2, [3]]]


def test_decode_dict_order():
    value = decode(b"d3:cow3:moo4:spam4:eggse")
    assert value == {b"cow": b"moo", b"spam": b"eggs"}
    assert list(value) == [b"cow", b"spam"]


def test_decode_integer_range():
    assert decode(b"i9223372036854775807e") == constants.INT_MAX
    assert decode(b"i-9223372036854775808e") == constants.INT_MIN


def test_decode_torrent(torrent_data):
    torrent = decode(torrent_data)
    assert torrent[b"announce"] == b"http://tracker.example.org/ann"
    info = torrent[b"info"]
    assert list(info) == [b"length", b"name", b"piece length", b"pieces"]
    assert info[b"length"] == 1048576
    assert info[b"pieces"] == b"\x01" * 20


def test_decode_is_repeatable(torrent_data):
    assert decode(torrent_data) == decode(torrent_data)


@pytest.mark.parametrize(
    "data, error",
    [
        (b"", UnexpectedEof),
        (b"x", InvalidTypeTag),
        (b"e", InvalidTypeTag),
        (b"-1:a", InvalidTypeTag),
        (b"i03e", MalformedInteger),
        (b"i00e", MalformedInteger),
        (b"i-0e", MalformedInteger),
        (b"i-03e", MalformedInteger),
        (b"ie", MalformedInteger),
        (b"i-e", MalformedInteger),
        (b"i--1e", MalformedInteger),
        (b"i1-e", MalformedInteger),
        (b"i1.5e", MalformedInteger),
        (b"i1", MalformedInteger),
        (b"i", MalformedInteger),
        (b"i9223372036854775808e", MalformedInteger),
        (b"i-9223372036854775809e", MalformedInteger),
        (b"i" + b"1" * 100 + b"e", MalformedInteger),
        (b"03:abc", MalformedLength),
        (b"3abc", MalformedLength),
        (b"3", MalformedLength),
        (b"5:abc", TruncatedString),
        (b"l", UnterminatedList),
        (b"li1e", UnterminatedList),
        (b"l4:spam", UnterminatedList),
        (b"d", UnterminatedDict),
        (b"d3:key", UnterminatedDict),
        (b"d3:keyi1e", UnterminatedDict),
        (b"d3:keye", MissingValue),
        (b"di1ei2ee", NonStringKey),
        (b"dli1ee1:ae", NonStringKey),
        (b"d1:b0:1:a0:e", KeysNotSorted),
        (b"d1:a0:1:a0:e", DuplicateKey),
        (b"lelegarbage", TrailingData),
        (b"le" + b"garbage", TrailingData),
        (b"i1ei2e", TrailingData),
    ],
)
def test_decode_errors(data, error):
    with pytest.raises(error) as exc:
        decode(data)
    assert isinstance(exc.value, DecodeError)
    assert exc.value.kind == error.kind
    assert exc.value.kind in TAXONOMY


def test_missing_value_is_invalid_tag():
    with pytest.raises(InvalidTypeTag) as exc:
        decode(b"d3:keye")
    assert exc.value.byte == b"e"
    assert exc.value.position == 6
    assert exc.value.kind == "InvalidTypeTag"
    assert str(exc.value) == "dictionary key b'key' has no value (at byte 6)"


def test_error_positions():
    with pytest.raises(InvalidTypeTag) as exc:
        decode(b"l4:spamx")
    assert exc.value.byte == b"x"
    assert exc.value.position == 7

    with pytest.raises(TruncatedString) as exc:
        decode(b"5:abc")
    assert exc.value.position == 2
    assert str(exc.value) == (
        "truncated string, expected 5 bytes, only 3 available (at byte 2)"
    )

    with pytest.raises(MalformedInteger) as exc:
        decode(b"li1ei1xe")
    assert exc.value.position == 6

    with pytest.raises(KeysNotSorted) as exc:
        decode(b"d1:b0:1:a0:e")
    assert exc.value.position == 6

    with pytest.raises(TrailingData) as exc:
        decode(b"le" + b"garbage")
    assert exc.value.position == 2


def test_canonical_key_order_is_unsigned_bytes():
    # 0x80 sorts after 'a' when bytes are compared unsigned
    assert list(decode(b"d1:a0:1:\x800:e")) == [b"a", b"\x80"]
    # a prefix sorts before the longer key
    assert list(decode(b"d1:a0:2:ab0:e")) == [b"a", b"ab"]
    with pytest.raises(KeysNotSorted):
        decode(b"d2:ab0:1:a0:e")


def test_lenient_keeps_input_order():
    value = decode(b"d1:b0:1:a0:e", strict=False)
    assert list(value) == [b"b", b"a"]


def test_lenient_duplicate_keys(caplog):
    caplog.set_level(logging.WARNING, logger="bdecoder")
    value = decode(b"d1:ai1e1:bi2e1:ai3ee", strict=False)
    assert value == {b"a": 3, b"b": 2}
    assert list(value) == [b"a", b"b"]
    assert "duplicate key b'a'" in caplog.text


def test_lenient_still_checks_structure():
    with pytest.raises(NonStringKey):
        decode(b"di1ei2ee", strict=False)
    with pytest.raises(UnterminatedDict):
        decode(b"d1:b0:", strict=False)


def test_deep_nesting():
    """ a maliciously deep input fails cleanly, rather than with a
        RecursionError
    """
    with pytest.raises(NestingTooDeep):
        decode(b"l" * 10000 + b"e" * 10000)
    with pytest.raises(NestingTooDeep):
        decode(b"d1:a" * 10000)

    nested = b"l" * constants.MAX_DEPTH + b"e" * constants.MAX_DEPTH
    value = decode(nested)
    for _ in range(constants.MAX_DEPTH - 1):
        value = value[0]
    assert value == []


def test_max_depth():
    assert Decoder(b"llee", max_depth=2).decode_value() == [[]]
    with pytest.raises(NestingTooDeep) as exc:
        Decoder(b"llee", max_depth=1).decode_value()
    assert exc.value.position == 1
    with pytest.raises(NestingTooDeep):
        Decoder(b"ldee", max_depth=1).decode_value()


def test_max_string_length():
    assert decode(b"5:hello", max_string_length=5) == b"hello"
    with pytest.raises(MalformedLength):
        decode(b"5:hello", max_string_length=4)
    with pytest.raises(MalformedLength):
        decode(b"123456789012:x", max_string_length=10)
    assert decode(b"0:", max_string_length=0) == b""


def test_invalid_limits():
    with pytest.raises(ValueError):
        Decoder(b"", max_depth=0)
    with pytest.raises(ValueError):
        Decoder(b"", max_depth=constants.MAX_DEPTH_CEILING + 1)
    with pytest.raises(ValueError):
        Decoder(b"", max_string_length=-1)


def test_decode_requires_bytes():
    with pytest.raises(TypeError):
        decode(u"i1e")
    assert decode(bytearray(b"i1e")) == 1
    assert decode(memoryview(b"i1e")) == 1


def test_decoder_recovers_depth_after_error():
    decoder = Decoder(b"lllx")
    with pytest.raises(InvalidTypeTag):
        decoder.decode_value()
    assert decoder._depth == 0


def test_typed_reads():
    decoder = Decoder(b"i1e4:spamli2eed1:ai3ee")
    assert decoder.decode_int() == 1
    assert decoder.decode_bytes() == b"spam"
    assert decoder.decode_list() == [2]
    assert decoder.decode_dict() == {b"a": 3}
    with pytest.raises(UnexpectedEof):
        decoder.decode_int()


def test_typed_read_mismatch_leaves_cursor():
    decoder = Decoder(b"i1e")
    with pytest.raises(UnexpectedType) as exc:
        decoder.decode_bytes()
    assert exc.value.expected == "bytes"
    assert exc.value.found == "integer"
    assert str(exc.value) == "expected bytes, found integer (at byte 0)"
    assert decoder.position == 0
    assert decoder.decode_value() == 1


def test_typed_read_invalid_tag():
    with pytest.raises(InvalidTypeTag):
        Decoder(b"x").decode_dict()


def test_load_leaves_file_after_value():
    f = io.BytesIO(b"d1:ai1eerest")
    assert load(f) == {b"a": 1}
    assert f.read() == b"rest"


def test_load_trickle_source(torrent_data):
    assert load(TrickleSource(torrent_data)) == decode(torrent_data)


def test_consecutive_values_from_one_source():
    f = io.BytesIO(b"i1e4:spamlei-2e")
    assert load(f) == 1
    assert load(f) == b"spam"
    assert load(f) == []
    assert load(f) == -2
    with pytest.raises(UnexpectedEof):
        load(f)


def test_iter_decode(torrent_data):
    assert list(iter_decode(b"i1e4:spamle")) == [1, b"spam", []]
    assert list(iter_decode(b"")) == []
    assert list(iter_decode(io.BytesIO(torrent_data + torrent_data))) == [
        decode(torrent_data),
        decode(torrent_data),
    ]
    with pytest.raises(MalformedInteger):
        list(iter_decode(b"i1ei-0e"))


def test_decode_prefix():
    assert decode_prefix(b"i42etrailing") == (42, 4)
    assert decode_prefix(b"le") == ([], 2)


def test_repr():
    decoder = Decoder(b"le", strict=False)
    assert repr(decoder) == "<decoder lenient <cursor @0>>"
