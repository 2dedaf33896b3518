"""
Decode Bencode (http://en.wikipedia.org/wiki/Bencode)

Values decode to native types: int, bytes, list and dict (with bytes keys, in
the order they appear in the input).

"""

from contextlib import contextmanager
import logging

from . import constants
from .cursor import ByteCursor, EOF
from .errors import (
    DuplicateKey,
    InvalidTypeTag,
    KeysNotSorted,
    MalformedInteger,
    MalformedLength,
    MissingValue,
    NestingTooDeep,
    NonStringKey,
    TrailingData,
    TruncatedInput,
    TruncatedString,
    UnexpectedEof,
    UnexpectedType,
    UnterminatedDict,
    UnterminatedList,
)
from .types import DIGITS, BencodeType, type_of

log = logging.getLogger("bdecoder")


class Decoder(object):
    """Recursive descent Bencode decoder.

    Args:
        source: A ByteCursor, a bytes-like object or a binary file object.
        strict (bool): Require canonical dictionaries (sorted keys, no
            duplicates).
        max_depth (int): Maximum nesting of lists and dictionaries.
        max_string_length (int): Largest byte string that will be read.
    """

    def __init__(
        self,
        source,
        strict=True,
        max_depth=None,
        max_string_length=None,
    ):
        if max_depth is None:
            max_depth = constants.MAX_DEPTH
        if max_string_length is None:
            max_string_length = constants.MAX_STRING_LENGTH
        if not 1 <= max_depth <= constants.MAX_DEPTH_CEILING:
            raise ValueError(
                "max_depth must be between 1 and {}".format(constants.MAX_DEPTH_CEILING)
            )
        if max_string_length < 0:
            raise ValueError("max_string_length must not be negative")
        if isinstance(source, ByteCursor):
            self.cursor = source
        else:
            self.cursor = ByteCursor(source)
        self.strict = strict
        self.max_depth = max_depth
        self.max_string_length = max_string_length
        self._max_length_digits = len(str(max_string_length))
        self._depth = 0
        self._parsers = {
            BencodeType.integer: self._decode_integer,
            BencodeType.bytes: self._decode_bytes,
            BencodeType.list: self._decode_list,
            BencodeType.dict: self._decode_dict,
        }

    def __repr__(self):
        mode = "strict" if self.strict else "lenient"
        return "<decoder {} {!r}>".format(mode, self.cursor)

    @property
    def position(self):
        return self.cursor.position

    def _peek_type(self):
        """Get the type of the next value, without consuming anything."""
        tag = self.cursor.peek()
        value_type = BencodeType.from_tag(tag)
        if value_type is None:
            if tag == EOF:
                raise UnexpectedEof("expected a value", self.position)
            raise InvalidTypeTag(tag, self.position)
        return value_type

    def decode_value(self):
        """Decode the next value from the source."""
        return self._parsers[self._peek_type()]()

    def _expect(self, expected):
        found = self._peek_type()
        if found is not expected:
            raise UnexpectedType(expected.name, found.name, self.position)

    def decode_int(self):
        """Decode the next value, which must be an integer."""
        self._expect(BencodeType.integer)
        return self._decode_integer()

    def decode_bytes(self):
        """Decode the next value, which must be a byte string."""
        self._expect(BencodeType.bytes)
        return self._decode_bytes()

    def decode_list(self):
        """Decode the next value, which must be a list."""
        self._expect(BencodeType.list)
        return self._decode_list()

    def decode_dict(self):
        """Decode the next value, which must be a dictionary."""
        self._expect(BencodeType.dict)
        return self._decode_dict()

    @contextmanager
    def _nested(self):
        """Track container depth for the duration of a list / dict."""
        if self._depth >= self.max_depth:
            raise NestingTooDeep(
                "nesting deeper than {} levels".format(self.max_depth), self.position
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def _decode_integer(self):
        read_byte = self.cursor.read_byte
        start = self.position
        read_byte()  # i
        negative = False
        byte = read_byte()
        if byte == b"-":
            negative = True
            byte = read_byte()
        digits = bytearray()
        while byte and byte[0] in DIGITS:
            digits += byte
            if len(digits) > constants.INT_MAX_DIGITS:
                raise MalformedInteger("integer out of 64 bit range", start)
            byte = read_byte()
        if byte != b"e":
            if byte == EOF:
                raise MalformedInteger("unterminated integer", start)
            raise MalformedInteger(
                "illegal character {!r} in integer".format(byte), self.position - 1
            )
        if not digits:
            raise MalformedInteger("integer has no digits", start)
        if digits[0] == ord("0") and len(digits) > 1:
            raise MalformedInteger("leading zero in integer", start)
        if negative and digits == b"0":
            raise MalformedInteger("negative zero", start)
        number = int(digits)
        if negative:
            number = -number
        if not constants.INT_MIN <= number <= constants.INT_MAX:
            raise MalformedInteger("integer out of 64 bit range", start)
        return number

    def _decode_length(self):
        """Read a string length prefix, including the ':'."""
        read_byte = self.cursor.read_byte
        start = self.position
        digits = bytearray()
        while 1:
            byte = read_byte()
            if byte == b":":
                break
            if byte == EOF:
                raise MalformedLength("unterminated string length", start)
            if byte[0] not in DIGITS:
                raise MalformedLength(
                    "illegal character {!r} in string length".format(byte),
                    self.position - 1,
                )
            digits += byte
            if len(digits) > self._max_length_digits:
                break
        if not digits:
            raise MalformedLength("string length has no digits", start)
        if digits[0] == ord("0") and len(digits) > 1:
            raise MalformedLength("leading zero in string length", start)
        length = int(digits)
        if length > self.max_string_length:
            raise MalformedLength(
                "string length exceeds the maximum of {} bytes".format(
                    self.max_string_length
                ),
                start,
            )
        return length

    def _decode_bytes(self):
        length = self._decode_length()
        start = self.position
        try:
            return self.cursor.read_exact(length)
        except TruncatedInput as error:
            raise TruncatedString(
                "truncated string, {}".format(error.message), start
            ) from error

    def _decode_list(self):
        cursor = self.cursor
        start = self.position
        with self._nested():
            cursor.read_byte()  # l
            items = []
            append = items.append
            while 1:
                byte = cursor.peek()
                if byte == b"e":
                    cursor.read_byte()
                    return items
                if byte == EOF:
                    raise UnterminatedList(
                        "list starting at byte {} is not terminated".format(start),
                        self.position,
                    )
                append(self.decode_value())

    def _decode_dict(self):
        cursor = self.cursor
        start = self.position
        with self._nested():
            cursor.read_byte()  # d
            result = {}
            previous_key = None
            while 1:
                byte = cursor.peek()
                if byte == b"e":
                    cursor.read_byte()
                    return result
                if byte == EOF:
                    raise UnterminatedDict(
                        "dictionary starting at byte {} is not terminated".format(start),
                        self.position,
                    )

                key_position = self.position
                key = self.decode_value()
                if not isinstance(key, bytes):
                    raise NonStringKey(
                        "dictionary key must be a byte string, not {}".format(
                            type_of(key).name
                        ),
                        key_position,
                    )
                if self.strict and previous_key is not None:
                    if key == previous_key:
                        raise DuplicateKey(
                            "duplicate key {!r}".format(key), key_position
                        )
                    if key < previous_key:
                        raise KeysNotSorted(
                            "key {!r} sorts before {!r}".format(key, previous_key),
                            key_position,
                        )

                byte = cursor.peek()
                if byte == b"e":
                    raise MissingValue(
                        byte,
                        self.position,
                        message="dictionary key {!r} has no value".format(key),
                    )
                if byte == EOF:
                    raise UnterminatedDict(
                        "dictionary key {!r} has no value".format(key), self.position
                    )
                value = self.decode_value()

                if key in result:
                    log.warning(
                        "duplicate key %r at byte %s, keeping the last value",
                        key,
                        key_position,
                    )
                result[key] = value
                previous_key = key


def _check_bytes(data):
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("decode takes bytes, not {!r}".format(type(data)))


def decode(data, strict=True, **options):
    """Decode Bencode, return an object.

    `data` must contain exactly one value; anything after it is an error.
    """
    _check_bytes(data)
    decoder = Decoder(data, strict=strict, **options)
    value = decoder.decode_value()
    if not decoder.cursor.at_eof():
        raise TrailingData("unexpected data after value", decoder.position)
    return value


def decode_prefix(data, strict=True, **options):
    """Decode the first value in `data`.

    Returns:
        tuple: The value, and the number of bytes it occupied.
    """
    _check_bytes(data)
    decoder = Decoder(data, strict=strict, **options)
    value = decoder.decode_value()
    return value, decoder.position


def load(fileobj, strict=True, **options):
    """Decode one value from a binary file.

    The file is left positioned on the first byte after the value.
    """
    return Decoder(fileobj, strict=strict, **options).decode_value()


def iter_decode(source, strict=True, **options):
    """Yield consecutive values from `source` until it is exhausted."""
    decoder = Decoder(source, strict=strict, **options)
    count = 0
    while not decoder.cursor.at_eof():
        yield decoder.decode_value()
        count += 1
    log.debug("decoded %s value(s) from %r", count, decoder)
