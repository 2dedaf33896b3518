"""The four Bencode value types."""

from enum import IntEnum, unique


DIGITS = frozenset(b"0123456789")


@unique
class BencodeType(IntEnum):
    """The type of a Bencode value."""

    # i<digits>e
    integer = 1

    # <length>:<bytes>
    bytes = 2

    # l<values>e
    list = 3

    # d<key><value>...e
    dict = 4

    @classmethod
    def from_tag(cls, tag):
        """Get the type introduced by a leading byte, or None.

        Args:
            tag (bytes): A single byte (b'' at end of input).

        Returns:
            BencodeType: The type, or None if the byte starts no value.
        """
        if len(tag) != 1:
            return None
        if tag == b"i":
            return cls.integer
        if tag == b"l":
            return cls.list
        if tag == b"d":
            return cls.dict
        if tag[0] in DIGITS:
            return cls.bytes
        return None


def type_of(value):
    """Get the BencodeType of a decoded value."""
    # bool is an int subclass but never comes out of the decoder
    if isinstance(value, bool):
        raise TypeError("{!r} is not a Bencode value".format(value))
    if isinstance(value, int):
        return BencodeType.integer
    if isinstance(value, bytes):
        return BencodeType.bytes
    if isinstance(value, list):
        return BencodeType.list
    if isinstance(value, dict):
        return BencodeType.dict
    raise TypeError("{!r} is not a Bencode value".format(value))
