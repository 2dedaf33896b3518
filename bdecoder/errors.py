"""Errors thrown by the Bencode decoder"""


class BencodeError(Exception):
    """A catch-all for bdecoder errors"""


class ConfigError(BencodeError):
    """Thrown when there is a problem reading config information"""


class DecodeError(BencodeError):
    """The data being decoded is not valid Bencode.

    Args:
        message (str): Description of the problem.
        position (int): Byte offset in the source, or None if unknown.
    """

    kind = "DecodeError"

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super(DecodeError, self).__init__(message, position)

    def __str__(self):
        if self.position is None:
            return self.message
        return "{} (at byte {})".format(self.message, self.position)


class UnexpectedEof(DecodeError):
    """Input ended where a value was expected."""

    kind = "UnexpectedEof"


class InvalidTypeTag(DecodeError):
    """Leading byte is none of i, l, d or a digit."""

    kind = "InvalidTypeTag"

    def __init__(self, byte, position=None, message=None):
        self.byte = byte
        if message is None:
            message = "invalid type tag {!r}".format(byte)
        super(InvalidTypeTag, self).__init__(message, position)


class MissingValue(InvalidTypeTag):
    """A dictionary key was followed by the end marker."""

    kind = "InvalidTypeTag"


class MalformedInteger(DecodeError):
    kind = "MalformedInteger"


class MalformedLength(DecodeError):
    kind = "MalformedLength"


class TruncatedInput(DecodeError):
    """Fewer bytes remain than were requested."""

    kind = "TruncatedInput"


class TruncatedString(TruncatedInput):
    kind = "TruncatedString"


class UnterminatedList(DecodeError):
    kind = "UnterminatedList"


class UnterminatedDict(DecodeError):
    kind = "UnterminatedDict"


class NonStringKey(DecodeError):
    kind = "NonStringKey"


class KeysNotSorted(DecodeError):
    kind = "KeysNotSorted"


class DuplicateKey(DecodeError):
    kind = "DuplicateKey"


class NestingTooDeep(DecodeError):
    kind = "NestingTooDeep"


class SourceIoError(DecodeError):
    """The byte source itself failed (not a problem with the content)."""

    kind = "SourceIoError"


class TrailingData(DecodeError):
    """Bytes remain after a complete value."""

    kind = "TrailingData"


class UnexpectedType(DecodeError):
    """A typed read found a different value type."""

    kind = "UnexpectedType"

    def __init__(self, expected, found, position=None):
        self.expected = expected
        self.found = found
        message = "expected {}, found {}".format(expected, found)
        super(UnexpectedType, self).__init__(message, position)
