"""
Byte cursor

Single byte lookahead over a byte source, without reading ahead of what the
caller asked to see.

"""

import io

from .errors import SourceIoError, TruncatedInput


# Returned by peek / read_byte at the end of input
EOF = b""


class ByteCursor(object):
    """Reads from a bytes-like object or anything with a read(size) method."""

    def __init__(self, source):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)
        elif not callable(getattr(source, "read", None)):
            raise TypeError(
                "byte source must be bytes-like or have a read method, not {!r}".format(
                    type(source)
                )
            )
        self._read = source.read
        self._pushback = None
        self.position = 0

    def __repr__(self):
        return "<cursor @{}>".format(self.position)

    def _read_source(self, size):
        """Read up to `size` bytes from the source."""
        try:
            data = self._read(size)
        except OSError as error:
            raise SourceIoError(
                "byte source failed ({})".format(error), self.position
            ) from error
        if data is None:
            # Non-blocking source with nothing buffered; that is not the end
            raise SourceIoError("byte source has no data available", self.position)
        return bytes(data)

    def peek(self):
        """Get the next byte without consuming it.

        Returns:
            bytes: A single byte, or EOF at the end of input.
        """
        if self._pushback is None:
            byte = self._read_source(1)
            if not byte:
                return EOF
            self._pushback = byte
        return self._pushback

    def at_eof(self):
        return self.peek() == EOF

    def read_byte(self):
        """Consume one byte.

        Returns:
            bytes: A single byte, or EOF at the end of input.
        """
        byte = self.peek()
        self._pushback = None
        self.position += len(byte)
        return byte

    def read_exact(self, count):
        """Consume exactly `count` bytes.

        Raises TruncatedInput if the source ends first. The bytes that were
        available are consumed.
        """
        if count < 0:
            raise ValueError("count must not be negative")
        start = self.position
        chunks = []
        remaining = count
        if remaining and self._pushback is not None:
            chunks.append(self._pushback)
            self._pushback = None
            remaining -= 1
        # A socket or pipe may return less than asked for
        while remaining:
            chunk = self._read_source(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        self.position += len(data)
        if remaining:
            raise TruncatedInput(
                "expected {} bytes, only {} available".format(count, len(data)),
                start,
            )
        return data
