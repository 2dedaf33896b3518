"""Render decoded values for people to read."""

from contextlib import contextmanager
import string
import sys

# Bytes shown verbatim; everything else is summarized as binary
_PRINTABLE = frozenset(string.printable.encode("ascii")) - frozenset(b"\t\n\r\x0b\x0c")

# Binary strings longer than this are truncated
SUMMARY_LENGTH = 32


def summarize_bytes(value):
    """Render a byte string, as text if it is printable ASCII."""
    if all(byte in _PRINTABLE for byte in value):
        return repr(value.decode("ascii"))
    if len(value) > SUMMARY_LENGTH:
        remaining = len(value) - SUMMARY_LENGTH
        return "{!r} + {} bytes".format(value[:SUMMARY_LENGTH], remaining)
    return repr(value)


def iter_lines(value, indent=0, prefix=""):
    """Yield the lines of a formatted value."""
    pad = "  " * indent
    if isinstance(value, dict):
        if not value:
            yield "{}{}{{}}".format(pad, prefix)
            return
        yield "{}{}{{".format(pad, prefix)
        for key, item in value.items():
            for line in iter_lines(item, indent + 1, summarize_bytes(key) + ": "):
                yield line
        yield "{}}}".format(pad)
    elif isinstance(value, list):
        if not value:
            yield "{}{}[]".format(pad, prefix)
            return
        yield "{}{}[".format(pad, prefix)
        for item in value:
            for line in iter_lines(item, indent + 1):
                yield line
        yield "{}]".format(pad)
    elif isinstance(value, bytes):
        yield "{}{}{}".format(pad, prefix, summarize_bytes(value))
    else:
        yield "{}{}{}".format(pad, prefix, value)


def format_value(value):
    """Format a value tree as an indented string."""
    return "\n".join(iter_lines(value))


@contextmanager
def open_input(path):
    """Open a path for binary reading; '-' is stdin (which is left open)."""
    if path == "-":
        yield sys.stdin.buffer
    else:
        with open(path, "rb") as f:
            yield f
