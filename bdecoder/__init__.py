from ._version import __version__

from .cursor import ByteCursor, EOF
from .decoder import Decoder, decode, decode_prefix, iter_decode, load
from .errors import BencodeError, DecodeError
from .types import BencodeType, type_of
