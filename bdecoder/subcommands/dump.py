import logging
import sys

from ..subcommand import SubCommand
from ..decoder import Decoder
from ..errors import TrailingData
from ..tools import format_value, open_input


log = logging.getLogger("bdecoder")


class Dump(SubCommand):
    """Decode a Bencode file and write the value tree to stdout."""
    help = """Decode and print a Bencode file"""

    def add_arguments(self, parser):
        parser.add_argument("path", metavar="PATH", help="file to decode, or - for stdin")
        parser.add_argument(
            "--lenient",
            action="store_true",
            default=False,
            help="Accept dictionaries with unsorted or duplicate keys",
        )
        parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            dest="all",
            default=False,
            help="Decode every value in a stream of concatenated values",
        )
        return parser

    def run(self):
        options = self.app.get_decoder_options(lenient=self.args.lenient)
        with open_input(self.args.path) as source:
            decoder = Decoder(source, **options)
            log.debug("decoding %s with %r", self.args.path, decoder)
            if self.args.all:
                while not decoder.cursor.at_eof():
                    self.write(decoder.decode_value())
            else:
                self.write(decoder.decode_value())
                if not decoder.cursor.at_eof():
                    raise TrailingData("unexpected data after value", decoder.position)

    def write(self, value):
        sys.stdout.write(format_value(value) + "\n")
