import logging
import sys

from ..subcommand import SubCommand
from ..decoder import load
from ..errors import DecodeError, TrailingData
from ..tools import open_input


log = logging.getLogger("bdecoder")


class Check(SubCommand):
    """Check that files contain exactly one well formed Bencode value."""
    help = """Validate Bencode files"""

    def add_arguments(self, parser):
        parser.add_argument("paths", metavar="PATH", nargs="+", help="files to check")
        parser.add_argument(
            "--lenient",
            action="store_true",
            default=False,
            help="Accept dictionaries with unsorted or duplicate keys",
        )
        return parser

    def check(self, path, options):
        """Check one file, return an error message or None."""
        try:
            with open_input(path) as source:
                load(source, **options)
                if source.read(1):
                    raise TrailingData("unexpected data after value")
        except DecodeError as error:
            return "{}: {}".format(error.kind, error)
        except IOError as error:
            return str(error)
        return None

    def run(self):
        options = self.app.get_decoder_options(lenient=self.args.lenient)
        failures = 0
        for path in self.args.paths:
            message = self.check(path, options)
            if message is None:
                sys.stdout.write("{}: ok\n".format(path))
            else:
                failures += 1
                log.debug("%s failed: %s", path, message)
                sys.stdout.write("{}: {}\n".format(path, message))
        return 1 if failures else 0
