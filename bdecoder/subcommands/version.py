import sys

from ..subcommand import SubCommand
from .. import __version__


class Version(SubCommand):
    """Write version to stdout."""
    help = """Write version to stdout."""

    def run(self):
        sys.stdout.write(__version__)
