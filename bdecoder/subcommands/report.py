import sys

from ..subcommand import SubCommand
from .. import diagnostics


class Report(SubCommand):
    """Write a diagnostic report to include with bug reports"""
    help = """Write a diagnostic report"""

    def run(self):
        meta = diagnostics.get_meta()
        for key in sorted(meta):
            sys.stdout.write("{}: {}\n".format(key, meta[key]))
