import argparse
import logging
import logging.config
import os.path
import sys

from . import __version__
from . import constants
from . import errors
from . import settings
from . import subcommand
from .subcommands import check, dump, report, version  # noqa: F401

log = logging.getLogger("app")

# Map log levels on to integer values
_logging_level_names = {
    "NOTSET": 0,
    "DEBUG": 10,
    "INFO": 20,
    "WARN": 30,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class App(object):
    """Inspect and validate Bencode data."""

    def __init__(self):
        self.args = None
        self.subcommands = {
            name: cls(self) for name, cls in subcommand.registry.items()
        }

    def _make_arg_parser(self):
        """Make an argument parse object."""
        parser = argparse.ArgumentParser("bdecoder", description=self.__doc__)

        _version = "bdecoder v{}".format(__version__)
        parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=_version,
            help="Display version and exit",
        )
        parser.add_argument(
            "--log-level",
            metavar="LEVEL",
            default="WARNING",
            help="Set log level (INFO or WARNING or ERROR or DEBUG)",
        )
        parser.add_argument(
            "--log-file", metavar="PATH", default=None, help="Set log file"
        )
        parser.add_argument(
            "-d",
            "--debug",
            action="store_true",
            dest="debug",
            default=False,
            help="Enables debug output",
        )
        parser.add_argument(
            "-q", "--quiet", action="store_true", default=False, help="Hide output"
        )
        parser.add_argument(
            "-c",
            "--conf",
            dest="conf",
            metavar="PATH",
            default=None,
            help="Read decoder settings from PATH (default {})".format(
                constants.DEFAULT_CONF_PATH
            ),
        )

        subparsers = parser.add_subparsers(
            title="available sub-commands", dest="subcommand", help="sub-command help"
        )

        for name, _subcommand in sorted(self.subcommands.items()):
            subparser = subparsers.add_parser(
                name,
                help=_subcommand.help,
                description=getattr(_subcommand, "__doc__", None),
            )
            _subcommand.add_arguments(subparser)
        return parser

    def _init_logging(self):
        """Initialise logging."""
        log_format = "%(asctime)s %(name)s\t: %(message)s"
        log_level = "CRITICAL" if self.args.quiet else self.args.log_level.upper()
        try:
            log_level_no = _logging_level_names[log_level]
        except KeyError:
            self.error("invalid log level")

        if self.args.log_file:
            log_config = {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "simple": {
                        "class": "logging.Formatter",
                        "format": log_format,
                        "datefmt": "[%d/%b/%Y %H:%M:%S]",
                    }
                },
                "handlers": {
                    "file": {
                        "level": log_level,
                        "class": "logging.handlers.RotatingFileHandler",
                        "maxBytes": 5 * 1024 * 1024,
                        "backupCount": 5,
                        "filename": self.args.log_file,
                        "formatter": "simple",
                    }
                },
                "loggers": {"": {"level": log_level, "handlers": ["file"]}},
            }
            logging.config.dictConfig(log_config)
        else:
            logging.basicConfig(
                format=log_format, datefmt="[%d/%b/%Y %H:%M:%S]", level=log_level_no
            )

    def get_decoder_options(self, lenient=False):
        """Get Decoder keyword arguments from the conf file and command line."""
        path = self.args.conf
        if path is None:
            path = constants.DEFAULT_CONF_PATH
            if not os.path.exists(path):
                path = None
        elif not os.path.exists(path):
            raise errors.ConfigError("conf file {} does not exist".format(path))

        if path is None:
            options = {}
        else:
            log.debug("reading settings from %s", path)
            options = settings.decoder_options(settings.read(path))
        if lenient:
            options["strict"] = False
        return options

    def error(self, msg, code=-1):
        """Display error and exit app."""
        log.critical("app exit ({%s}) code={%s}", msg, code)
        sys.stderr.write(msg + "\n")
        sys.exit(code)

    def run(self, argv=None):
        parser = self._make_arg_parser()
        if argv is None:
            argv = sys.argv[1:]
        args = self.args = parser.parse_args(argv)

        self._init_logging()
        log.debug("ready")

        if args.subcommand is None:
            parser.print_help()
            return 1

        subcommand = self.subcommands[args.subcommand]
        subcommand.args = args

        try:
            return subcommand.run() or 0
        except Exception as e:
            if self.args.debug:
                raise
            sys.stderr.write("(bdecoder {}) {}\n".format(__version__, e))
            cmd = sys.argv[0].rsplit("/", 1)[-1]
            debug_cmd = " ".join([cmd, "--debug"] + argv)
            sys.stderr.write("(run '{}' for a full traceback)\n".format(debug_cmd))
            return -1


def main():
    """bdecoder entry point."""
    return_code = App().run() or 0
    log.debug("exit with code %s", return_code)
    sys.exit(return_code)
