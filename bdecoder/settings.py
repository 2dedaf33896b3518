"""
Decoder settings, read from an INI style conf file. For example:

    [decoder]
    strict = yes
    max_depth = 128
    max_string_length = 1048576

"""

import configparser
from os.path import basename

from . import constants
from . import errors


class ConfigSection(object):
    """A proxy object for a single conf setting"""

    def __init__(self, conf, section):
        self.conf = conf
        self.section = section

    def get(self, key, default=Ellipsis):
        return self.conf.get(self.section, key, default=default)

    def get_bool(self, key, default=False):
        return self.conf.get_bool(self.section, key, default=default)

    def get_integer(self, key, default=Ellipsis):
        return self.conf.get_integer(self.section, key, default=default)


class BDConfigParser(configparser.ConfigParser):
    """Custom ConfigParser that has a get that can return defaults"""

    def __init__(self, *args, **kwargs):
        configparser.ConfigParser.__init__(self, *args, **kwargs)
        self.path = ""

    def __repr__(self):
        return "<settings {}>".format(basename(self.path))

    def get_section(self, section):
        return ConfigSection(self, section)

    def get(self, section, key, default=Ellipsis, **kwargs):
        try:
            return configparser.ConfigParser.get(self, section, key, **kwargs)
        except configparser.Error:
            if default is Ellipsis:
                raise errors.ConfigError(
                    "required key [{}]/{} is missing from conf file".format(section, key)
                )
            return default

    def has_setting(self, section, key):
        try:
            configparser.ConfigParser.get(self, section, key)
        except configparser.Error:
            return False
        else:
            return True

    def get_bool(self, section, key, default=Ellipsis):
        setting = self.get(section, key, default=default)
        if isinstance(setting, str):
            return setting.lower() in ("1", "y", "yes", "true", "on")
        else:
            return bool(setting)

    def get_integer(self, section, key, default=Ellipsis):
        setting = self.get(section, key, default=default)
        try:
            setting = int(setting)
        except (TypeError, ValueError):
            raise errors.ConfigError(
                "conf value [{}]/{} must be a valid integer".format(section, key)
            )
        return setting


def read(path):
    """Read a conf file. A missing file gives an empty config."""
    cfg = BDConfigParser()
    try:
        cfg.read(path)
    except configparser.Error as error:
        raise errors.ConfigError("unable to parse {} ({})".format(path, error))
    cfg.path = path
    return cfg


def decoder_options(conf, section="decoder"):
    """Get Decoder keyword arguments from a [decoder] section.

    Args:
        conf (BDConfigParser): Settings.
        section (str): Name of the section to read.

    Returns:
        dict: Keyword arguments for Decoder.
    """
    settings = conf.get_section(section)
    strict = settings.get_bool("strict", default=True)
    max_depth = settings.get_integer("max_depth", default=constants.MAX_DEPTH)
    max_string_length = settings.get_integer(
        "max_string_length", default=constants.MAX_STRING_LENGTH
    )
    if not 1 <= max_depth <= constants.MAX_DEPTH_CEILING:
        raise errors.ConfigError(
            "conf value [{}]/max_depth must be between 1 and {}".format(
                section, constants.MAX_DEPTH_CEILING
            )
        )
    if max_string_length < 0:
        raise errors.ConfigError(
            "conf value [{}]/max_string_length must not be negative".format(section)
        )
    return {
        "strict": strict,
        "max_depth": max_depth,
        "max_string_length": max_string_length,
    }
