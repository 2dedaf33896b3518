from os import environ


def get_environ_int(name, default, minimum=None):
    """Get an integer from the environment.

    Args:
        name (str): environment variable name
        default (int): Default if env var doesn't exist, is not an integer
            or is below `minimum`
        minimum (int): Smallest acceptable value, or None for no minimum

    Returns:
        int: Integer value of env var.
    """
    try:
        value = int(environ.get(name, default))
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


DEFAULT_CONF_PATH = environ.get("BDECODER_CONF", "/etc/bdecoder/bdecoder.conf")

# Range of a Bencode integer (signed 64 bit)
INT_MAX = 2 ** 63 - 1
INT_MIN = -(2 ** 63)

# Digits needed for the widest 64 bit value, so parsing can stop early
INT_MAX_DIGITS = len(str(INT_MAX))

# Each level of nesting costs two Python frames, so the depth limit must stay
# well under sys.getrecursionlimit()
MAX_DEPTH_CEILING = 300

# Maximum nesting of lists / dicts
MAX_DEPTH = min(get_environ_int("BDECODER_MAX_DEPTH", 256, minimum=1), MAX_DEPTH_CEILING)

# Largest byte string we will allocate
MAX_STRING_LENGTH = get_environ_int(
    "BDECODER_MAX_STRING_LENGTH", 64 * 1024 * 1024, minimum=0
)
