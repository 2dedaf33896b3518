import logging
import platform

import distro

from ._version import __version__


log = logging.getLogger("bdecoder")


# Cache the meta dict because it never changes
_META_CACHE = None


def get_meta():
    """Get a dict of information useful in bug reports."""
    global _META_CACHE
    if _META_CACHE is not None:
        return _META_CACHE.copy()
    meta = {}
    meta["bdecoder_version"] = __version__
    meta["python_version"] = get_python_version()
    meta["os_version"] = get_os_version()
    meta["uname"] = get_uname()
    _META_CACHE = meta
    return meta.copy()


def get_python_version():
    return "{} {}".format(platform.python_implementation(), platform.python_version())


def get_uname():
    """Get uname."""
    uname = " ".join(platform.uname())
    return uname


def get_os_version():
    """Get the OS version."""
    try:
        os_version = " ".join(
            [distro.name(), distro.version(), distro.codename()]
        ).strip()
    except OSError:
        log.exception("unable to read OS release information")
        return ""
    return os_version
