import pytest
from mock import patch


# A small single-file torrent, keys in canonical order
TORRENT = (
    b"d"
    b"8:announce30:http://tracker.example.org/ann"
    b"7:comment4:test"
    b"4:info"
    b"d"
    b"6:lengthi1048576e"
    b"4:name8:demo.iso"
    b"12:piece lengthi262144e"
    b"6:pieces20:" + b"\x01" * 20 +
    b"e"
    b"e"
)


@pytest.fixture(autouse=True)
def no_default_conf(tmpdir):
    """ make sure a conf file on the test machine is never picked up
    """
    missing = str(tmpdir.join("missing.conf"))
    with patch('bdecoder.constants.DEFAULT_CONF_PATH', missing):
        yield missing


@pytest.fixture
def torrent_file(tmpdir):
    """ fixture for creating a torrent file
    """
    torrent_file = tmpdir.join("demo.torrent")
    torrent_file.write_binary(TORRENT)
    return str(torrent_file)


@pytest.fixture
def bad_file(tmpdir):
    """ fixture for a file with a malformed integer
    """
    bad_file = tmpdir.join("bad.torrent")
    bad_file.write_binary(b"i03e")
    return str(bad_file)


@pytest.fixture
def conf_file(tmpdir):
    """ fixture for a conf file with a shallow nesting limit
    """
    conf_file = tmpdir.join("bdecoder.conf")
    conf_file.write(
        "[decoder]\n"
        "strict = no\n"
        "max_depth = 1\n"
        "max_string_length = 1024\n"
    )
    return str(conf_file)


@pytest.fixture
def torrent_data():
    return TORRENT
