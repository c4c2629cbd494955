import pytest

from core.errors import InvalidAddressError
from core.paths import (
    CONTENT_URI_PREFIX,
    DIRECTORY_URI_PREFIX,
    METADATA_URI_PREFIX,
    decode_uri,
    encode_uri,
    parse_bool_flag,
    parse_recursive_flag,
    require_path,
    split_query,
)


def test_decode_uri_strips_prefix():
    assert decode_uri("file://metadata//tmp/a.txt", METADATA_URI_PREFIX) == "/tmp/a.txt"
    assert decode_uri("file://content/relative/a.txt", CONTENT_URI_PREFIX) == "relative/a.txt"


def test_decode_uri_replaces_reserved_escapes():
    uri = "file://content/C%3A%5CUsers%5Cme%2Fmy%20file.txt"
    assert decode_uri(uri, CONTENT_URI_PREFIX) == "C:\\Users\\me/my file.txt"


def test_decode_uri_is_not_general_percent_decoding():
    assert decode_uri("file://content/a%41b", CONTENT_URI_PREFIX) == "a%41b"
    # Lower-case escapes are left alone
    assert decode_uri("file://content/a%2fb", CONTENT_URI_PREFIX) == "a%2fb"


def test_decode_uri_wrong_prefix_raises():
    with pytest.raises(InvalidAddressError):
        decode_uri("file://content/a.txt", METADATA_URI_PREFIX)
    with pytest.raises(InvalidAddressError):
        decode_uri("", METADATA_URI_PREFIX)
    with pytest.raises(InvalidAddressError):
        decode_uri(None, METADATA_URI_PREFIX)


def test_encode_then_decode_round_trips_absolute_path(tmp_path):
    target = str(tmp_path / "dir" / "file.txt")
    uri = encode_uri(target, CONTENT_URI_PREFIX)
    assert uri.startswith(CONTENT_URI_PREFIX)
    assert decode_uri(uri, CONTENT_URI_PREFIX) == target


def test_encode_escapes_reserved_characters():
    assert encode_uri("/a b:c\\d", CONTENT_URI_PREFIX) == "file://content/%2Fa%20b%3Ac%5Cd"


def test_split_query():
    assert split_query("file://directory//tmp?recursive=true") == ("file://directory//tmp", "recursive=true")
    assert split_query("file://directory//tmp") == ("file://directory//tmp", "")


def test_parse_recursive_flag():
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp?recursive=true") is True
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp?recursive=false") is False
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp?x=1&recursive=true") is True
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp") is False
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp?recursive=yes") is False
    assert parse_recursive_flag(DIRECTORY_URI_PREFIX + "/tmp?recursive=TRUE") is False


def test_parse_bool_flag():
    assert parse_bool_flag(True) is True
    assert parse_bool_flag(False) is False
    assert parse_bool_flag("True") is True
    assert parse_bool_flag(" false ") is False
    assert parse_bool_flag(None) is False
    assert parse_bool_flag("maybe", default=True) is True


def test_require_path():
    assert require_path("/tmp") == "/tmp"
    with pytest.raises(InvalidAddressError):
        require_path("")
    with pytest.raises(InvalidAddressError):
        require_path("   ")
    with pytest.raises(InvalidAddressError):
        require_path(None)
