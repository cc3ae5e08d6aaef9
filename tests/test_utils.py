import pytest

from embedvideo.utils.numeric import is_numeric, to_int
from embedvideo.utils.querystring import append_query, parse_query, set_query_param


@pytest.mark.parametrize("value", ["480", " 480", "4.5", "1e3", "-2", 3, 2.5])
def test_numeric_values(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", ["", "wide", "640x360", None, True])
def test_non_numeric_values(value):
    assert not is_numeric(value)
    assert to_int(value) is None


def test_to_int_truncates():
    assert to_int("640.9") == 640
    assert to_int("1e3") == 1000


@pytest.mark.parametrize("value", ["1e400", "-1e400", "9" * 400])
def test_to_int_overflow_is_none(value):
    assert is_numeric(value)
    assert to_int(value) is None


def test_parse_query_keeps_last_and_blank():
    assert parse_query("a=1&a=2&b=") == {"a": "2", "b": ""}


def test_set_query_param_adds_and_overrides():
    assert set_query_param("foo=bar", "parent", "wiki.example.org") == "foo=bar&parent=wiki.example.org"
    assert set_query_param("parent=x", "parent", "y") == "parent=y"


def test_append_query():
    assert append_query("https://a/b", "") == "https://a/b"
    assert append_query("https://a/b", "x=1") == "https://a/b?x=1"
    assert append_query("https://a/?c=1", "x=1") == "https://a/?c=1&x=1"
