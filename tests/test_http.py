# tests/test_http.py
from __future__ import annotations

import pytest

from webcharset.pipeline.http import (
    charset_from_content_type,
    charset_from_headers,
    content_type_from_headers,
)


def test_none_content_type():
    assert charset_from_content_type(None) is None


def test_plain_charset_parameter():
    assert charset_from_content_type("text/html; charset=EUC-JP") == "EUC-JP"


def test_case_insensitive_parameter_name():
    assert charset_from_content_type("text/html; CHARSET=utf-8") == "utf-8"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ('text/html; charset="ISO-8859-1"', "ISO-8859-1"),
        ("text/html; charset='windows-1251'", "windows-1251"),
        ("text/html; charset= utf-8", "utf-8"),
        ("text/html; charset=utf-8; foo=bar", "utf-8"),
        ("text/html; charset=utf-8, text/plain", "utf-8"),
        ("text/html; charset=utf-8 ", "utf-8"),
    ],
)
def test_terminators_and_quotes(value, expected):
    assert charset_from_content_type(value) == expected


def test_duplicated_charset_prefix():
    assert charset_from_content_type("text/html; charset=charset=utf-8") == "utf-8"


def test_missing_parameter():
    assert charset_from_content_type("text/html") is None


def test_empty_parameter():
    assert charset_from_content_type("text/html; charset=") is None


def test_unsupported_charset():
    assert charset_from_content_type("text/html; charset=x-no-such-thing") is None


def test_parameter_must_start_a_word():
    assert charset_from_content_type("text/html; mycharset=utf-8") is None


def test_headers_lookup_is_case_insensitive():
    headers = {"Content-Type": "text/html; charset=koi8-r"}
    assert content_type_from_headers(headers) == "text/html; charset=koi8-r"
    assert charset_from_headers(headers) == "koi8-r"


def test_headers_lowercase_key():
    assert charset_from_headers({"content-type": "text/html; charset=big5"}) == "big5"


def test_headers_without_content_type():
    assert charset_from_headers({"Server": "nginx"}) is None
    assert charset_from_headers({}) is None
    assert charset_from_headers(None) is None
