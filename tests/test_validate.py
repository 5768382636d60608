# tests/test_validate.py
from __future__ import annotations

import pytest

from webcharset.pipeline.validate import validate_charset


def test_exact_spelling_kept():
    assert validate_charset("utf-8") == "utf-8"
    assert validate_charset("Shift_JIS") == "Shift_JIS"


def test_whitespace_and_quotes_stripped():
    assert validate_charset(' "utf-8" ') == "utf-8"
    assert validate_charset("'ISO-8859-1'") == "ISO-8859-1"
    assert validate_charset("\tUTF-8\n") == "UTF-8"


def test_unknown_name_rejected():
    assert validate_charset("not-a-real-charset") is None


@pytest.mark.parametrize("raw", [None, "", "   ", '""', "' '"])
def test_blank_input_rejected(raw):
    assert validate_charset(raw) is None


def test_bytes_to_bytes_codecs_rejected():
    # Registered codecs, but bytes.decode() cannot use them.
    assert validate_charset("base64") is None
    assert validate_charset("zlib") is None
    assert validate_charset("rot13") is None


@pytest.mark.parametrize(
    "name", ["unicode_escape", "raw_unicode_escape", "idna", "punycode", "undefined"]
)
def test_python_internal_text_codecs_rejected(name):
    assert validate_charset(name) is None
    assert validate_charset(name.upper()) is None


def test_malformed_name_does_not_raise():
    assert validate_charset("utf\x00-8") is None
    assert validate_charset("charset=utf-8") is None


def test_result_is_decodable():
    for raw in ("utf-8", "windows-1252", "latin1", "euc-jp", "gb2312", "koi8-r"):
        name = validate_charset(raw)
        assert name is not None
        b"abc".decode(name)
