# tests/test_api.py
from __future__ import annotations

import pytest

import webcharset
from webcharset import CharsetDetector, DetectorConfig, NoInputError


def test_version():
    assert webcharset.__version__ == "1.0.0"


def test_public_names():
    for name in webcharset.__all__:
        assert hasattr(webcharset, name)


def test_detect_returns_str():
    result = webcharset.detect(b"Hello world")
    assert isinstance(result, str)


def test_detect_none_raises():
    with pytest.raises(NoInputError):
        webcharset.detect(None)


def test_utf8_bom_ignores_declarations():
    data = b'\xef\xbb\xbf<meta charset="Shift_JIS">'
    headers = {"Content-Type": "text/html; charset=ISO-8859-1"}
    assert webcharset.detect(data, headers) == "UTF-8"
    assert webcharset.detect(data, headers, fast=True) == "UTF-8"


def test_agreement():
    data = b'<html><head><meta charset="ISO-8859-1"></head></html>'
    headers = {"Content-Type": "text/html; charset=ISO-8859-1"}
    assert webcharset.detect(data, headers) == "ISO-8859-1"


def test_fast_takes_http():
    data = b'<html><head><meta charset="Shift_JIS"></head></html>'
    headers = {"Content-Type": "text/html; charset=windows-1251"}
    assert webcharset.detect(data, headers, fast=True) == "windows-1251"


def test_fast_takes_meta():
    data = b'<html><head><meta charset="Shift_JIS"></head></html>'
    assert webcharset.detect(data, fast=True) == "Shift_JIS"


def test_utf8_content_without_declarations():
    data = "Größere Änderungen für Übersetzungen und Zeichensätze. ".encode() * 4
    assert webcharset.detect(data).lower() == "utf-8"


def test_max_length_validated():
    with pytest.raises(ValueError, match="max_length"):
        webcharset.detect(b"abc", max_length="10")


def test_module_detect_matches_detector():
    data = b'<meta http-equiv="Content-Type" content="text/html; charset=big5">'
    detector = CharsetDetector(DetectorConfig(fast=True, max_length=500))
    assert webcharset.detect(data, fast=True, max_length=500) == detector.detect(data)
