"""Stage 3: charset declared in HTML ``<meta>`` tags."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from webcharset.pipeline.http import charset_from_content_type
from webcharset.pipeline.validate import validate_charset

logger = logging.getLogger(__name__)

# Shortcut for the HTML5 form, tried before parsing the whole document.
_META_CHARSET_MARKER = '<meta charset="'

# Matches <meta http-equiv="Content-Type" content="text/html; charset=gb2312">
# (any case) and the HTML5 <meta charset="gb2312">, in document order.
_META_SELECTOR = 'meta[http-equiv="content-type" i], meta[charset]'


def _charset_from_marker(html: str, start: int) -> str | None:
    value_start = start + len(_META_CHARSET_MARKER)
    end = html.find('"', value_start)
    if end == -1:
        # Opened but never closed: truncated or broken markup.
        logger.debug("unterminated meta charset at offset %d", start)
        return None
    return validate_charset(html[value_start:end])


def _charset_from_parse(html: str) -> str | None:
    try:
        soup = BeautifulSoup(html, "html.parser")
        metas = soup.select(_META_SELECTOR)
    except Exception as e:  # noqa: BLE001
        logger.debug("meta charset parse failed: %s", e)
        return None

    for meta in metas:
        charset = None
        if meta.has_attr("http-equiv"):
            charset = charset_from_content_type(meta.get("content"))
        if charset is None and meta.has_attr("charset"):
            charset = validate_charset(meta.get("charset"))
        if charset is not None:
            return charset
    return None


def detect_meta_charset(data: bytes) -> str | None:
    """Find a charset declared in a ``<meta>`` tag of *data*.

    The bytes are decoded as UTF-8 (undecodable bytes replaced) only to get
    a surface to scan; markup is ASCII so the tags survive.

    1. ``<meta charset="...">`` is searched for literally; if the opening
       marker is present the answer is final, even when it is ``None``.
    2. Otherwise the document is parsed and the first
       ``<meta http-equiv="Content-Type" content="...">`` or
       ``<meta charset=...>`` carrying a supported charset wins.

    :param data: The raw byte data to scan.
    :returns: A validated charset name, or ``None``.
    """
    if not data:
        return None

    html = data.decode("utf-8", errors="replace")

    start = html.find(_META_CHARSET_MARKER)
    if start != -1:
        return _charset_from_marker(html, start)

    return _charset_from_parse(html)
