"""Stage 2: charset parameter of the HTTP ``Content-Type`` header."""

from __future__ import annotations

import re
from collections.abc import Mapping

from webcharset.pipeline.validate import validate_charset

CONTENT_TYPE = "content-type"

_CHARSET_RE = re.compile(r"""\bcharset=\s*["']?([^\s,;"']*)""", re.IGNORECASE)


def charset_from_content_type(content_type: str | None) -> str | None:
    """Parse out a supported charset from a content type value.

    :param content_type: e.g. ``"text/html; charset=EUC-JP"``.
    :returns: ``"EUC-JP"``, or ``None`` if absent or not supported.
    """
    if content_type is None:
        return None
    match = _CHARSET_RE.search(content_type)
    if match is None:
        return None
    charset = match.group(1).strip().replace("charset=", "")
    return validate_charset(charset)


def content_type_from_headers(headers: Mapping[str, str] | None) -> str | None:
    """Return the ``Content-Type`` value, matching the key case-insensitively."""
    if not headers:
        return None
    value = headers.get(CONTENT_TYPE)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == CONTENT_TYPE:
            return candidate
    return None


def charset_from_headers(headers: Mapping[str, str] | None) -> str | None:
    """Return the charset declared by the server, if any."""
    return charset_from_content_type(content_type_from_headers(headers))
