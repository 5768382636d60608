"""Charset name validation against Python's codec registry."""

from __future__ import annotations

import codecs

_QUOTES = str.maketrans("", "", "\"'")

# Decoding an empty buffer short-circuits before the codec is looked up, so
# the sample needs at least one byte.
_SAMPLE = b"a"

# Text codecs Python provides for its own purposes; no document is written
# in them.
_PYTHON_ONLY_CODECS: frozenset[str] = frozenset(
    {"idna", "punycode", "raw_unicode_escape", "unicode_escape", "undefined"}
)


def _is_decodable(name: str) -> bool:
    """Return True if ``bytes.decode`` accepts *name* for document text.

    ``codecs.lookup()`` alone is not enough: it also knows bytes-to-bytes
    codecs such as ``base64`` or ``zlib``, which ``bytes.decode`` rejects
    with a ``LookupError``, and Python-internal text codecs such as
    ``unicode_escape``.
    """
    try:
        info = codecs.lookup(name)
        if info.name.replace("-", "_") in _PYTHON_ONLY_CODECS:
            return False
        _SAMPLE.decode(name, errors="replace")
    except (LookupError, ValueError, TypeError):
        return False
    return True


def validate_charset(raw: str | None) -> str | None:
    """Normalize *raw* and return it if Python can decode with it.

    Surrounding whitespace and any quote characters are removed.  The name is
    returned as spelled when supported, otherwise its upper-cased form is
    tried.

    :param raw: A free-form charset name, e.g. ``' "utf-8" '``.
    :returns: The cleaned name, or ``None`` if it is blank or unsupported.
    """
    if not raw:
        return None
    name = raw.strip().translate(_QUOTES).strip()
    if not name:
        return None
    if _is_decodable(name):
        return name
    upper = name.upper()
    if upper != name and _is_decodable(upper):
        return upper
    return None
