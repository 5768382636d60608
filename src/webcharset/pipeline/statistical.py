"""Stage 4: statistical guess from the byte distribution, backed by chardet."""

from __future__ import annotations

import codecs
import re
from typing import Protocol

import chardet

from webcharset._utils import DEFAULT_ENCODING, MINIMUM_THRESHOLD

#: Confidence added to a guess matching the declared encoding.
HINT_BONUS: float = 0.10

_TAG_RE = re.compile(rb"<[^<>]*>")

_ASCII_BYTES = bytes(range(0x80))

# Markup filtering only kicks in for documents with at least this many tags,
# and is abandoned when it would shrink a large input to almost nothing.
_MIN_TAGS = 5
_MIN_FILTERED_LEN = 100
_LARGE_INPUT_LEN = 600


class Guesser(Protocol):
    """Best-effort encoding oracle used as the last resort.

    Called with the (possibly truncated) content and an optional declared
    encoding to favour.  Returns an encoding name or ``None``.
    """

    def __call__(self, data: bytes, hint: str | None) -> str | None: ...


def _codec_name(name: str) -> str | None:
    try:
        return codecs.lookup(name).name
    except (LookupError, ValueError):
        return None


def _extends_ascii(name: str) -> bool:
    """Return True if *name* decodes every 7-bit byte as ASCII does."""
    try:
        return _ASCII_BYTES.decode(name) == _ASCII_BYTES.decode("ascii")
    except (LookupError, ValueError):
        return False


def strip_markup(data: bytes) -> bytes:
    """Remove ``<...>`` tags so tag names do not skew byte statistics.

    Returns *data* unchanged when it does not look like markup, or when
    filtering leaves too little text to go on.
    """
    filtered, tags = _TAG_RE.subn(b"", data)
    if tags < _MIN_TAGS:
        return data
    if len(filtered) < _MIN_FILTERED_LEN and len(data) > _LARGE_INPUT_LEN:
        return data
    return filtered


def guess_charset(data: bytes, hint: str | None = None) -> str | None:
    """Guess the encoding of *data* with chardet.

    Every chardet candidate is considered; one whose codec equals the codec
    of *hint* gets :data:`HINT_BONUS` added to its confidence.  The best
    adjusted candidate above :data:`MINIMUM_THRESHOLD` wins.  An ``ascii``
    verdict is widened to *hint* when that extends ASCII, else to
    :data:`~webcharset._utils.DEFAULT_ENCODING`.

    :param data: The raw byte data to analyze.
    :param hint: An encoding declared elsewhere (HTTP header or HTML meta).
    :returns: An encoding name as reported by chardet, or ``None``.
    """
    if not data:
        return None

    results = chardet.detect_all(
        strip_markup(data), ignore_threshold=True, should_rename_legacy=False
    )
    hint_codec = _codec_name(hint) if hint else None

    best: tuple[float, str] | None = None
    for result in results:
        encoding = result.get("encoding")
        if not encoding:
            continue
        confidence = float(result.get("confidence") or 0.0)
        if hint_codec is not None and _codec_name(encoding) == hint_codec:
            confidence += HINT_BONUS
        if best is None or confidence > best[0]:
            best = (confidence, encoding)

    if best is None or best[0] <= MINIMUM_THRESHOLD:
        return None
    if _codec_name(best[1]) == "ascii":
        # Pure ASCII only says the examined bytes are 7-bit; the rest of the
        # document (or what truncation cut off) may not be.
        if hint and _extends_ascii(hint):
            return hint
        return DEFAULT_ENCODING
    return best[1]
