"""Pipeline orchestrator: the fast and thorough resolution strategies."""

from __future__ import annotations

import logging

from webcharset._utils import DEFAULT_ENCODING
from webcharset.enums import CandidateSource
from webcharset.pipeline import Candidate
from webcharset.pipeline.bom import detect_bom
from webcharset.pipeline.http import charset_from_content_type
from webcharset.pipeline.markup import detect_meta_charset
from webcharset.pipeline.statistical import Guesser, guess_charset
from webcharset.pipeline.validate import validate_charset

logger = logging.getLogger(__name__)

_DEFAULT_RESULT = Candidate(encoding=DEFAULT_ENCODING, source=CandidateSource.DEFAULT)


def _guess(data: bytes, hint: str | None, guesser: Guesser) -> Candidate | None:
    """Run the statistical oracle; any failure counts as no guess."""
    try:
        guessed = guesser(data, hint)
    except Exception as e:  # noqa: BLE001
        logger.debug("statistical guesser failed: %r", e)
        return None
    encoding = validate_charset(guessed)
    if encoding is None:
        return None
    return Candidate(encoding=encoding, source=CandidateSource.STATISTICAL)


def resolve_thorough(
    data: bytes,
    content_type: str | None,
    guesser: Guesser = guess_charset,
) -> Candidate:
    """Resolve the encoding, cross-checking the HTTP and HTML declarations.

    BOM first.  Then, if the HTTP header and the HTML meta tags declare the
    same charset (ignoring case), that charset.  Otherwise the statistical
    guess, hinted with whichever declaration exists when only one does.
    Finally :data:`~webcharset._utils.DEFAULT_ENCODING`.
    """
    bom = detect_bom(data)
    if bom is not None:
        logger.debug("encoding from BOM: %s", bom.encoding)
        return bom

    # Both are always computed: agreement needs both signals.
    http_charset = charset_from_content_type(content_type)
    html_charset = detect_meta_charset(data)

    if (
        http_charset is not None
        and html_charset is not None
        and http_charset.casefold() == html_charset.casefold()
    ):
        logger.debug("HTTP and meta agree on %s", http_charset)
        return Candidate(encoding=http_charset, source=CandidateSource.HTTP)

    hint = None
    if http_charset is not None and html_charset is None:
        hint = http_charset
    elif http_charset is None and html_charset is not None:
        hint = html_charset
    elif http_charset is not None:
        logger.debug(
            "HTTP declares %s but meta declares %s, guessing without hint",
            http_charset,
            html_charset,
        )

    guessed = _guess(data, hint, guesser)
    if guessed is not None:
        logger.debug("encoding from statistics: %s (hint %s)", guessed.encoding, hint)
        return guessed

    logger.debug("no usable candidate, defaulting to %s", DEFAULT_ENCODING)
    return _DEFAULT_RESULT


def resolve_fast(
    data: bytes,
    content_type: str | None,
    guesser: Guesser = guess_charset,
) -> Candidate:
    """Resolve the encoding from the first stage that yields a candidate.

    Order: BOM, HTTP header, HTML meta tags, unhinted statistical guess,
    :data:`~webcharset._utils.DEFAULT_ENCODING`.  The document is not
    scanned for meta tags when the HTTP header already names a charset.
    """
    bom = detect_bom(data)
    if bom is not None:
        logger.debug("encoding from BOM: %s", bom.encoding)
        return bom

    http_charset = charset_from_content_type(content_type)
    if http_charset is not None:
        logger.debug("encoding from HTTP header: %s", http_charset)
        return Candidate(encoding=http_charset, source=CandidateSource.HTTP)

    html_charset = detect_meta_charset(data)
    if html_charset is not None:
        logger.debug("encoding from meta tag: %s", html_charset)
        return Candidate(encoding=html_charset, source=CandidateSource.META)

    guessed = _guess(data, None, guesser)
    if guessed is not None:
        logger.debug("encoding from statistics: %s", guessed.encoding)
        return guessed

    logger.debug("no usable candidate, defaulting to %s", DEFAULT_ENCODING)
    return _DEFAULT_RESULT


def run_pipeline(
    data: bytes,
    content_type: str | None,
    *,
    fast: bool = False,
    guesser: Guesser = guess_charset,
) -> Candidate:
    """Run the selected resolution strategy.

    :param data: The raw byte data, already truncated.
    :param content_type: The ``Content-Type`` header value, if any.
    :param fast: Use :func:`resolve_fast` instead of :func:`resolve_thorough`.
    :param guesser: The statistical oracle.
    :returns: The winning :class:`~webcharset.pipeline.Candidate`.
    """
    if fast:
        return resolve_fast(data, content_type, guesser)
    return resolve_thorough(data, content_type, guesser)
