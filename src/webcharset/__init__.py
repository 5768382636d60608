"""Character encoding resolution for fetched web documents."""

from __future__ import annotations

from collections.abc import Mapping

from webcharset.config import DetectorConfig
from webcharset.detector import CharsetDetector, RawInput
from webcharset.enums import CandidateSource
from webcharset.errors import NoInputError
from webcharset.pipeline import Candidate

__version__ = "1.0.0"
__all__ = [
    "Candidate",
    "CandidateSource",
    "CharsetDetector",
    "DetectorConfig",
    "NoInputError",
    "detect",
]


def detect(
    raw: RawInput | None,
    headers: Mapping[str, str] | None = None,
    *,
    fast: bool = False,
    max_length: int = 0,
) -> str:
    """Detect the encoding of *raw* with a one-off detector.

    :param raw: The document as bytes or a binary file object.
    :param headers: Response headers; only ``Content-Type`` is used.
    :param fast: Stop at the first stage that names a charset.
    :param max_length: Truncate to this many bytes first (``0``: no limit).
    :returns: An encoding name Python can decode with.
    :raises NoInputError: If *raw* is ``None``.
    """
    config = DetectorConfig(fast=fast, max_length=max_length)
    return CharsetDetector(config).detect(raw, headers)
