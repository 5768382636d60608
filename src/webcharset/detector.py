"""CharsetDetector: the public entry point."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import BinaryIO

from webcharset.config import DetectorConfig
from webcharset.errors import NoInputError
from webcharset.pipeline import Candidate
from webcharset.pipeline.http import content_type_from_headers
from webcharset.pipeline.orchestrator import run_pipeline
from webcharset.pipeline.statistical import Guesser, guess_charset

logger = logging.getLogger(__name__)

RawInput = bytes | bytearray | memoryview | BinaryIO


class CharsetDetector:
    """Resolves the character encoding of fetched documents.

    One instance holds an immutable :class:`DetectorConfig` and an oracle,
    and may be shared by any number of threads.
    """

    def __init__(
        self,
        config: DetectorConfig | None = None,
        guesser: Guesser | None = None,
    ) -> None:
        """Initialize the detector.

        :param config: Strategy and truncation settings.  Defaults to
            thorough mode without truncation.
        :param guesser: Statistical oracle consulted last.  Defaults to
            :func:`~webcharset.pipeline.statistical.guess_charset`.
        """
        self._config = config if config is not None else DetectorConfig()
        self._guesser = guesser if guesser is not None else guess_charset

    @property
    def config(self) -> DetectorConfig:
        """The settings this detector was built with."""
        return self._config

    def _materialize(self, raw: RawInput) -> bytes:
        """Return the content as bytes, cut to ``max_length`` exactly once."""
        limit = self._config.max_length if self._config.truncates else -1
        if isinstance(raw, (bytes, bytearray, memoryview)):
            data = bytes(raw)
            return data[:limit] if limit > 0 else data
        # File objects are read once, never past the limit.
        return bytes(raw.read(limit))

    def detect_candidate(
        self,
        raw: RawInput | None,
        headers: Mapping[str, str] | None = None,
    ) -> Candidate:
        """Detect the encoding and report which stage decided it.

        :param raw: The document as bytes or a binary file object.
        :param headers: Response headers; only ``Content-Type`` is used.
        :returns: The winning :class:`~webcharset.pipeline.Candidate`.
        :raises NoInputError: If *raw* is ``None``.
        """
        if raw is None:
            msg = "no content to detect the encoding of"
            raise NoInputError(msg)
        data = self._materialize(raw)
        content_type = content_type_from_headers(headers)
        logger.debug(
            "detecting %d bytes (fast=%s, content-type=%r)",
            len(data),
            self._config.fast,
            content_type,
        )
        return run_pipeline(
            data, content_type, fast=self._config.fast, guesser=self._guesser
        )

    def detect(
        self,
        raw: RawInput | None,
        headers: Mapping[str, str] | None = None,
    ) -> str:
        """Detect the encoding of *raw*.

        Never fails for lack of evidence: the default encoding is returned
        when nothing better is found.

        :param raw: The document as bytes or a binary file object.
        :param headers: Response headers; only ``Content-Type`` is used.
        :returns: An encoding name Python can decode with.
        :raises NoInputError: If *raw* is ``None``.
        """
        return self.detect_candidate(raw, headers).encoding
