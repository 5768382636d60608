"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from webcharset.enums import CandidateSource


@dataclasses.dataclass(frozen=True, slots=True)
class Candidate:
    """An encoding name together with the stage that produced it.

    Frozen dataclass returned by the resolution strategies.  The encoding
    has already passed :func:`~webcharset.pipeline.validate.validate_charset`
    (or is the built-in default).
    """

    encoding: str
    source: CandidateSource

    def to_dict(self) -> dict[str, str]:
        """Convert this candidate to a plain dict.

        :returns: A dict with ``'encoding'`` and ``'source'`` keys.
        """
        return {"encoding": self.encoding, "source": self.source.value}
