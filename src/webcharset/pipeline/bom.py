"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

from webcharset.enums import CandidateSource
from webcharset.pipeline import Candidate
from webcharset.pipeline.validate import validate_charset

# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32LE BOM starts with the same bytes as UTF-16LE BOM)
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\x00\x00\xfe\xff", "UTF-32BE"),
    (b"\xff\xfe\x00\x00", "UTF-32LE"),
    (b"\xef\xbb\xbf", "UTF-8"),
    (b"\xfe\xff", "UTF-16BE"),
    (b"\xff\xfe", "UTF-16LE"),
)


def detect_bom(data: bytes) -> Candidate | None:
    """Check for a BOM at the start of data. Returns a candidate or None.

    Only the signature is inspected; the payload length is not, since
    truncated content may end in the middle of a code unit.
    """
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            name = validate_charset(encoding)
            if name is not None:
                return Candidate(encoding=name, source=CandidateSource.BOM)
    return None
