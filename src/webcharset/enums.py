"""Enumerations for webcharset."""

import enum


class CandidateSource(enum.Enum):
    """Where an encoding candidate came from."""

    BOM = "bom"
    HTTP = "http"
    META = "meta"
    STATISTICAL = "statistical"
    DEFAULT = "default"
