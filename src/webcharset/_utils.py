"""Internal shared utilities for webcharset."""

from __future__ import annotations

#: Encoding returned when no stage produces a usable candidate.
DEFAULT_ENCODING: str = "UTF-8"

#: Minimum (hint-adjusted) confidence for a statistical guess to be used.
MINIMUM_THRESHOLD: float = 0.20

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


def _validate_max_length(max_length: int) -> None:
    """Raise ValueError if *max_length* is not an integer."""
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        msg = "max_length must be an integer"
        raise ValueError(msg)


def _validate_fast(fast: bool) -> None:
    """Raise ValueError if *fast* is not a bool."""
    if not isinstance(fast, bool):
        msg = "fast must be a bool"
        raise ValueError(msg)


def _parse_bool(value: str | bool, name: str) -> bool:
    """Coerce a config string such as ``"true"`` or ``"0"`` to a bool."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    msg = f"{name} must be a boolean, got {value!r}"
    raise ValueError(msg)


def _parse_int(value: str | int, name: str) -> int:
    """Coerce a config string such as ``"4096"`` to an int."""
    if isinstance(value, bool):
        msg = f"{name} must be an integer, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        msg = f"{name} must be an integer, got {value!r}"
        raise ValueError(msg) from None
