"""Detector configuration."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from webcharset._utils import (
    _parse_bool,
    _parse_int,
    _validate_fast,
    _validate_max_length,
)

#: Environment variables read by :meth:`DetectorConfig.from_env`.
ENV_FAST = "WEBCHARSET_FAST"
ENV_MAX_LENGTH = "WEBCHARSET_MAX_LENGTH"

# Parameter names accepted by from_mapping(), including the bean-style names
# used by the crawler plugin configuration.
_FAST_KEYS = ("fast", "fastMethod", "fast_method")
_MAX_LENGTH_KEYS = ("max_length", "maxLength")


@dataclasses.dataclass(frozen=True, slots=True)
class DetectorConfig:
    """Settings shared by every detection call of one detector.

    :param fast: Use the fast resolution strategy (first plausible signal
        wins) instead of the thorough one (HTTP and HTML cross-checked).
    :param max_length: Truncate content to this many bytes before detection.
        ``0`` or a negative value disables truncation.
    """

    fast: bool = False
    max_length: int = 0

    def __post_init__(self) -> None:
        _validate_fast(self.fast)
        _validate_max_length(self.max_length)

    @property
    def truncates(self) -> bool:
        """Whether content is cut to :attr:`max_length` bytes."""
        return self.max_length > 0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DetectorConfig:
        """Build a config from ``WEBCHARSET_FAST`` and ``WEBCHARSET_MAX_LENGTH``.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        fast = _parse_bool(env.get(ENV_FAST, "0"), ENV_FAST)
        max_length = _parse_int(env.get(ENV_MAX_LENGTH, "0"), ENV_MAX_LENGTH)
        return cls(fast=fast, max_length=max_length)

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> DetectorConfig:
        """Build a config from plugin parameters.

        Accepts ``fast``/``max_length`` as well as ``fastMethod``/``maxLength``.
        String values are coerced; unknown keys are ignored.
        """
        fast = False
        for key in _FAST_KEYS:
            if key in params:
                fast = _parse_bool(params[key], key)
                break
        max_length = 0
        for key in _MAX_LENGTH_KEYS:
            if key in params:
                max_length = _parse_int(params[key], key)
                break
        return cls(fast=fast, max_length=max_length)
