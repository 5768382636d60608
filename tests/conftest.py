# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest


class RecordingGuesser:
    """Statistical oracle stand-in that records its calls."""

    def __init__(self, answer: str | None = None, error: Exception | None = None):
        self.answer = answer
        self.error = error
        self.calls: list[tuple[bytes, str | None]] = []

    def __call__(self, data: bytes, hint: str | None) -> str | None:
        self.calls.append((data, hint))
        if self.error is not None:
            raise self.error
        return self.answer

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def hints(self) -> list[str | None]:
        return [hint for _, hint in self.calls]


@pytest.fixture
def silent_guesser() -> RecordingGuesser:
    """A guesser that never finds anything."""
    return RecordingGuesser()


@pytest.fixture
def make_guesser():
    """Factory for guessers with a fixed answer or error."""
    return RecordingGuesser
