"""Shared pytest fixtures for shadcn-oklch tests."""

from __future__ import annotations

from typing import Any

import pytest

from shadcn_oklch.themes import DEFAULT_THEMES


class RecordingAPI:
    """Stand-in for the host framework's plugin API."""

    def __init__(self) -> None:
        self.base_calls: list[dict[str, Any]] = []

    def add_base(self, declarations: dict[str, Any]) -> None:
        self.base_calls.append(declarations)


@pytest.fixture
def light_tokens() -> dict[str, str]:
    """Return a mutable copy of the built-in light palette."""
    return dict(DEFAULT_THEMES["light"])


@pytest.fixture
def dark_tokens() -> dict[str, str]:
    """Return a mutable copy of the built-in dark palette."""
    return dict(DEFAULT_THEMES["dark"])


@pytest.fixture
def recording_api() -> RecordingAPI:
    return RecordingAPI()
