"""Shared fixtures: every test starts from default settings and logging."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from fallible.foundation.config import clear_settings_cache
from fallible.observability import reset_logging


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop FALLIBLE_* variables and cached settings around each test."""
    for key in list(os.environ):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()


class Recorder:
    """Iterable that records which elements were pulled from it."""

    def __init__(self, items: list) -> None:
        self.items = items
        self.pulled: list[int] = []

    def __iter__(self):
        for index, item in enumerate(self.items):
            self.pulled.append(index)
            yield item


@pytest.fixture
def recorder() -> type[Recorder]:
    return Recorder
