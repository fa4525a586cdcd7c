"""Shared fixtures: isolate settings from the host environment."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from simpleresult.config import clear_settings_cache


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop cached settings and SIMPLERESULT_* env vars around every test."""
    for key in [k for k in os.environ if k.startswith("SIMPLERESULT_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))
    clear_settings_cache()
    yield
    clear_settings_cache()
