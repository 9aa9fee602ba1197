"""Shared fixtures: every test starts from default settings and unconfigured logging."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from monadik.config import clear_settings_cache
from monadik.observability import reset_logging


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip MONADIK_ variables and reset cached settings and logging around each test."""
    import os
    for key in [k for k in os.environ if k.startswith("MONADIK_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))  # keep a stray .env out of the settings
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
