"""Root conftest — keeps developer ``.env`` / ``PIXCODE_*`` values out of tests."""

from __future__ import annotations

import os

import pytest

from pixcode.settings import Settings, settings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("PIXCODE_"):
            monkeypatch.delenv(key, raising=False)

    # The singleton was built at import time, before the env was cleared.
    defaults = Settings(_env_file=None)
    for name in Settings.model_fields:
        monkeypatch.setattr(settings, name, getattr(defaults, name))
