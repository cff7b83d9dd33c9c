"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os

import pytest

_ENV_PREFIX = "GITEAHOOK_"


@pytest.fixture(autouse=True)
def _isolate_giteahook_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop receiver and status client settings inherited from the shell."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
