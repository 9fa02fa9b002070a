"""Shared fixtures for the please test suite."""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Iterable

import pytest

_TMP = Path(tempfile.mkdtemp(prefix="please-tests-"))
os.environ["PLEASE_LOG_FILE"] = str(_TMP / "please.log")
os.environ["PLEASE_CONFIG"] = str(_TMP / "missing.toml")


@pytest.fixture
def installed(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], None]:
    """Pretend only the given executables are on PATH."""

    def _installed(executables: Iterable[str]) -> None:
        found = set(executables)
        monkeypatch.setattr(
            shutil, 'which', lambda name: f'/usr/bin/{name}' if name in found else None
        )

    return _installed
