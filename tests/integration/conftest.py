"""Fixtures for integration tests."""

import functools
import os
from pathlib import Path

import pytest

from gotest.testing.fake_go import FakeGoFn, install_fake_go


@pytest.fixture
def fake_go(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeGoFn:
    """Put a ``go`` executable on PATH that replays canned output."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    return functools.partial(install_fake_go, bin_dir)
