# tests/conftest.py

"""Shared pytest fixtures for all shop_assist tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from shop_assist.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep receipts and logs out of the working tree."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Settings, "RECEIPTS_DIR", tmp_path)
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    yield
