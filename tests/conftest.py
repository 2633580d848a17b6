"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from credname.config.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a temporary file and reset the singleton."""

    config_file = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("CREDNAME_CONFIG_FILE", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
