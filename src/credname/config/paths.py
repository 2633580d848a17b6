"""Where the credname config file lives.

``CREDNAME_CONFIG_FILE`` wins when set; otherwise ``config/config.toml``
under the nearest directory holding ``pyproject.toml`` or ``.git``, or
under the working directory when no such marker exists.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

CONFIG_FILE_ENV: Final[str] = "CREDNAME_CONFIG_FILE"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (default: this module) to the first marker directory."""

    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Resolve the TOML config file path."""

    override = os.environ.get(CONFIG_FILE_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return (_detect_repo_root() / "config" / "config.toml").resolve()


__all__ = ["CONFIG_FILE_ENV", "default_config_path"]
