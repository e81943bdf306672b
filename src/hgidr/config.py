"""Runtime configuration for the tracker."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

APP_DIR = "hgidr"
DATA_FILENAME = "data.json"


def default_data_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Resolve the backing file under the XDG data directory.

    Falls back to ``$HOME/.local/share`` when ``XDG_DATA_HOME`` is unset or empty.
    """
    env = os.environ if environ is None else environ
    base = env.get("XDG_DATA_HOME")
    if not base:
        base = str(Path(env.get("HOME", "")) / ".local" / "share")
    return Path(base) / APP_DIR / DATA_FILENAME


@dataclass
class TrackerConfig:
    data_path: Path

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        data_path: Optional[Path] = None,
    ) -> "TrackerConfig":
        if data_path is not None:
            return cls(data_path=Path(data_path))
        return cls(data_path=default_data_path(environ))
