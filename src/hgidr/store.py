"""JSON-backed store of per-series watch progress."""

from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from .exceptions import SeriesNotFoundError, StoreLoadError, StoreWriteError

LOGGER = logging.getLogger("hgidr.store")

FILE_MODE = 0o644
DIR_MODE = 0o755


@dataclass
class Record:
    """Last watched season and episode of one series."""

    season: int = 1
    episode: int = 1

    @classmethod
    def from_dict(cls, data: Dict) -> "Record":
        season = data.get("Season")
        episode = data.get("Episode")
        if not _is_int(season) or not _is_int(episode):
            raise ValueError("expected integer 'Season' and 'Episode' fields")
        return cls(season=season, episode=episode)

    def to_dict(self) -> Dict[str, int]:
        return {"Season": self.season, "Episode": self.episode}


class SeriesStore:
    """Mapping from series name to its progress record.

    All mutations are keyed by name and operate on the records held directly
    in the mapping. Every operation except :meth:`create_series` raises
    :class:`SeriesNotFoundError` for an unknown name.
    """

    def __init__(self, records: Dict[str, Record] | None = None) -> None:
        self.records: Dict[str, Record] = dict(records or {})

    @classmethod
    def load(cls, path: Path) -> "SeriesStore":
        """Read the store from ``path``.

        A missing file is created empty (along with its parent directories) and
        an empty or blank file yields an empty store. Anything else must be a
        JSON object of ``{"Season": int, "Episode": int}`` records.
        """
        path = Path(path)
        if not path.exists():
            LOGGER.info("The data file %s doesn't exist, creating it", path)
            _create_empty(path.resolve())
            return cls()

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StoreLoadError(path, f"not valid UTF-8 ({exc})") from exc
        except OSError as exc:
            raise StoreLoadError(path, str(exc)) from exc

        if not text.strip():
            LOGGER.info("The data file %s is empty", path)
            return cls()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StoreLoadError(path, f"invalid JSON ({exc})") from exc

        if not isinstance(data, dict):
            raise StoreLoadError(path, "top-level value must be an object")

        records: Dict[str, Record] = {}
        for name, item in data.items():
            if not isinstance(item, dict):
                raise StoreLoadError(path, f"record for '{name}' must be an object")
            try:
                records[name] = Record.from_dict(item)
            except ValueError as exc:
                raise StoreLoadError(path, f"record for '{name}': {exc}") from exc

        LOGGER.debug("Loaded %d series from %s", len(records), path)
        return cls(records)

    def save(self, path: Path) -> None:
        """Write the store to ``path`` as indented JSON, replacing it atomically.

        Symlinks are followed so the link target is the file that gets replaced.
        An existing file keeps its permissions; a new one is created 0644.
        """
        path = Path(path).resolve()
        payload = json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
        tmp = path.with_name(f"{path.name}.tmp")
        try:
            mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else FILE_MODE
            path.parent.mkdir(parents=True, exist_ok=True, mode=DIR_MODE)
            tmp.write_text(payload + "\n", encoding="utf-8")
            os.chmod(tmp, mode)
            os.replace(tmp, path)
        except OSError as exc:
            if tmp.exists():
                tmp.unlink()
            raise StoreWriteError(path, str(exc)) from exc
        LOGGER.debug("Saved %d series to %s", len(self.records), path)

    def get(self, name: str) -> Record:
        record = self.records.get(name)
        if record is None:
            raise SeriesNotFoundError(name)
        return record

    def create_series(self, name: str) -> Record:
        """Start tracking ``name`` at season 1 episode 1, replacing any existing record."""
        record = Record(season=1, episode=1)
        self.records[name] = record
        LOGGER.info("Created series %s", name)
        return record

    def increment_episode(self, name: str) -> Record:
        record = self.get(name)
        record.episode += 1
        return record

    def increment_season(self, name: str) -> Record:
        """Move to the next season; the episode counter restarts at 1."""
        record = self.get(name)
        record.season += 1
        record.episode = 1
        return record

    def set_episode(self, name: str, episode: int) -> Record:
        record = self.get(name)
        if episode > 0:
            record.episode = episode
        return record

    def set_season(self, name: str, season: int) -> Record:
        # Unlike increment_season, the episode counter is left alone.
        record = self.get(name)
        if season > 0:
            record.season = season
        return record

    def stats(self, name: str) -> str:
        record = self.get(name)
        return f"Season {record.season} Episode {record.episode}"

    def names(self) -> List[str]:
        return sorted(self.records)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {name: record.to_dict() for name, record in self.records.items()}

    def __contains__(self, name: object) -> bool:
        return name in self.records

    def __len__(self) -> int:
        return len(self.records)


def _create_empty(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True, mode=DIR_MODE)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
        os.close(fd)
    except OSError as exc:
        raise StoreWriteError(path, str(exc)) from exc


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
