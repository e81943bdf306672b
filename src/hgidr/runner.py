"""Applies a single command-line invocation to the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .config import TrackerConfig
from .exporters import get_exporter
from .store import Record, SeriesStore

LOGGER = logging.getLogger("hgidr.runner")


@dataclass
class Intent:
    """Requested changes for one series.

    Integer fields use 0 for "not set"; only positive values are applied.
    """

    name: str
    new_series: bool = False
    increment_episode: bool = False
    increment_season: bool = False
    set_episode: int = 0
    set_season: int = 0


def apply_intent(
    store: SeriesStore,
    intent: Intent,
    echo: Callable[[str], None] = print,
) -> Record:
    """Apply ``intent`` to ``store`` in the fixed order.

    Create first, then increment episode, increment season, set episode and
    set season. Increment season resets the episode, so the order is observable.
    """
    name = intent.name
    if intent.new_series:
        echo(f"Creating {name}")
        store.create_series(name)
    if intent.increment_episode:
        store.increment_episode(name)
    if intent.increment_season:
        store.increment_season(name)
    if intent.set_episode > 0:
        store.set_episode(name, intent.set_episode)
    if intent.set_season > 0:
        store.set_season(name, intent.set_season)
    return store.get(name)


class TrackerRunner:
    """Load, mutate, report and persist within one invocation."""

    def __init__(self, config: TrackerConfig, echo: Callable[[str], None] = print) -> None:
        self.config = config
        self.echo = echo

    def run(self, intent: Intent, export_path: Optional[Path] = None) -> Record:
        store = SeriesStore.load(self.config.data_path)
        record = apply_intent(store, intent, echo=self.echo)
        self.echo(store.stats(intent.name))
        store.save(self.config.data_path)
        LOGGER.info("Updated %s: season=%s episode=%s", intent.name, record.season, record.episode)
        if export_path is not None:
            self.export(store, export_path)
        return record

    def export_only(self, export_path: Path) -> int:
        store = SeriesStore.load(self.config.data_path)
        return self.export(store, export_path)

    def export(self, store: SeriesStore, export_path: Path) -> int:
        exporter = get_exporter(export_path)
        count = exporter.export(store, export_path)
        LOGGER.info("Exported %d series to %s", count, export_path)
        return count
