"""Per-series watch progress tracker backed by a JSON file."""

from hgidr.config import TrackerConfig, default_data_path
from hgidr.exceptions import (
    ExportError,
    HgidrError,
    SeriesNotFoundError,
    StoreError,
    StoreLoadError,
    StoreWriteError,
)
from hgidr.runner import Intent, TrackerRunner, apply_intent
from hgidr.store import Record, SeriesStore

__all__ = [
    # Config
    "TrackerConfig",
    "default_data_path",
    # Exceptions
    "ExportError",
    "HgidrError",
    "SeriesNotFoundError",
    "StoreError",
    "StoreLoadError",
    "StoreWriteError",
    # Runner
    "Intent",
    "TrackerRunner",
    "apply_intent",
    # Store
    "Record",
    "SeriesStore",
]
