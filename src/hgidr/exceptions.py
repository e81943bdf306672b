"""Exceptions raised by the tracker."""

from __future__ import annotations

from pathlib import Path


class HgidrError(Exception):
    """Base exception for tracker operations."""


class StoreError(HgidrError):
    """Base exception for store operations."""


class StoreLoadError(StoreError):
    """Backing file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load data file {path}: {reason}")


class StoreWriteError(StoreError):
    """Backing file could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write data file {path}: {reason}")


class SeriesNotFoundError(StoreError):
    """Requested series has no record."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Series '{name}' not found (use --newseries to create it)")


class ExportError(HgidrError):
    """Store export failed."""
