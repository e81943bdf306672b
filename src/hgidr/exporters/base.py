"""Base exporter interface for store export."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

from hgidr.exceptions import ExportError

if TYPE_CHECKING:
    from hgidr.store import SeriesStore


class Exporter(ABC):
    """Base class for store exporters."""

    @property
    @abstractmethod
    def extensions(self) -> tuple[str, ...]:
        """File extensions handled, without dot (e.g., 'json')."""
        ...

    @abstractmethod
    def write(self, output: dict, output_path: Path) -> None:
        """Serialize ``output`` to ``output_path``."""
        ...

    def export(self, store: SeriesStore, output_path: Path) -> int:
        """Export every series in the store to a file.

        Args:
            store: The store to export.
            output_path: Path to output file.

        Returns:
            Number of series exported.
        """
        data = [self.record_to_dict(name, store.get(name)) for name in store.names()]
        output = {
            "series": data,
            "count": len(data),
        }
        try:
            self.write(output, Path(output_path))
        except OSError as exc:
            raise ExportError(f"Cannot write export file {output_path}: {exc}") from exc
        return len(data)

    @staticmethod
    def record_to_dict(name, record) -> dict:
        return {
            "name": name,
            "season": record.season,
            "episode": record.episode,
        }


def get_exporter(output_path: Path) -> Exporter:
    """Pick an exporter from the output file suffix."""
    from hgidr.exporters.json_exporter import JsonExporter
    from hgidr.exporters.yaml_exporter import YamlExporter

    suffix = Path(output_path).suffix.lower().lstrip(".")
    for exporter in (JsonExporter(), YamlExporter()):
        if suffix in exporter.extensions:
            return exporter
    raise ExportError(f"Unsupported export format '{suffix or output_path}' (use .json, .yaml or .yml)")
