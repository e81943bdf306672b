"""YAML exporter for the series store."""

from __future__ import annotations

from pathlib import Path

import yaml

from hgidr.exporters.base import Exporter


class YamlExporter(Exporter):
    """Export series records to YAML format."""

    @property
    def extensions(self) -> tuple[str, ...]:
        return ("yaml", "yml")

    def write(self, output: dict, output_path: Path) -> None:
        with open(output_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(output, f, allow_unicode=True, sort_keys=False)
