"""JSON exporter for the series store."""

from __future__ import annotations

import json
from pathlib import Path

from hgidr.exporters.base import Exporter


class JsonExporter(Exporter):
    """Export series records to JSON format."""

    @property
    def extensions(self) -> tuple[str, ...]:
        return ("json",)

    def write(self, output: dict, output_path: Path) -> None:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
