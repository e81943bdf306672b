"""Store exporters for JSON and YAML formats."""

from hgidr.exporters.base import Exporter, get_exporter
from hgidr.exporters.json_exporter import JsonExporter
from hgidr.exporters.yaml_exporter import YamlExporter

__all__ = [
    "Exporter",
    "JsonExporter",
    "YamlExporter",
    "get_exporter",
]
