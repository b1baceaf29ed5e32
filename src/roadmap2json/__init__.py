"""Convert YAML roadmap documents into pretty-printed JSON."""

__version__ = "1.0.0"

from roadmap2json.extractor import extract_roadmap_data, is_roadmap_data
from roadmap2json.converter import convert_document, convert_yaml_to_json
from roadmap2json.batch import BatchSummary, convert_directory

__all__ = [
    "extract_roadmap_data",
    "is_roadmap_data",
    "convert_document",
    "convert_yaml_to_json",
    "BatchSummary",
    "convert_directory",
]
