# batch.py — convert every roadmap file in one directory
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from roadmap2json.converter import convert_yaml_to_json, default_output_path
from roadmap2json.errors import DirectoryListingError, DirectoryMissing
from roadmap2json.schema import ConvertOptions


@dataclass
class BatchSummary:
    succeeded: int = 0
    failed: int = 0
    converted: List[Path] = field(default_factory=list)
    failures: List[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed


def find_yaml_files(directory: Path, options: ConvertOptions) -> List[Path]:
    """Entries directly inside directory with an input extension, sorted by name."""
    try:
        names = sorted(entry.name for entry in directory.iterdir())
    except OSError as e:
        raise DirectoryListingError(f"Could not list {directory}: {e}", directory)
    return [directory / name for name in names if options.matches(name)]


def convert_directory(directory: Optional[Union[str, Path]] = None,
                      options: Optional[ConvertOptions] = None) -> BatchSummary:
    """Convert each YAML file in directory to a sibling .json file.

    One file failing never stops the others. Raises DirectoryMissing or
    DirectoryListingError when the directory itself is unusable.
    """
    options = options or ConvertOptions()
    directory = Path(directory) if directory is not None else options.roadmaps_dir

    try:
        exists = directory.exists()
    except OSError as e:
        raise DirectoryListingError(f"Could not access {directory}: {e}", directory)
    if not exists:
        raise DirectoryMissing(f"Directory {directory} not found", directory)

    summary = BatchSummary()
    yaml_files = find_yaml_files(directory, options)
    if not yaml_files:
        logging.info("No YAML files found in %s", directory)
        return summary

    logging.info("Found %d YAML file(s) to convert:\n", len(yaml_files))

    for yaml_path in yaml_files:
        json_path = default_output_path(yaml_path)
        if convert_yaml_to_json(yaml_path, json_path, options):
            summary.succeeded += 1
            summary.converted.append(json_path)
        else:
            summary.failed += 1
            summary.failures.append(yaml_path)

    logging.info("\n%s", "=" * 50)
    logging.info("Conversion complete: %d succeeded, %d failed", summary.succeeded, summary.failed)
    return summary
