# errors.py — failures raised while converting roadmap files
from pathlib import Path
from typing import Optional, Union


class ConversionError(Exception):
    """Base class for roadmap conversion failures."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


# Per-file failures; caught by convert_yaml_to_json.

class NotReadable(ConversionError):
    pass


class EmptyInput(ConversionError):
    pass


class ParseFailure(ConversionError):
    pass


class ExtractionFailure(ConversionError):
    pass


class WriteFailure(ConversionError):
    pass


# Batch-level failures; these end the run.

class DirectoryMissing(ConversionError):
    pass


class DirectoryListingError(ConversionError):
    pass
