"""Single-file YAML roadmap → JSON conversion."""
import datetime
import json
import logging
import math
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from roadmap2json.errors import (
    ConversionError, EmptyInput, ExtractionFailure, NotReadable, ParseFailure, WriteFailure,
)
from roadmap2json.extractor import extract_roadmap_data, find_incomplete_entries
from roadmap2json.schema import ConvertOptions

PathLike = Union[str, Path]


def default_output_path(src: PathLike) -> Path:
    """Sibling .json path for src (foo.yaml → foo.json, foo → foo.json)."""
    src = Path(src)
    dst = src.with_suffix(".json")
    if dst == src:
        # never overwrite the input
        dst = src.with_name(src.name + ".json")
    return dst


class RoadmapLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping.

    Keys pulled in through a ``<<`` merge may still be overridden.
    """

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == "tag:yaml.org,2002:merge":
                    continue
                key = self.construct_object(key_node, deep=True)
                try:
                    duplicate = key in seen
                except TypeError:
                    # unhashable, reported by SafeLoader itself
                    continue
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicated mapping key {key!r}", key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _format_timestamp(value: datetime.date) -> str:
    """UTC timestamp with milliseconds, e.g. 2024-01-02T00:00:00.000Z."""
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
    else:
        value = datetime.datetime(value.year, value.month, value.day)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _json_default(value: Any) -> str:
    # YAML timestamps load as date/datetime objects
    if isinstance(value, datetime.date):
        return _format_timestamp(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _finite(value: Any) -> Any:
    """Copy of value with NaN and ±infinity replaced by None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def read_source(src: PathLike, encoding: str = "utf-8") -> str:
    src = Path(src)
    try:
        return src.read_text(encoding=encoding)
    except FileNotFoundError:
        raise NotReadable(f"File {src} not found", src)
    except (OSError, UnicodeDecodeError) as e:
        raise NotReadable(f"Could not read {src}: {e}", src)


def load_roadmap(text: str, source: PathLike = "<string>") -> dict:
    """Parse YAML text and return the roadmap payload it contains.

    Raises EmptyInput, ParseFailure or ExtractionFailure.
    """
    if not text or not text.strip():
        raise EmptyInput(f"File {source} is empty", source)

    try:
        data = yaml.load(text, Loader=RoadmapLoader)
    except yaml.YAMLError as e:
        raise ParseFailure(f"Failed to parse YAML from {source}: {e}", source)

    if data is None:
        raise ParseFailure(f"Failed to parse YAML from {source}: no document found", source)

    payload = extract_roadmap_data(data)
    if payload is None:
        raise ExtractionFailure(f"Failed to extract roadmap data from {source}", source)

    incomplete = find_incomplete_entries(payload)
    if incomplete:
        logging.warning(
            "⚠ %s: %d entr%s missing title/description: %s",
            source, len(incomplete), "y" if len(incomplete) == 1 else "ies",
            ", ".join(str(k) for k in incomplete),
        )
    return payload


def dump_roadmap(payload: dict, options: Optional[ConvertOptions] = None) -> str:
    """Serialize payload as indented JSON with a single trailing newline.

    Non-finite floats are written as null.
    """
    options = options or ConvertOptions()
    return json.dumps(
        _finite(payload),
        indent=options.indent,
        ensure_ascii=options.ensure_ascii,
        default=_json_default,
    ) + "\n"


def convert_document(text: str, source: PathLike = "<string>",
                     options: Optional[ConvertOptions] = None) -> str:
    """YAML text in, JSON text out. Raises ConversionError subclasses."""
    return dump_roadmap(load_roadmap(text, source), options)


def write_output(dst: PathLike, content: str, encoding: str = "utf-8") -> None:
    dst = Path(dst)
    # encode before touching dst so a bad string leaves any old output intact
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as e:
        raise WriteFailure(f"Could not encode output for {dst}: {e}", dst)
    try:
        dst.write_bytes(data)
    except OSError as e:
        raise WriteFailure(f"Could not write {dst}: {e}", dst)


def convert_yaml_to_json(src: PathLike, dst: Optional[PathLike] = None,
                         options: Optional[ConvertOptions] = None) -> bool:
    """Convert one YAML roadmap file to JSON.

    Every failure is logged and reported as False; nothing is written unless
    a roadmap payload was found.
    """
    options = options or ConvertOptions()
    src = Path(src)
    dst = Path(dst) if dst is not None else default_output_path(src)

    try:
        text = read_source(src, options.encoding)
        content = convert_document(text, src, options)
        write_output(dst, content, options.encoding)
    except ConversionError as e:
        logging.error("✗ Error: %s", e)
        return False
    except Exception as e:
        logging.error("✗ Error converting %s: %s", src, e)
        logging.debug("Conversion traceback for %s", src, exc_info=True)
        return False

    logging.info("✓ Successfully converted %s to %s", src, dst)
    return True
