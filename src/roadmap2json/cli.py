#!/usr/bin/env python3
# cli.py — roadmap2json entrypoint
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from roadmap2json.batch import convert_directory
from roadmap2json.converter import convert_yaml_to_json, default_output_path
from roadmap2json.errors import ConversionError
from roadmap2json.schema import ConvertOptions


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging(verbose: bool = False) -> None:
    """Progress to stdout, warnings and errors to stderr."""
    out = logging.StreamHandler(sys.stdout)
    out.addFilter(_BelowWarning())
    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s" if verbose else "%(message)s",
        handlers=[out, err],
    )
    logging.getLogger('').setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="roadmap2json",
        description="Convert YAML roadmaps to JSON. With no arguments every "
                    "*.yaml/*.yml file in ./roadmaps is converted in place.",
    )
    p.add_argument("input", nargs="?", help="Input .yaml file (omit for batch mode)")
    p.add_argument("output", nargs="?", help="Output .json file (default: input with .json extension)")
    p.add_argument("-d", "--dir", default="roadmaps",
                   help="Directory scanned in batch mode (default: ./roadmaps)")
    p.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    p.add_argument("--ascii", action="store_true", help="Escape non-ASCII characters in the output")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    setup_logging(args.verbose)
    logging.debug("Starting main with args: %s", argv)

    try:
        options = ConvertOptions(
            indent=args.indent,
            ensure_ascii=args.ascii,
            roadmaps_dir=Path(args.dir),
        )
    except ValidationError as e:
        p.error(str(e))

    if args.input:
        src = Path(args.input)
        dst = Path(args.output) if args.output else default_output_path(src)
        return 0 if convert_yaml_to_json(src, dst, options) else 1

    # batch mode: resolve against the working directory
    roadmaps_dir = Path.cwd() / options.roadmaps_dir
    try:
        convert_directory(roadmaps_dir, options)
    except ConversionError as e:
        logging.error("✗ Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
