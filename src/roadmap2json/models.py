# models.py — node kinds for trees produced by yaml.safe_load
from enum import IntEnum
from typing import Any


class NodeKind(IntEnum):
    NULL = 0
    BOOL = 1
    NUMBER = 2
    STRING = 3
    SEQUENCE = 4
    MAPPING = 5
    OTHER = 6  # timestamps, binary, sets


ENTRY_FIELDS = ("title", "description")


def node_kind(value: Any) -> NodeKind:
    """Classify a parsed YAML value."""
    if value is None:
        return NodeKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, list):
        return NodeKind.SEQUENCE
    if isinstance(value, dict):
        return NodeKind.MAPPING
    return NodeKind.OTHER


def is_mapping(value: Any) -> bool:
    return node_kind(value) is NodeKind.MAPPING


def first_value(mapping: dict) -> Any:
    """Value of the first key in insertion order (None for an empty mapping)."""
    for key in mapping:
        return mapping[key]
    return None


def has_entry_fields(value: Any) -> bool:
    """True if value is a mapping with every key in ENTRY_FIELDS present.

    Only presence is checked; the field values may be of any kind.
    """
    return is_mapping(value) and all(f in value for f in ENTRY_FIELDS)
