"""Locate the roadmap payload inside a parsed YAML tree.

Roadmap files are either stored bare (topic keys at the top level)::

    intro:
      title: Introduction
      description: ...

or wrapped under one descriptive key::

    roadmap_emprender:
      intro:
        title: Introduction
        description: ...

Detection looks only at the *first* key of a candidate mapping, so the result
depends on insertion order when a document mixes several plausible wrappers.
"""
import logging
from typing import Any, List, Optional

from roadmap2json.models import first_value, has_entry_fields, is_mapping


def is_roadmap_data(obj: Any) -> bool:
    """True if obj is a non-empty mapping whose first value has title and description."""
    if not is_mapping(obj) or not obj:
        return False
    return has_entry_fields(first_value(obj))


def extract_roadmap_data(tree: Any) -> Optional[dict]:
    """Return the roadmap payload found in tree, or None.

    The returned mapping is the object from the tree itself, not a copy.
    Never raises.
    """
    if not is_mapping(tree) or not tree:
        return None

    if is_roadmap_data(tree):
        logging.debug("Roadmap data found at top level")
        return tree

    keys = list(tree)
    if len(keys) == 1:
        wrapped = tree[keys[0]]
        if is_roadmap_data(wrapped):
            logging.debug("Roadmap data unwrapped from key '%s'", keys[0])
            return wrapped

    for key in keys:
        value = tree[key]
        if is_roadmap_data(value):
            logging.debug("Roadmap data found under key '%s'", key)
            return value

    return None


def find_incomplete_entries(payload: dict) -> List[Any]:
    """Keys of payload whose values are missing title or description."""
    return [key for key, value in payload.items() if not has_entry_fields(value)]
