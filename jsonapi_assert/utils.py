"""Utility functions for jsonapi_assert."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


def wrap(value: Any) -> list:
    """
    Normalize a member into a list.

    None becomes an empty list, lists and tuples are copied into a list and
    anything else becomes a singleton list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def is_batch(value: Any) -> bool:
    """Check if a target argument holds several targets."""
    return isinstance(value, (list, tuple))


def format_value(value: Any) -> str:
    """
    Render a value for a failure message.

    Patterns render as /source/, None renders as an empty string and every
    other value uses str().
    """
    if isinstance(value, re.Pattern):
        return f"/{value.pattern}/"
    if value is None:
        return ""
    return str(value)


def strip_attributes(record: Any) -> Any:
    """Return a shallow copy of a record without its attributes."""
    if not isinstance(record, dict):
        return record
    return {key: value for key, value in record.items() if key != "attributes"}


def normalize_key(key: Any) -> str | int:
    """Turn a path element into a member name (or a list index)."""
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    return str(key)


def underscore(name: str) -> str:
    """Convert a CamelCase class name into snake_case."""
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', name)
    return name.replace('-', '_').lower()


def dasherize(key: Any) -> str:
    """Convert an attribute name into its dasherized member name."""
    if isinstance(key, Enum):
        key = key.value
    return str(key).lower().replace('_', '-')
