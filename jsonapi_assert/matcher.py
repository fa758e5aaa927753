"""Literal-or-pattern value matching."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any


class _Missing:
    """Marker for a member that is absent from its object."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()


# Cache for compiled regex patterns
@lru_cache(maxsize=256)
def pattern(expression: str) -> re.Pattern:
    """Compile and cache a regex pattern for use as an expected value."""
    return re.compile(expression)


def is_pattern(value: Any) -> bool:
    """Check if a value is a compiled regex pattern."""
    return isinstance(value, re.Pattern)


def match_pattern(compiled: re.Pattern, value: Any) -> bool:
    """
    Match a pattern against the string form of a plain value.

    Absent members never match.
    """
    if value is MISSING:
        return False
    return compiled.search(str(value)) is not None


def match_mapping(actual: dict, expected: dict) -> bool:
    """Compare two objects key-wise."""
    if actual.keys() != expected.keys():
        return False
    return all(matches(actual[key], expected[key]) for key in actual)


def match_sequence(actual: list | tuple, expected: list | tuple) -> bool:
    """Compare two arrays element-wise."""
    if len(actual) != len(expected):
        return False
    return all(matches(a, e) for a, e in zip(actual, expected))


def matches(actual: Any, expected: Any) -> bool:
    """
    Decide whether an actual value satisfies an expected value.

    Either operand may be a pattern:
    - pattern against a plain value: the pattern must match str(value)
    - two plain values: same type and structurally equal, containers
      compared recursively so nested patterns are honoured
    - two patterns: never equal

    Args:
        actual: Value taken from the document (or MISSING)
        expected: Caller supplied literal or pattern (or MISSING)

    Returns:
        True if the values match
    """
    actual_is_pattern = is_pattern(actual)
    expected_is_pattern = is_pattern(expected)

    if actual_is_pattern and expected_is_pattern:
        return False
    if expected_is_pattern:
        return match_pattern(expected, actual)
    if actual_is_pattern:
        return match_pattern(actual, expected)

    if actual is MISSING or expected is MISSING:
        return actual is expected

    if isinstance(actual, dict) and isinstance(expected, dict):
        return match_mapping(actual, expected)

    if isinstance(actual, (list, tuple)) and isinstance(expected, (list, tuple)):
        return match_sequence(actual, expected)

    if type(actual) is not type(expected):
        return False

    return actual == expected
