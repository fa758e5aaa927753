"""Structural rules for JSON:API documents."""

from __future__ import annotations

from typing import Any, Optional

from . import messages
from .exceptions import StructuralViolationError
from .reporter import Reporter

LINK_OBJECT_KEYS = ("href", "meta")


def check_link_member(key: str, value: Any) -> tuple[bool, str]:
    """
    Check a single member of a links object.

    A link is either a URL string or an object holding only `href` and
    `meta`.

    Args:
        key: The link name
        value: The link value

    Returns:
        Tuple of (is_valid, message)
    """
    if isinstance(value, str):
        return True, ""

    if isinstance(value, dict):
        invalid = [k for k in value if k not in LINK_OBJECT_KEYS]
        if invalid:
            return False, messages.LINK_INVALID_KEYS.format(
                keys=", ".join(str(k) for k in invalid)
            )
        return True, ""

    return False, messages.LINK_INVALID_VALUE.format(key=key)


class DocumentValidator:
    """Enforces top-level member rules and the shape of links/meta objects."""

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or Reporter()

    def _violation(self, message: str):
        self.reporter.fail(message, StructuralViolationError)

    def enforce_top_level_constraints(self, document: dict) -> None:
        """
        Check the coexistence rules for data/errors/included/meta.

        Rules are checked in order and the first broken one fails.
        """
        has_data = "data" in document
        has_errors = "errors" in document

        if has_data and has_errors:
            self._violation(messages.DATA_AND_ERRORS)

        if not has_data and "included" in document:
            self._violation(messages.INCLUDED_WITHOUT_DATA)

        if not (has_data or has_errors or "meta" in document):
            self._violation(messages.MISSING_TOP_LEVEL)

    def validate_links(self, links: Any) -> None:
        """Validate a links object, failing on the first bad member."""
        if not isinstance(links, dict):
            self._violation(messages.LINKS_NOT_OBJECT)

        for key, value in links.items():
            is_valid, message = check_link_member(key, value)
            if not is_valid:
                self._violation(message)

    def validate_meta(self, meta: Any) -> None:
        """A meta member must be an object."""
        if not isinstance(meta, dict):
            self._violation(messages.META_NOT_OBJECT)
