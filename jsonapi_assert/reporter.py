"""Failure reporting for assertions."""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import (
    JsonApiAssertionError,
    NotFoundError,
    UnexpectedPresenceError,
)

logger = logging.getLogger(__name__)


class Reporter:
    """
    Turns assertion outcomes into pass/fail signals.

    The default implementation raises the typed exceptions from
    jsonapi_assert.exceptions. Subclass it to route failures elsewhere,
    but `fail` must never return.
    """

    def fail(
        self,
        message: str,
        error: type[JsonApiAssertionError] = JsonApiAssertionError,
        left: Any = None,
        right: Any = None,
    ):
        """
        Raise a failure.

        Args:
            message: The failure message
            error: Exception class to raise
            left: Actual values (diff failures only)
            right: Expected values (diff failures only)
        """
        logger.debug("%s: %s", error.__name__, message)
        raise error(message, left=left, right=right)

    def assert_true(
        self,
        value: Any,
        message: str,
        error: type[JsonApiAssertionError] = NotFoundError,
    ) -> Any:
        """Return value if it is truthy, fail otherwise."""
        if not value:
            self.fail(message, error)
        return value

    def assert_false(
        self,
        value: Any,
        message: str,
        error: type[JsonApiAssertionError] = UnexpectedPresenceError,
    ) -> Any:
        """Return value if it is falsy, fail otherwise."""
        if value:
            self.fail(message, error)
        return value
