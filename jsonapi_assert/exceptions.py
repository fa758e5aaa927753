"""Custom exceptions for jsonapi_assert."""

from __future__ import annotations

from typing import Any


class JsonApiAssertError(Exception):
    """Base exception for jsonapi_assert errors that are not assertion failures."""
    pass


class SerializationError(JsonApiAssertError, ValueError):
    """Raised when a record cannot be turned into a resource object."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(JsonApiAssertError):
    """Raised when an inflection rule table cannot be loaded."""
    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.message = message
        self.source = source


class JsonApiAssertionError(AssertionError):
    """
    Base class for every failed assertion.

    Subclasses AssertionError so test runners report it as a failure
    rather than an error.
    """
    def __init__(self, message: str, left: Any = None, right: Any = None):
        super().__init__(message)
        self.message = message
        self.left = left
        self.right = right


class PreconditionError(JsonApiAssertionError):
    """Raised when a required option (`as:`, `for:`, `path:`) was omitted."""
    pass


class NotFoundError(JsonApiAssertionError):
    """Raised when a resource, relationship or top-level object is missing."""
    pass


class ResolutionError(NotFoundError):
    """Raised when a path cannot be walked through the document."""
    pass


class MismatchError(JsonApiAssertionError):
    """
    Raised when an object was found but its contents differ.

    `left` holds the actual values, `right` the expected ones, both limited
    to the members that differ.
    """
    pass


class StructuralViolationError(JsonApiAssertionError):
    """Raised when a document breaks a JSON:API structural rule."""
    pass


class UnexpectedPresenceError(JsonApiAssertionError):
    """Raised when a refutation finds the object it should not."""
    pass
