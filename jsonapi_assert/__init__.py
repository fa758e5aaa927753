"""
jsonapi_assert - composable assertions for JSON:API documents

Assert or refute that resources, relationship linkage, links, meta and
jsonapi objects exist in a JSON:API document. Expected values may be
literals or compiled regular expressions. Every assertion returns the
document it was given, so calls chain without intermediate variables.
"""

from .assertions import (
    DocumentAsserter,
    assert_data,
    refute_data,
    assert_included,
    refute_included,
    assert_relationship,
    refute_relationship,
    assert_links,
    assert_meta,
    assert_jsonapi,
)
from .exceptions import (
    JsonApiAssertError,
    JsonApiAssertionError,
    PreconditionError,
    NotFoundError,
    ResolutionError,
    MismatchError,
    StructuralViolationError,
    UnexpectedPresenceError,
    SerializationError,
    ConfigurationError,
)
from .inflector import (
    Inflector,
    InflectorConfig,
    configure,
    pluralize,
    singularize,
)
from .locator import ResourceLocator
from .matcher import MISSING, matches, pattern
from .messages import MESSAGES_VERSION
from .models import Key, Path, Terminal
from .reporter import Reporter
from .resolver import PathResolver
from .serializer import s, serialize
from .validator import DocumentValidator

__version__ = "0.1.0"
__all__ = [
    # Assertions
    "DocumentAsserter",
    "assert_data",
    "refute_data",
    "assert_included",
    "refute_included",
    "assert_relationship",
    "refute_relationship",
    "assert_links",
    "assert_meta",
    "assert_jsonapi",
    # Building blocks
    "ResourceLocator",
    "PathResolver",
    "DocumentValidator",
    "Reporter",
    "matches",
    "pattern",
    "MISSING",
    "Key",
    "Path",
    "Terminal",
    "MESSAGES_VERSION",
    # Errors
    "JsonApiAssertError",
    "JsonApiAssertionError",
    "PreconditionError",
    "NotFoundError",
    "ResolutionError",
    "MismatchError",
    "StructuralViolationError",
    "UnexpectedPresenceError",
    "SerializationError",
    "ConfigurationError",
    # Serializer
    "serialize",
    "s",
    # Inflector
    "Inflector",
    "InflectorConfig",
    "configure",
    "pluralize",
    "singularize",
]
