"""Composable assertions over JSON:API documents."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from . import messages
from .exceptions import (
    MismatchError,
    NotFoundError,
    PreconditionError,
    UnexpectedPresenceError,
)
from .locator import ResourceLocator, identity_of
from .matcher import MISSING, matches
from .models import Path
from .reporter import Reporter
from .resolver import PathResolver
from .utils import format_value, is_batch
from .validator import DocumentValidator

logger = logging.getLogger(__name__)


class DocumentAsserter:
    """
    Assert or refute resources, relationships and top-level objects.

    Every operation:

    1. checks required options
    2. locates the subject (via PathResolver / ResourceLocator)
    3. compares it with the caller's expectation
    4. returns the document untouched, so calls chain:

        asserter.assert_data(
            asserter.assert_included(document, author), post
        )

    Failures are raised through the Reporter as typed exceptions from
    jsonapi_assert.exceptions.
    """

    def __init__(
        self,
        reporter: Optional[Reporter] = None,
        matcher: Callable[[Any, Any], bool] = matches,
    ):
        """
        Initialize the asserter.

        Args:
            reporter: Failure reporter (raises typed exceptions by default)
            matcher: Value matching predicate used for every comparison
        """
        self.reporter = reporter or Reporter()
        self.matcher = matcher
        self.locator = ResourceLocator(matcher, self.reporter)
        self.resolver = PathResolver(self.locator)
        self.validator = DocumentValidator(self.reporter)

    # Resources

    def assert_data(self, document: dict, records: Any) -> dict:
        """
        Assert that records are in the document's `data` member.

        Args:
            document: The JSON:API document
            records: A resource target or a list of them (checked in order,
                stopping at the first failure)

        Returns:
            The same document
        """
        records = self._targets(records)
        logger.debug("assert_data: %d target(s)", len(records))
        for record in records:
            self.locator.require(document.get("data"), record)
        return document

    def refute_data(self, document: dict, records: Any) -> dict:
        """Refute that records (identity and every attribute) are in `data`."""
        records = self._targets(records)
        logger.debug("refute_data: %d target(s)", len(records))
        for record in records:
            self.locator.forbid(document.get("data"), record)
        return document

    def assert_included(self, document: dict, records: Any) -> dict:
        """Assert that records are in the document's `included` member."""
        records = self._targets(records)
        logger.debug("assert_included: %d target(s)", len(records))
        for record in records:
            self.locator.require(document.get("included"), record)
        return document

    def refute_included(self, document: dict, records: Any) -> dict:
        """Refute that records are in the document's `included` member."""
        records = self._targets(records)
        logger.debug("refute_included: %d target(s)", len(records))
        for record in records:
            self.locator.forbid(document.get("included"), record)
        return document

    # Relationships

    def assert_relationship(
        self,
        document: dict,
        children: Any,
        as_: Optional[str] = None,
        for_: Any = None,
        included: Optional[bool] = None,
    ) -> dict:
        """
        Assert that a parent resource links to child resources.

        Args:
            document: The JSON:API document
            children: Child resource target(s); only id and type are used
            as_: Relationship name, never derived from the child
            for_: Path to the parent, e.g. ["data", parent]; a bare parent
                resource means ["data", parent]
            included: None for no extra check, True to also assert the
                child is in `included`, False to refute it

        Returns:
            The same document
        """
        self._check_relationship_options(as_, for_)
        children = self._targets(children)
        logger.debug("assert_relationship %r: %d child(ren)", as_, len(children))
        if not children:
            return document

        parent = self.resolver.resolve(document, self._parent_path(for_))
        parent_identity = identity_of(parent)

        # Only absent or null members count as missing; {} is present
        relationships = parent.get("relationships")
        self.reporter.assert_true(
            relationships is not None,
            messages.NO_RELATIONSHIPS.format(**parent_identity),
            NotFoundError,
        )

        relationship = relationships.get(as_) if isinstance(relationships, dict) else None
        self.reporter.assert_true(
            relationship is not None,
            messages.RELATIONSHIP_NOT_FOUND.format(name=as_, **parent_identity),
            NotFoundError,
        )

        for child in children:
            child_identity = identity_of(child)
            self.reporter.assert_true(
                self._find_linkage(relationship, child) is not None,
                messages.LINKAGE_NOT_FOUND.format(
                    name=as_,
                    child_id=child_identity["id"],
                    child_type=child_identity["type"],
                    **parent_identity,
                ),
                NotFoundError,
            )

            if included is True:
                self.assert_included(document, child)
            elif included is False:
                self.refute_included(document, child)

        return document

    def refute_relationship(
        self,
        document: dict,
        children: Any,
        as_: Optional[str] = None,
        for_: Any = None,
    ) -> dict:
        """
        Refute that a parent resource links to child resources.

        The parent itself must still be found; a missing relationships
        object or relationship name counts as "not linked".
        """
        self._check_relationship_options(as_, for_)
        children = self._targets(children)
        logger.debug("refute_relationship %r: %d child(ren)", as_, len(children))
        if not children:
            return document

        parent = self.resolver.resolve(document, self._parent_path(for_))
        parent_identity = identity_of(parent)
        relationships = parent.get("relationships")
        relationship = relationships.get(as_) if isinstance(relationships, dict) else None

        for child in children:
            child_identity = identity_of(child)
            self.reporter.assert_false(
                self._find_linkage(relationship, child) is not None,
                messages.LINKAGE_PRESENT.format(
                    name=as_,
                    child_id=child_identity["id"],
                    child_type=child_identity["type"],
                    **parent_identity,
                ),
                UnexpectedPresenceError,
            )

        return document

    # Top-level objects

    def assert_links(self, document: dict, path: Any = None) -> dict:
        """
        Assert that a valid links object exists at the end of a path.

        The last element of `path` is the expected object holding `links`;
        the elements before it are keys leading to that object:

            asserter.assert_links(document, path=[{"links": links}])
            asserter.assert_links(
                document,
                path=["data", "relationships", "author", {"links": links}],
            )

        The actual links object is validated (string or href/meta object
        per member) before being compared with the expected one.
        """
        if not path:
            self.reporter.fail(messages.MISSING_PATH, PreconditionError)
        if isinstance(path, Mapping):
            path = [path]

        path = Path.parse(path)
        expected = path.target
        if not isinstance(expected, Mapping) or "links" not in expected:
            self.reporter.fail(messages.INVALID_LINKS_PATH, PreconditionError)

        logger.debug("assert_links at %s", path)
        actual = self.resolver.sub_object(document, path, "links")
        if actual is MISSING:
            self.reporter.fail(messages.LINKS_NOT_FOUND, NotFoundError)

        self.validator.validate_links(actual)

        if not self.matcher(actual, expected["links"]):
            self.reporter.fail(
                messages.LINKS_MISMATCH,
                MismatchError,
                left=actual,
                right=expected["links"],
            )
        return document

    def assert_meta(self, document: dict, meta: Optional[dict] = None) -> dict:
        """
        Assert that the top-level meta object exists.

        When `meta` is given the whole object must match it (patterns
        allowed as values).
        """
        logger.debug("assert_meta")
        actual = document.get("meta", MISSING)
        if actual is MISSING:
            self.reporter.fail(messages.META_NOT_FOUND, NotFoundError)

        self.validator.validate_meta(actual)

        if meta is not None and not self.matcher(actual, meta):
            self.reporter.fail(
                messages.META_MISMATCH,
                MismatchError,
                left=actual,
                right=meta,
            )
        return document

    def assert_jsonapi(
        self,
        document: dict,
        members: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> dict:
        """
        Assert that the jsonapi object exists and holds the given members.

            asserter.assert_jsonapi(document, version="1.0")

        This is also where the document's top-level constraints are
        enforced, whether or not the members match.
        """
        logger.debug("assert_jsonapi")
        if "jsonapi" not in document:
            self.reporter.fail(messages.JSONAPI_NOT_FOUND, NotFoundError)

        self.validator.enforce_top_level_constraints(document)

        jsonapi = document["jsonapi"]
        expected = dict(members or {}, **kwargs)
        entries = []
        left = {}
        right = {}

        for key, value in expected.items():
            actual = jsonapi.get(key, MISSING) if isinstance(jsonapi, dict) else MISSING
            if self.matcher(actual, value):
                continue

            actual = None if actual is MISSING else actual
            entries.append(
                messages.JSONAPI_MEMBER_MISMATCH.format(
                    key=key,
                    expected=format_value(value),
                    actual=format_value(actual),
                )
            )
            left[key] = actual
            right[key] = value

        if entries:
            self.reporter.fail(
                messages.JSONAPI_MISMATCH.format(entries=", ".join(entries)),
                MismatchError,
                left=left,
                right=right,
            )
        return document

    # Helpers

    def _targets(self, records: Any) -> list:
        """A batch argument as a list, a single target as a singleton."""
        if is_batch(records):
            return list(records)
        return [records]

    def _check_relationship_options(self, as_: Any, for_: Any):
        if not as_:
            self.reporter.fail(messages.MISSING_AS, PreconditionError)
        if not for_:
            self.reporter.fail(messages.MISSING_FOR, PreconditionError)

    def _parent_path(self, for_: Any) -> Path:
        if isinstance(for_, Mapping):
            return Path.parse(["data", for_])
        return Path.parse(for_)

    def _find_linkage(self, relationship: Any, child: Any) -> Optional[dict]:
        """Find the child's identifier in a relationship's linkage data."""
        if not isinstance(relationship, dict):
            return None
        return self.locator.find(relationship.get("data"), child)


_default_asserter = DocumentAsserter()


def assert_data(document: dict, records: Any) -> dict:
    """Assert that records are in `data`. See DocumentAsserter.assert_data."""
    return _default_asserter.assert_data(document, records)


def refute_data(document: dict, records: Any) -> dict:
    """Refute that records are in `data`."""
    return _default_asserter.refute_data(document, records)


def assert_included(document: dict, records: Any) -> dict:
    """Assert that records are in `included`."""
    return _default_asserter.assert_included(document, records)


def refute_included(document: dict, records: Any) -> dict:
    """Refute that records are in `included`."""
    return _default_asserter.refute_included(document, records)


def assert_relationship(
    document: dict,
    children: Any,
    as_: Optional[str] = None,
    for_: Any = None,
    included: Optional[bool] = None,
) -> dict:
    """
    Assert a relationship between a parent and child records.

    Example:
        assert_relationship(document, comment, as_="comments", for_=["data", post])
    """
    return _default_asserter.assert_relationship(
        document, children, as_=as_, for_=for_, included=included
    )


def refute_relationship(
    document: dict,
    children: Any,
    as_: Optional[str] = None,
    for_: Any = None,
) -> dict:
    """Refute a relationship between a parent and child records."""
    return _default_asserter.refute_relationship(document, children, as_=as_, for_=for_)


def assert_links(document: dict, path: Any = None) -> dict:
    """Assert a links object at the end of `path`."""
    return _default_asserter.assert_links(document, path=path)


def assert_meta(document: dict, meta: Optional[dict] = None) -> dict:
    """Assert the top-level meta object."""
    return _default_asserter.assert_meta(document, meta)


def assert_jsonapi(
    document: dict,
    members: Optional[Mapping[str, Any]] = None,
    **kwargs: Any,
) -> dict:
    """Assert the jsonapi object and the document's top-level constraints."""
    return _default_asserter.assert_jsonapi(document, members, **kwargs)
