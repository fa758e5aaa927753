"""Resource lookup and attribute diffing."""

from __future__ import annotations

from typing import Any, Callable, Optional

from . import messages
from .exceptions import MismatchError, NotFoundError, UnexpectedPresenceError
from .matcher import MISSING, matches
from .reporter import Reporter
from .utils import format_value, strip_attributes, wrap


def identity_of(record: Any) -> dict:
    """Message fields for a record's (id, type) pair."""
    if not isinstance(record, dict):
        return {"id": "", "type": ""}
    return {
        "id": format_value(record.get("id")),
        "type": format_value(record.get("type")),
    }


class ResourceLocator:
    """
    Finds resources by (id, type) in unordered collections.

    Lookup is a linear scan with an injectable matcher predicate; patterns
    are not hashable in any useful sense, so no index is built.
    """

    def __init__(
        self,
        matcher: Callable[[Any, Any], bool] = matches,
        reporter: Optional[Reporter] = None,
    ):
        self.matcher = matcher
        self.reporter = reporter or Reporter()

    def same_identity(self, candidate: Any, target: Any) -> bool:
        """Check whether a candidate has the target's id and type."""
        if not isinstance(candidate, dict) or not isinstance(target, dict):
            return False
        return (
            self.matcher(candidate.get("id", MISSING), target.get("id", MISSING))
            and self.matcher(candidate.get("type", MISSING), target.get("type", MISSING))
        )

    def find(self, collection: Any, target: Any) -> Optional[dict]:
        """
        Find the first resource matching the target's identity.

        Args:
            collection: A resource, a list of resources, or None
            target: Resource shaped descriptor, id/type may be patterns

        Returns:
            The first matching resource in collection order, or None
        """
        for candidate in wrap(collection):
            if self.same_identity(candidate, target):
                return candidate
        return None

    def diff_attributes(self, found: dict, target: dict) -> list[str]:
        """
        List the attribute keys of found that the target does not match.

        Keys missing from the target's attributes count as mismatched.
        """
        expected = target.get("attributes") or {}
        return [
            key
            for key, value in (found.get("attributes") or {}).items()
            if not self.matcher(value, expected.get(key, MISSING))
        ]

    def has_matching_attributes(self, found: dict, target: dict) -> bool:
        """True iff every attribute of found matches the target."""
        return not self.diff_attributes(found, target)

    def require(self, collection: Any, target: Any) -> dict:
        """
        Find a resource and check its attributes, failing otherwise.

        Returns:
            The matching resource from the collection
        """
        found = self.find(collection, target)
        if found is None:
            self.reporter.fail(
                messages.RECORD_NOT_FOUND.format(**identity_of(target)),
                NotFoundError,
            )

        mismatched = self.diff_attributes(found, target)
        if mismatched:
            actual = found.get("attributes") or {}
            expected = target.get("attributes") or {}
            self.reporter.fail(
                messages.RECORD_MISMATCH.format(**identity_of(target)),
                MismatchError,
                left={key: actual[key] for key in mismatched},
                right={key: expected.get(key) for key in mismatched},
            )

        return found

    def forbid(self, collection: Any, target: Any) -> None:
        """Fail if a resource with the target's identity and attributes exists."""
        found = self.find(collection, target)
        if found is None:
            return

        self.reporter.assert_false(
            self.has_matching_attributes(found, target),
            messages.RECORD_PRESENT.format(record=repr(strip_attributes(target))),
            UnexpectedPresenceError,
        )
