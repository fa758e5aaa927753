"""Path resolution into JSON:API documents."""

from __future__ import annotations

from typing import Any, Optional

from . import messages
from .exceptions import ResolutionError
from .locator import ResourceLocator
from .matcher import MISSING
from .models import Path


class PathResolver:
    """
    Walks a document along a Path.

    Descent applies one key's jsonpath_ng expression at a time, and only
    after checking the member exists. The terminal is then either matched
    as a resource (resolve) or read as an inline member (sub_object).
    """

    def __init__(self, locator: Optional[ResourceLocator] = None):
        self.locator = locator or ResourceLocator()
        self.reporter = self.locator.reporter

    def walk(self, document: Any, path: Path) -> Any:
        """
        Descend through the path's keys.

        Args:
            document: The document root
            path: Parsed path; its terminal is ignored here

        Returns:
            The node reached by the keys (the root for an empty key list)
        """
        node = document
        for key in path.keys:
            if not key.present_in(node):
                node = None
                break
            node = key.lookup(node)

        if node is None:
            self.reporter.fail(
                messages.PATH_NOT_RESOLVED.format(path=str(path)),
                ResolutionError,
            )
        return node

    def resolve(self, document: Any, path: Path) -> dict:
        """
        Locate the resource a path designates.

        Raises exactly as a direct resource assertion would when the
        terminal target is missing or its attributes differ.
        """
        node = self.walk(document, path)
        return self.locator.require(node, path.target)

    def sub_object(self, document: Any, path: Path, member: str) -> Any:
        """Return node[member] at the end of the path's keys, or MISSING."""
        node = self.walk(document, path)
        if not isinstance(node, dict):
            return MISSING
        return node.get(member, MISSING)
