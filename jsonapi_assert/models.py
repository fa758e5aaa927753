"""Data models for jsonapi_assert."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root

from .utils import normalize_key


@dataclass(frozen=True)
class Key:
    """A descent step: member name, or list index when an int."""
    name: str | int

    def expression(self) -> JSONPath:
        if isinstance(self.name, int):
            return Index(self.name)
        return Fields(self.name)

    def present_in(self, node: Any) -> bool:
        """True if node has this member (or index)."""
        if isinstance(self.name, int):
            return isinstance(node, list) and -len(node) <= self.name < len(node)
        return isinstance(node, dict) and self.name in node

    def lookup(self, node: Any) -> Any:
        """Read this member from node, which must hold it."""
        # Fields("*") is a wildcard in jsonpath_ng, so it cannot name the member
        if self.name == "*":
            return node[self.name]
        return self.expression().find(node)[0].value


@dataclass(frozen=True)
class Terminal:
    """The last element of a path: a resource target or an inline sub-object."""
    target: Any


@dataclass(frozen=True)
class Path:
    """
    A path into a document.

    An ordered run of Key steps followed by exactly one Terminal. Callers
    usually write paths as plain lists, e.g. ["data", "relationships",
    "author", {"links": {...}}]; Path.parse turns those into this form.
    """
    keys: tuple[Key, ...]
    terminal: Terminal

    @classmethod
    def parse(cls, elements: Iterable[Any]) -> Path:
        """
        Build a Path from a list of keys ending in a target.

        Args:
            elements: Keys (str, int, Enum or Key) followed by the terminal

        Returns:
            The parsed Path
        """
        if isinstance(elements, Path):
            return elements

        elements = list(elements)
        if not elements:
            raise ValueError("A path needs at least a terminal element")

        *keys, last = elements
        return cls(
            keys=tuple(k if isinstance(k, Key) else Key(normalize_key(k)) for k in keys),
            terminal=last if isinstance(last, Terminal) else Terminal(last),
        )

    @property
    def target(self) -> Any:
        return self.terminal.target

    @property
    def is_root(self) -> bool:
        """True when the terminal applies to the document root."""
        return not self.keys

    def expression(self) -> JSONPath:
        """Render the descent keys as a JSONPath expression."""
        expr: JSONPath = Root()
        for key in self.keys:
            expr = Child(expr, key.expression())
        return expr

    def __str__(self) -> str:
        return str(self.expression())
