"""Singular/plural inflection with an overridable rule table."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class InflectorConfig:
    """
    Irregular singular/plural pairs.

    A rule file lists pairs under `plural_rules`:

        plural_rules:
          - [person, people]
          - [dog, dogs]
    """
    plural_rules: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[dict], source: str = None) -> InflectorConfig:
        """Build a config from a parsed mapping."""
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Inflection rules must be a mapping, got {type(data).__name__}", source
            )

        rules = []
        for rule in data.get('plural_rules') or []:
            if not isinstance(rule, (list, tuple)) or len(rule) != 2:
                raise ConfigurationError(
                    f"Each plural rule must be a [singular, plural] pair, got {rule!r}",
                    source,
                )
            singular, plural = rule
            rules.append((str(singular), str(plural)))
        return cls(plural_rules=rules)

    @classmethod
    def from_file(cls, path: str | Path) -> InflectorConfig:
        """Load rules from a YAML (or JSON) file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Inflection rule file not found: {path}")

        with open(path, 'r') as f:
            content = f.read()

        # JSON is valid YAML, so one loader handles both
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse inflection rule file: {e}", str(path))

        config = cls.from_dict(data, source=str(path))
        logger.debug("Loaded %d plural rule(s) from %s", len(config.plural_rules), path)
        return config


class Inflector:
    """Pluralizes and singularizes words, rules first then the `s` suffix."""

    def __init__(self, config: Optional[InflectorConfig] = None):
        self.config = config or InflectorConfig()
        self._rules: dict[str, str] = {}
        for singular, plural in self.config.plural_rules:
            self._rules[singular] = plural
            self._rules[plural] = singular

    def pluralize(self, word: str) -> str:
        """Use a rule if one exists, otherwise append `s`."""
        return self._rules.get(word, f"{word}s")

    def singularize(self, word: str) -> str:
        """Use a rule if one exists, otherwise drop one trailing `s`."""
        return self._rules.get(word, re.sub(r's$', '', word))


_inflector = Inflector()


def configure(config: Optional[InflectorConfig] = None) -> Inflector:
    """Replace the rules used by the module-level pluralize/singularize."""
    global _inflector
    _inflector = Inflector(config)
    return _inflector


def pluralize(word: str) -> str:
    return _inflector.pluralize(word)


def singularize(word: str) -> str:
    return _inflector.singularize(word)
