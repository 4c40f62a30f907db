"""Rule file loading for the matchixir CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from matchixir import core

DEFAULT_WILDCARD_TOKEN = "_"


class RuleFileError(ValueError):
    """A rule file could not be read or does not have the expected shape."""


@dataclass
class Rule:
    """A named pattern and the result it produces when it wins."""

    name: str
    pattern: Any
    result: Any = None

    def matches(self, subject: Any) -> bool:
        """Check if subject structurally matches this rule's pattern."""
        return core.pattern.matches(subject, self.pattern)


@dataclass
class RuleSet:
    """Ordered rules plus the fallback result used when none of them match."""

    rules: list[Rule] = field(default_factory=list)
    fallback: Any = None

    def resolve(self, subject: Any) -> Any:
        """Run subject through the rules, first match wins."""
        matcher = core.resolution.match(subject)
        for rule in self.rules:
            matcher = matcher.with_pattern(rule.pattern, lambda _subject, r=rule: r.result)
        return matcher.resolve_else(lambda _subject: self.fallback)

    def winner(self, subject: Any) -> Rule | None:
        """Return the rule that would fire for subject, or None for the fallback."""
        for rule in self.rules:
            if rule.matches(subject):
                return rule
        return None


def substitute_wildcards(raw: Any, token: str) -> Any:
    """Replace every string equal to token with the wildcard sentinel, at any depth."""
    if isinstance(raw, str):
        return core.pattern.WILDCARD if raw == token else raw
    if isinstance(raw, list):
        return [substitute_wildcards(item, token) for item in raw]
    if isinstance(raw, dict):
        return {key: substitute_wildcards(value, token) for key, value in raw.items()}
    return raw


def parse_rule(raw: Any, index: int, token: str) -> Rule:
    """Parse a single rule entry from YAML data."""
    if not isinstance(raw, dict):
        raise RuleFileError(f"Rule #{index} must be a mapping, got {type(raw).__name__}")
    if "pattern" not in raw:
        raise RuleFileError(f"Rule #{index} has no 'pattern'")

    name = str(raw.get("name") or f"rule-{index}")
    result = raw["result"] if "result" in raw else name
    return Rule(name=name, pattern=substitute_wildcards(raw["pattern"], token), result=result)


def parse_ruleset_from_data(data: Any) -> RuleSet:
    """Parse a RuleSet from loaded YAML data.

    Expects {"rules": [{"name": ..., "pattern": ..., "result": ...}], "fallback": ...}.
    """
    if not isinstance(data, dict):
        raise RuleFileError("Rule file must contain a mapping at the top level")

    token = data.get("wildcard", DEFAULT_WILDCARD_TOKEN)
    if not isinstance(token, str) or not token:
        raise RuleFileError("'wildcard' must be a non-empty string")

    raw_rules = data.get("rules")
    if not isinstance(raw_rules, list):
        raise RuleFileError("Rule file must have a 'rules' list")

    rules = [parse_rule(raw, i, token) for i, raw in enumerate(raw_rules, start=1)]
    return RuleSet(rules=rules, fallback=data.get("fallback"))


def load_ruleset(yaml_path: Path) -> RuleSet:
    """Load a RuleSet from a YAML rule file."""
    try:
        with open(yaml_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise RuleFileError(f"Cannot read rule file {yaml_path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise RuleFileError(f"Invalid YAML in {yaml_path}: {e}") from e

    return parse_ruleset_from_data(data)


def parse_subject(text: str) -> Any:
    """Parse a subject value from YAML or JSON text."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid subject: {e}") from e
