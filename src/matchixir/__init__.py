"""Structural pattern matching with first-match-wins resolution chains."""

from .core.pattern import WILDCARD, Kind, Wildcard, _, kind_of, matches, same_value
from .core.resolution import Deferred, Immediate, Matcher, match

__all__ = [
    "WILDCARD",
    "Deferred",
    "Immediate",
    "Kind",
    "Matcher",
    "Wildcard",
    "_",
    "kind_of",
    "match",
    "matches",
    "same_value",
]
