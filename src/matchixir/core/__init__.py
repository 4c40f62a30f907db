"""Core domain logic for structural matching and rule resolution."""

from . import pattern, resolution

__all__ = [
    "pattern",
    "resolution",
]
