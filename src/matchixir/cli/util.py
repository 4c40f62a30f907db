"""Shared CLI utilities for terminal output and value rendering."""

from __future__ import annotations

import json
import os
import sys
from typing import Any

import yaml

from matchixir import core


class C:
    """Terminal colors using ANSI escape codes."""

    _enabled = sys.stdout.isatty() and os.environ.get("NO_COLOR") is None

    BOLD = "\033[1m" if _enabled else ""
    DIM = "\033[2m" if _enabled else ""
    RED = "\033[91m" if _enabled else ""
    GREEN = "\033[92m" if _enabled else ""
    YELLOW = "\033[93m" if _enabled else ""
    CYAN = "\033[96m" if _enabled else ""
    RESET = "\033[0m" if _enabled else ""

    @classmethod
    def bold(cls, s: str) -> str:
        return f"{cls.BOLD}{s}{cls.RESET}"

    @classmethod
    def dim(cls, s: str) -> str:
        return f"{cls.DIM}{s}{cls.RESET}"

    @classmethod
    def green(cls, s: str) -> str:
        return f"{cls.GREEN}{s}{cls.RESET}"

    @classmethod
    def red(cls, s: str) -> str:
        return f"{cls.RED}{s}{cls.RESET}"

    @classmethod
    def yellow(cls, s: str) -> str:
        return f"{cls.YELLOW}{s}{cls.RESET}"

    @classmethod
    def cyan(cls, s: str) -> str:
        return f"{cls.CYAN}{s}{cls.RESET}"


def format_result(value: Any, output: str) -> str:
    """Render a resolved result as yaml, json or plain text."""
    if output == "json":
        return json.dumps(value, sort_keys=True, default=str)
    if output == "yaml":
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=True).rstrip("\n")
    if value is None:
        return ""
    return str(value)


def format_pattern(pattern: Any) -> str:
    """Render a pattern compactly on one line, showing wildcards as '_'."""
    if pattern is core.pattern.WILDCARD:
        return "_"
    if isinstance(pattern, list):
        return "[" + ", ".join(format_pattern(p) for p in pattern) + "]"
    if isinstance(pattern, dict):
        return "{" + ", ".join(f"{k}: {format_pattern(v)}" for k, v in pattern.items()) + "}"
    return json.dumps(pattern) if isinstance(pattern, str) else repr(pattern)


def truncate(s: str, width: int) -> str:
    """Shorten s to at most width characters."""
    if len(s) <= width:
        return s
    if width <= 3:
        return s[:width]
    return s[: width - 3] + "..."
