"""Shared pytest fixtures for matchixir tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# rule file covering record, sequence, wildcard and primitive patterns
SAMPLE_RULES_CONTENT = """\
rules:
  - name: ok
    pattern: {status: ok}
    result: success
  - name: error-with-message
    pattern: {status: error, message: _}
    result: failure
  - name: triple
    pattern: [1, _, 3]
    result: one-any-three
  - name: five
    pattern: 5
  - name: nested-user
    pattern:
      user:
        profile: {country: BO}
    result: {region: latam}
fallback: unknown
"""


@pytest.fixture
def sample_rules_content() -> str:
    """Return sample rule file content as a string."""
    return SAMPLE_RULES_CONTENT


@pytest.fixture
def sample_rules_path(tmp_path: Path, sample_rules_content: str) -> Path:
    """Create a temp rule file with sample rules and return its path."""
    rules_file = tmp_path / "rules.yml"
    rules_file.write_text(sample_rules_content)
    return rules_file


@pytest.fixture
def sample_ruleset(sample_rules_path: Path):
    """Load the sample rule file for direct use in tests."""
    from matchixir.cli.config import load_ruleset

    return load_ruleset(sample_rules_path)
