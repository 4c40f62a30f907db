"""Check subcommand for resolving a subject against a rule file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click

from . import config, util

logger = logging.getLogger(__name__)


def read_subject(subject: str | None, input_path: Path | None) -> Any:
    """Read the subject from the argument, an input file, or stdin."""
    if subject is not None and input_path is not None:
        raise click.ClickException("Give the subject either as an argument or with --input, not both")

    if subject is not None:
        text = subject
    elif input_path is not None:
        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise click.ClickException(f"Cannot read subject from {input_path}: {e}") from None
    else:
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            raise click.ClickException("No subject provided (pass it as an argument, with --input, or on stdin)")
        text = stdin.read()

    try:
        return config.parse_subject(text)
    except ValueError as e:
        raise click.ClickException(str(e)) from None


def load_rules(rules_path: Path) -> config.RuleSet:
    """Load a rule file, turning config errors into CLI errors."""
    try:
        ruleset = config.load_ruleset(rules_path)
    except config.RuleFileError as e:
        raise click.ClickException(str(e)) from None
    logger.info("loaded %d rules from %s", len(ruleset.rules), rules_path)
    return ruleset


@click.command()
@click.argument("rules", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("subject", required=False)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the subject from this YAML/JSON file",
)
@click.option(
    "-o",
    "--output",
    type=click.Choice(["text", "yaml", "json"]),
    default="text",
    help="Output format for the result",
)
def check(rules: Path, subject: str | None, input_path: Path | None, output: str) -> None:
    """Resolve SUBJECT against the rules in RULES and print the winning result.

    SUBJECT is parsed as YAML (JSON works too). The first rule whose pattern
    matches wins; the file's fallback is printed when none do.

    \b
    Examples:
      matchixir check rules.yml '{status: ok, data: 999}'
      matchixir check rules.yml '[1, 2, 3]' -o json
      matchixir check rules.yml -i response.json
      cat response.json | matchixir check rules.yml
    """
    ruleset = load_rules(rules)
    value = read_subject(subject, input_path)

    result = ruleset.resolve(value)
    winner = ruleset.winner(value)
    logger.info("resolved by %s", winner.name if winner else "fallback")

    click.echo(util.format_result(result, output))
