"""Explain subcommand for showing how each rule treats a subject."""

from __future__ import annotations

from pathlib import Path

import click

from . import check as check_module
from . import config, util

PATTERN_WIDTH = 48


def print_report(ruleset: config.RuleSet, subject: object) -> None:
    """Print one line per rule showing whether it matches and which one wins."""
    winner = ruleset.winner(subject)

    if not ruleset.rules:
        click.echo(util.C.yellow("No rules defined."))
    else:
        max_name = max(len(rule.name) for rule in ruleset.rules)
        max_name = max(max_name, 4)  # minimum width

        header = f"{'Rule':<{max_name}}  {'Match':<5}  Pattern"
        click.echo(util.C.bold(header))
        click.echo(util.C.dim("-" * (len(header) + PATTERN_WIDTH - len("Pattern"))))

        for rule in ruleset.rules:
            name = f"{rule.name:<{max_name}}"
            pattern = util.truncate(util.format_pattern(rule.pattern), PATTERN_WIDTH)

            # pad before coloring so escape codes do not eat the column width
            if rule is winner:
                match_col = util.C.green(f"{'yes':<5}")
                click.echo(f"{util.C.green(name)}  {match_col}  {pattern}  {util.C.cyan('<- wins')}")
            elif rule.matches(subject):
                # shadowed by an earlier rule
                click.echo(f"{name}  {'yes':<5}  {pattern}  {util.C.dim('(shadowed)')}")
            else:
                match_col = util.C.dim(f"{'no':<5}")
                click.echo(f"{util.C.dim(name)}  {match_col}  {util.C.dim(pattern)}")

    click.echo()
    if winner is None:
        click.echo(util.C.yellow(f"No rule matched; fallback: {util.format_result(ruleset.fallback, 'json')}"))
    else:
        click.echo(util.C.dim(f"Result: {util.format_result(winner.result, 'json')}"))


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
def explain(rules: Path, subject: str | None, input_path: Path | None) -> None:
    """Show which rules in RULES match SUBJECT and which one wins.

    \b
    Examples:
      matchixir explain rules.yml '{status: error, message: boom}'
      matchixir explain rules.yml -i response.json
    """
    ruleset = check_module.load_rules(rules)
    value = check_module.read_subject(subject, input_path)
    print_report(ruleset, value)
