"""CLI entry point for matchixir."""

from . import cli as cli_module


def run() -> None:
    """Entry point for the matchixir CLI."""
    cli_module.cli()
