"""Top-level matchixir command group and its log handler."""

from __future__ import annotations

import logging
import os

import click
import colorlog

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(cyan)s%(name)s%(reset)s %(message)s"

LEVEL_COLORS = {
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def log_level(verbose: int, quiet: bool) -> int:
    """Map -v/-q flags to a logging level; rule firings show up at -vv."""
    if quiet:
        return logging.ERROR
    return {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)


def install_log_handler(level: int) -> colorlog.StreamHandler:
    """Route all matchixir logging to a single colored stderr handler."""
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            LOG_FORMAT,
            log_colors=LEVEL_COLORS,
            no_color=os.environ.get("NO_COLOR") is not None,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return handler


@click.group()
@click.version_option(package_name="matchixir")
@click.option("-v", "--verbose", count=True, help="Show loaded rules (-v) and every rule firing (-vv)")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
def cli(verbose: int, quiet: bool) -> None:
    """Resolve YAML/JSON values against ordered structural pattern rules."""
    install_log_handler(log_level(verbose, quiet))


from . import check as check_module  # noqa: E402
from . import explain as explain_module  # noqa: E402

cli.add_command(check_module.check)
cli.add_command(explain_module.explain)
