"""Command-line entry point for greeter."""

from __future__ import annotations

import logging
import sys
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click
import logfire
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from greeter.commands.greet import run_greet
from greeter.config import read_settings

# Nothing is sent without a Logfire token, and nothing is echoed to stdout.
logfire.configure(send_to_logfire="if-token-present", console=False)


@contextmanager
def debug_logging(enabled: bool) -> Iterator[None]:
    """Route ``greeter`` debug records to stderr while the block runs."""
    if not enabled:
        yield
        return

    package_logger = logging.getLogger("greeter")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    previous_level = package_logger.level
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to a greeter TOML file.",
)
@click.option("--name", default=None, help="Name to greet (overrides the configured name).")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(config_path: Path | None, name: str | None, verbose: bool) -> None:
    """Print a friendly greeting."""
    try:
        settings = read_settings(config_path=config_path)
    except (ValidationError, tomllib.TOMLDecodeError) as exc:
        Console(stderr=True).print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        sys.exit(1)

    with debug_logging(verbose or settings.verbose):
        run_greet(settings, name=name)


def main() -> None:
    """Entry point for the greeter CLI."""
    logfire.info("application.startup")
    cli()
