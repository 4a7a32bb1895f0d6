"""Greet command: build a User and print its greeting."""

from __future__ import annotations

import click

from greeter.config import Settings
from greeter.greeting import User


def run_greet(settings: Settings, *, name: str | None = None) -> str:
    """Greet *name*, falling back to the configured name.

    Returns the greeting that was written to stdout.
    """
    user = User(name if name is not None else settings.name)
    message = user.greet()
    click.echo(message)
    return message
