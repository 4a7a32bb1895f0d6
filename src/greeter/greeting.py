"""Greeting helpers and the User entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_NAME: str = "World"


def greet_user(name: str) -> str:
    """Return the greeting for *name*."""
    logger.debug("Greeting '%s'", name)
    return f"Hello, {name}!"


@dataclass
class User:
    """A named user that can greet itself."""

    name: str

    def greet(self) -> str:
        """Return the greeting for this user's name."""
        return greet_user(self.name)
