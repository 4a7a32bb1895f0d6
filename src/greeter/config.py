"""Greeting settings read from ``greeter.toml`` or ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from greeter.greeting import DEFAULT_NAME

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "greeter.toml"


class Settings(BaseModel):
    """Who to greet and whether to log the greeting."""

    model_config = ConfigDict(extra="forbid")

    name: str = DEFAULT_NAME
    verbose: bool = False


def _greeter_table(path: Path) -> Any:
    with path.open("rb") as f:
        data = tomllib.load(f)
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("greeter", {})
    return data


def read_settings(config_path: Path | None = None, cwd: Path | None = None) -> Settings:
    """Read greeting settings.

    An explicit *config_path* wins. Otherwise ``greeter.toml`` in *cwd* is
    used, then a ``[tool.greeter]`` table in ``pyproject.toml``, then the
    defaults. A ``pyproject.toml`` that does not parse is skipped, since it
    may belong to some other tool.

    Raises:
        tomllib.TOMLDecodeError: If the explicit file or ``greeter.toml`` is
            not valid TOML.
        pydantic.ValidationError: If the greeter table has unknown keys or
            wrongly typed values.
    """
    if config_path is not None:
        return Settings.model_validate(_greeter_table(config_path))

    if cwd is None:
        cwd = Path.cwd()

    own = cwd / CONFIG_FILENAME
    if own.is_file():
        return Settings.model_validate(_greeter_table(own))

    pyproject = cwd / "pyproject.toml"
    if pyproject.is_file():
        try:
            table = _greeter_table(pyproject)
        except tomllib.TOMLDecodeError as exc:
            logger.debug("Skipping unparseable %s: %s", pyproject, exc)
        else:
            return Settings.model_validate(table)

    return Settings()
