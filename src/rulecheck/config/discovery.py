"""Locate, parse, and validate ``rulecheck.toml``.

Resolution order: an explicit ``--config`` path, then the RULECHECK_CONFIG
env var, then a walk-up search from the start directory (like git and .git/).
Section tables are validated here against :class:`RulecheckConfig`, so a bad
``[password]`` value is reported once, with the file it came from.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from rulecheck.config.models import RulecheckConfig

CONFIG_FILENAME = "rulecheck.toml"
CONFIG_ENV_VAR = "RULECHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for rulecheck.toml.

    RULECHECK_CONFIG, when set, wins; if it names a missing file the
    result is None rather than a walk-up match.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | None, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None to use code defaults.

    Raises:
        click.BadParameter: *config_path* was given but is not a file.
    """
    if not config_path:
        return find_config(start)
    p = Path(config_path)
    if not p.is_file():
        raise click.BadParameter(
            f"Config file not found: {p}",
            param_hint="'-c' / '--config'",
        )
    return p


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and validate its sections.

    Returns the raw top-level keys with each section replaced by its
    validated values (only the keys the file actually sets, so lower
    priority sources still fill the rest).

    Raises:
        click.ClickException: Malformed TOML or an invalid section value.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data: dict[str, Any] = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    try:
        config = RulecheckConfig.model_validate(data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid config in {path}: {exc}") from exc

    return {**data, **config.model_dump(exclude_unset=True)}
