"""Command: validate a password against the configured policy."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from rulecheck.commands._base import RulecheckCommand

if TYPE_CHECKING:
    from rulecheck.commands._context import AppContext

logger = logging.getLogger(__name__)


@click.command(
    cls=RulecheckCommand,
    examples="""\
  rulecheck password 'Hunter2hunter'
  rulecheck password --min-length 12 'Hunter2hunter'
  rulecheck --json password 'hogehogeho'
  rulecheck password            # prompts with hidden input""",
)
@click.argument("value", metavar="PASSWORD", required=False)
@click.option(
    "--min-length",
    type=click.IntRange(min=0),
    default=None,
    help="Override the configured minimum length (must be exceeded).",
)
@click.pass_obj
def password(app: AppContext, value: str | None, min_length: int | None) -> None:
    """Check PASSWORD against every password rule and report all failures."""
    from rulecheck.domain.password import password_validator

    if value is None:
        if app.settings.no_interact:
            raise click.UsageError("PASSWORD is required with --no-interact.")
        value = click.prompt("Password", hide_input=True)

    policy = app.settings.password
    if min_length is not None:
        policy = policy.model_copy(update={"min_length": min_length})
    logger.debug("Password policy: %s", policy.model_dump())

    validator = password_validator(
        policy.min_length,
        require_digit=policy.require_digit,
        require_mixed_case=policy.require_mixed_case,
    )
    app.emit(validator.validate(value), op="password")
