"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns logging setup and centralized outcome emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rulecheck.config.logging import configure_logging
from rulecheck.output.formatters import OutputSettings, format_outcome

if TYPE_CHECKING:
    from rulecheck.config.settings import RulecheckSettings
    from rulecheck.domain.outcome import ValidationOutcome


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RulecheckSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, outcome: ValidationOutcome, *, op: str) -> None:
        """Format and output an outcome with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_outcome(outcome, op=op, settings=settings)
        if outcome.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
