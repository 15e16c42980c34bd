"""Rich/JSON output helpers.

The CLI renders a ValidationOutcome for humans (Rich output, colors) or
machines (--json). Quiet mode drops the header and prints bare messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel
from rich.markup import escape

from rulecheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from rulecheck.domain.outcome import ValidationOutcome


class OutputSettings(BaseModel):
    """Rendering switches derived from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def _format_human(outcome: ValidationOutcome, op: str) -> str:
    console = create_console()
    if outcome.ok:
        console.print(f"[rc.ok]OK[/rc.ok]: [rc.op]{escape(op)}[/rc.op]")
    else:
        console.print(f"[rc.fail]INVALID[/rc.fail]: [rc.op]{escape(op)}[/rc.op]")
        for message in outcome.messages:
            console.print(f"[rc.bullet]  -[/rc.bullet] [rc.message]{escape(message)}[/rc.message]")
    return get_output(console).rstrip("\n")


def format_outcome(
    outcome: ValidationOutcome,
    *,
    op: str = "validate",
    settings: OutputSettings | None = None,
) -> str:
    """Format a ValidationOutcome for display.

    Args:
        outcome: The outcome to format.
        op: Name of what was validated, shown in the human header.
        settings: Output mode; defaults to human-readable.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return outcome.model_dump_json(indent=2)
    if settings.quiet:
        return "\n".join(outcome.messages)
    return _format_human(outcome, op)
