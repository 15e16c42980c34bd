"""Subcommand modules for rulecheck.

Provides register_commands() which uses deferred imports to keep
``rulecheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rulecheck.commands.password import password

    cli.add_command(password)
