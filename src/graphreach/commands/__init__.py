"""Subcommand modules for graphreach.

register_commands() imports command modules lazily so ``graphreach --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from graphreach.commands.reach import reach

    cli.add_command(reach)
