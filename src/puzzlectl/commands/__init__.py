"""Subcommand modules for puzzlectl.

Provides register_commands() which uses deferred imports to keep
``puzzlectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register one standalone command per puzzle on the root CLI group."""
    from puzzlectl.commands.dial import dial
    from puzzlectl.commands.fresh import fresh

    cli.add_command(dial)
    cli.add_command(fresh)
