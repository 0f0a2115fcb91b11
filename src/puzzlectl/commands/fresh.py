"""Command: count IDs outside every inclusive range."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from puzzlectl.commands._base import INPUT_ARGUMENT, PuzzleCommand

if TYPE_CHECKING:
    from puzzlectl.commands._context import AppContext


@click.command(
    cls=PuzzleCommand,
    examples="""\
  puzzlectl fresh input.txt
  puzzlectl -q fresh input.txt
  puzzlectl --json fresh - < input.txt""",
)
@INPUT_ARGUMENT
@click.pass_obj
def fresh(app: AppContext, input_path: str) -> None:
    """Count the IDs in INPUT that fall in none of its min-max ranges.

    INPUT holds range lines, one blank line, then one ID per line.
    """
    from puzzlectl.services.solve import SolveService

    text = app.read_input(input_path)
    app.emit(SolveService(app.settings).fresh(text))
