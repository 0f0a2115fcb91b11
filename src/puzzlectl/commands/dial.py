"""Command: count how often the dial rests on zero."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from puzzlectl.commands._base import INPUT_ARGUMENT, PuzzleCommand

if TYPE_CHECKING:
    from puzzlectl.commands._context import AppContext


@click.command(
    cls=PuzzleCommand,
    examples="""\
  puzzlectl dial input.txt
  puzzlectl -q dial input.txt
  printf 'L68\\nR48\\n' | puzzlectl dial -
  puzzlectl --json dial input.txt""",
)
@INPUT_ARGUMENT
@click.pass_obj
def dial(app: AppContext, input_path: str) -> None:
    """Rotate the dial by each L<n>/R<n> line of INPUT and print the password."""
    from puzzlectl.services.solve import SolveService

    text = app.read_input(input_path)
    app.emit(SolveService(app.settings).dial(text))
