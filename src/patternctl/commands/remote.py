"""Command: the command-pattern remote control."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl remote on:0 off:0 undo
  patternctl remote on:3 undo
  patternctl remote on:2 undo""",
)
@click.argument("presses", nargs=-1, required=True)
@click.pass_obj
def remote(app: AppContext, presses: tuple[str, ...]) -> None:
    """Press remote buttons: on:N, off:N, or undo.

    Slot 0 is the living room light, 1 the kitchen light, 2 the garage
    door (cannot be undone), 3 a party macro for both lights.
    """
    from patternctl.services.behavioral import BehavioralService

    app.emit(BehavioralService(app.settings).drive_remote(list(presses)))
