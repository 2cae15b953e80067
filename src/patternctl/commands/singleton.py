"""Command: singleton and lazy initialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl singleton
  patternctl --json singleton""",
)
@click.pass_obj
def singleton(app: AppContext) -> None:
    """Show that the network manager is created once and shared."""
    from patternctl.services.creational import CreationalService

    app.emit(CreationalService(app.settings).demonstrate_singleton())
