"""Command group: facades."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.services.structural import StructuralService

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl facade theater Alien""",
)
@click.pass_obj
def facade(app: AppContext) -> None:
    """Drive subsystems through a single front panel."""


@facade.command(
    examples="""\
  patternctl facade theater "Raiders of the Lost Ark"
  patternctl --json facade theater Alien"""
)
@click.argument("title")
@click.pass_obj
def theater(app: AppContext, title: str) -> None:
    """Watch TITLE on the home theater, then shut it down."""
    app.emit(StructuralService(app.settings).watch_movie(title))
