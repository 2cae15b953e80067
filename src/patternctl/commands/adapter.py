"""Command group: adapters."""

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
  patternctl adapter turkey""",
)
@click.pass_obj
def adapter(app: AppContext) -> None:
    """Make one interface look like another."""


@adapter.command(
    examples="""\
  patternctl adapter turkey
  patternctl --json adapter turkey"""
)
@click.pass_obj
def turkey(app: AppContext) -> None:
    """Drive a wild turkey through the duck interface."""
    app.emit(StructuralService(app.settings).adapt_turkey())
