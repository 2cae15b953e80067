"""Command group: decorator chains."""

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
  patternctl decorator coffee dark-roast soy whip""",
)
@click.pass_obj
def decorator(app: AppContext) -> None:
    """Wrap objects in decorators."""


@decorator.command(
    examples="""\
  patternctl decorator coffee house-blend milk mocha mocha
  patternctl --json decorator coffee espresso whip"""
)
@click.argument("base")
@click.argument("condiments", nargs=-1)
@click.pass_obj
def coffee(app: AppContext, base: str, condiments: tuple[str, ...]) -> None:
    """Brew BASE and add CONDIMENTS in order."""
    app.emit(StructuralService(app.settings).brew_coffee(base, condiments))
