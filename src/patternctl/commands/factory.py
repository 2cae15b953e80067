"""Command group: creational factories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.services.creational import CreationalService

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext

_FACTORY_EXAMPLES = """\
  patternctl factory pizza veggie
  patternctl factory isp montreal power
  patternctl factory rooms enchanted"""


@click.group(cls=PatternGroup, examples=_FACTORY_EXAMPLES)
@click.pass_obj
def factory(app: AppContext) -> None:
    """Build products through factories."""


@factory.command(
    examples="""\
  patternctl factory pizza cheese
  patternctl factory pizza anchovy
  patternctl --json factory pizza meat"""
)
@click.argument("selector")
@click.pass_obj
def pizza(app: AppContext, selector: str) -> None:
    """Order a pizza; unknown selectors get the default kind."""
    app.emit(CreationalService(app.settings, plugins=app.plugins).order_pizza(selector))


@factory.command(
    examples="""\
  patternctl factory isp ontario baby
  patternctl factory isp montreal power"""
)
@click.argument("region")
@click.argument("plan")
@click.pass_obj
def isp(app: AppContext, region: str, plan: str) -> None:
    """Subscribe to an internet plan through a regional provider."""
    app.emit(CreationalService(app.settings).subscribe_isp(region, plan))


@factory.command(
    examples="""\
  patternctl factory rooms ordinary
  patternctl factory rooms enchanted"""
)
@click.argument("theme")
@click.pass_obj
def rooms(app: AppContext, theme: str) -> None:
    """Build a connected pair of rooms from one family."""
    app.emit(CreationalService(app.settings).build_rooms(theme))
