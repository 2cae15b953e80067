"""Command group: strategy composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.services.behavioral import BehavioralService

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl strategy duck mallard
  patternctl strategy duck rubber --air rocket""",
)
@click.pass_obj
def strategy(app: AppContext) -> None:
    """Compose objects from swappable behaviours."""


@strategy.command(
    examples="""\
  patternctl strategy duck mallard
  patternctl strategy duck rubber --air rocket
  patternctl strategy duck decoy --sound none"""
)
@click.argument("kind")
@click.option("--sound", default=None, help="quacker, squeaker, mute, or none.")
@click.option("--water", default=None, help="swimmer, floater, or none.")
@click.option("--air", default=None, help="flying-high, cant-fly, rocket, or none.")
@click.pass_obj
def duck(
    app: AppContext,
    kind: str,
    sound: str | None,
    water: str | None,
    air: str | None,
) -> None:
    """Hatch a KIND of duck, swap behaviours, and perform them all."""
    overrides = {
        slot: name
        for slot, name in (("sound", sound), ("water", water), ("air", air))
        if name is not None
    }
    app.emit(BehavioralService(app.settings).perform_duck(kind, overrides))
