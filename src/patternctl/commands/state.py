"""Command group: state machines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.services.behavioral import BehavioralService

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext

_STATE_EXAMPLES = """\
  patternctl state gumball insert_coin turn_crank
  patternctl state player 3
  patternctl state traffic 4"""


@click.group(cls=PatternGroup, examples=_STATE_EXAMPLES)
@click.pass_obj
def state(app: AppContext) -> None:
    """Drive the state-pattern machines."""


@state.command(
    examples="""\
  patternctl state gumball insert_coin turn_crank
  patternctl state gumball --count 1 insert_coin turn_crank insert_coin
  patternctl state gumball --count 0 refill=5 insert_coin eject_coin"""
)
@click.argument("events", nargs=-1, required=True)
@click.option("--count", type=int, default=None, help="Initial gumballs (default from config).")
@click.pass_obj
def gumball(app: AppContext, events: tuple[str, ...], count: int | None) -> None:
    """Send EVENTS to a gumball machine (use refill=N to add gumballs)."""
    app.emit(BehavioralService(app.settings).run_gumball(list(events), count=count))


@state.command(
    examples="""\
  patternctl state player 1
  patternctl --json state player 4"""
)
@click.argument("presses", type=int)
@click.pass_obj
def player(app: AppContext, presses: int) -> None:
    """Press play PRESSES times on the MP3 player."""
    app.emit(BehavioralService(app.settings).toggle_player(presses))


@state.command(
    examples="""\
  patternctl state traffic 3"""
)
@click.argument("steps", type=int)
@click.pass_obj
def traffic(app: AppContext, steps: int) -> None:
    """Advance the traffic light STEPS times."""
    app.emit(BehavioralService(app.settings).cycle_traffic(steps))
