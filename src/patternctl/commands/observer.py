"""Command group: publish/subscribe."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternGroup
from patternctl.domain.observer import NotificationCenter
from patternctl.services.behavioral import BehavioralService

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.group(
    cls=PatternGroup,
    examples="""\
  patternctl observer weather Toronto snow""",
)
@click.pass_obj
def observer(app: AppContext) -> None:
    """Broadcast events to subscribers."""


@observer.command(
    examples="""\
  patternctl observer weather Toronto snow
  patternctl observer weather Montreal sunny --apps 5"""
)
@click.argument("city")
@click.argument("condition")
@click.option("--apps", type=int, default=None, help="Subscribed apps (default from config).")
@click.pass_obj
def weather(app: AppContext, city: str, condition: str, apps: int | None) -> None:
    """Publish a weather report for CITY to every subscribed app."""
    service = BehavioralService(app.settings, bus=NotificationCenter.instance())
    app.emit(service.broadcast_weather(city, condition, apps=apps))
