"""Command: list the patterns in the catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.commands._base import PatternCommand

if TYPE_CHECKING:
    from patternctl.commands._context import AppContext


@click.command(
    cls=PatternCommand,
    examples="""\
  patternctl catalog
  patternctl catalog --category behavioral
  patternctl --json catalog""",
)
@click.option(
    "--category",
    type=click.Choice(["creational", "structural", "behavioral"]),
    default=None,
    help="Only list patterns in this category.",
)
@click.pass_obj
def catalog(app: AppContext, category: str | None) -> None:
    """List the patterns and the command that runs each scenario."""
    from patternctl.services.catalog import CatalogService

    app.emit(CatalogService(app.settings).list_patterns(category=category))
