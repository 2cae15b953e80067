"""Subcommand modules for patternctl.

register_commands() imports each module inside the function body so that
``patternctl --help`` only loads what it lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from patternctl.commands.adapter import adapter
    from patternctl.commands.decorator import decorator
    from patternctl.commands.facade import facade
    from patternctl.commands.factory import factory
    from patternctl.commands.observer import observer
    from patternctl.commands.state import state
    from patternctl.commands.strategy import strategy

    cli.add_command(factory)
    cli.add_command(state)
    cli.add_command(strategy)
    cli.add_command(decorator)
    cli.add_command(facade)
    cli.add_command(observer)
    cli.add_command(adapter)

    # --- Standalone commands ---
    from patternctl.commands.catalog import catalog
    from patternctl.commands.remote import remote
    from patternctl.commands.singleton import singleton

    cli.add_command(catalog)
    cli.add_command(singleton)
    cli.add_command(remote)
