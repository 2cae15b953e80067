"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands through
``@click.pass_obj``. Owns the plugin manager (loaded lazily) and
centralizes result emission: stdout on success, stderr plus exit code 1
on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patternctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings
    from patternctl.plugins.manager import PluginManager
    from patternctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins are discovered on first use so ``--help`` and ``--version``
    never touch entry points.
    """

    def __init__(self, settings: PatternSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from patternctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (entry points discovered on first access)."""
        if self._plugins is None:
            from patternctl.plugins.manager import PluginManager

            self._plugins = PluginManager()
            self._plugins.discover_and_load()
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they stay out of piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON payloads already carry their warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
