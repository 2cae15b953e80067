"""Output mode selection for ServiceResult.

The CLI renders a result for humans (Rich tables and key-value pairs),
as a single status line (``--quiet``), or for machines (``--json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from patternctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """The subset of CLI flags that affects rendering."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default human view.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from patternctl.output.renderers import render_quiet, render_result

    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
