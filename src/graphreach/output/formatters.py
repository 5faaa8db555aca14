"""Output mode selection for ServiceResult.

Three modes: ``--json`` (machine-readable), ``--quiet`` (bare answer),
and the default Rich rendering from :mod:`graphreach.output.renderers`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphreach.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from graphreach.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Rendering switches derived from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
