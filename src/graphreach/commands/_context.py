"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Loads the graph document lazily (so ``--help`` and
``--examples`` never touch the filesystem) and centralizes result
emission: stdout/stderr routing and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from graphreach.infrastructure.graph.engine import GraphEngine
from graphreach.infrastructure.loader import GraphLoadError, load_document
from graphreach.output.formatters import OutputSettings, format_result
from graphreach.services.reachability import ReachabilityService
from graphreach.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from graphreach.config.settings import GraphreachSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: GraphreachSettings) -> None:
        self.settings = settings
        self._engine: GraphEngine | None = None

        from graphreach.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from graphreach.services.telemetry import enable_telemetry

            enable_telemetry()

    def reachability(self, op: str) -> ReachabilityService:
        """A ReachabilityService over the configured graph document.

        Emits a failure for *op* and exits when no document is configured
        or the document cannot be loaded.
        """
        if self._engine is None:
            self._engine = self._load_engine(op)
        return ReachabilityService(self._engine)

    def _load_engine(self, op: str) -> GraphEngine:
        path = self.settings.resolve_graph_path()
        if path is None:
            self.fail(
                ServiceResult.failure(
                    op,
                    ErrorCode.GRAPH_NOT_CONFIGURED,
                    "No graph document: pass --graph or set [graph] path in graphreach.toml",
                )
            )
        try:
            document = load_document(path)
        except GraphLoadError as exc:
            self.fail(
                ServiceResult.failure(op, ErrorCode.INVALID_GRAPH, exc.message, path=str(exc.path))
            )
        return GraphEngine(document)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr in human and
          quiet modes; JSON mode already carries them in the payload.
        * Failure: see :meth:`fail`.
        """
        if not result.ok:
            self.fail(result)

        settings = self._output_settings()
        click.echo(format_result(result, settings=settings))
        if settings.quiet and not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)
        raise SystemExit(1)
