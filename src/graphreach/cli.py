"""Root CLI group for graphreach with global flags and command registration."""

from __future__ import annotations

import click

from graphreach import __version__
from graphreach.commands import register_commands
from graphreach.commands._context import AppContext
from graphreach.config.settings import GraphreachSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="graphreach")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the answer.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and telemetry timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-g", "--graph", "graph_path", default=None, help="Graph document (JSON).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    graph_path: str | None,
    config_path: str | None,
) -> None:
    """graphreach — depth-first reachability queries over graph documents."""
    settings = GraphreachSettings.from_cli(
        config_path=config_path,
        graph_path=graph_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
