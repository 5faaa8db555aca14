"""Command group: reachability queries over a graph document."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from collections.abc import Callable

    from graphreach.commands._context import AppContext

_REACH_EXAMPLES = """\
  graphreach -g graph.json reach odd-count 5
  graphreach -g graph.json reach sorted 5
  graphreach -g graph.json reach sorted 5 --map
  graphreach -g graph.json reach two-way 4 7
  graphreach -g graph.json reach positive-path 1 3
  graphreach -g people.json reach network-search alice Initech"""


def examples_option[F: Callable[..., object]](text: str) -> Callable[[F], F]:
    """Eager ``--examples`` flag: print *text* and exit before any graph loads.

    Keeps ``--help`` short while each command still ships runnable examples.
    """

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples.",
    )


@click.group()
@examples_option(_REACH_EXAMPLES)
def reach() -> None:
    """Run depth-first reachability queries against a graph document."""


@reach.command("odd-count")
@examples_option(
    """\
  graphreach -g graph.json reach odd-count 5
  graphreach --json -g graph.json reach odd-count 5"""
)
@click.argument("start")
@click.pass_obj
def odd_count(app: AppContext, start: str) -> None:
    """Count odd-valued vertices reachable from START."""
    app.emit(app.reachability("odd_vertices").odd_vertices(start))


@reach.command("sorted")
@examples_option(
    """\
  graphreach -g graph.json reach sorted 5
  graphreach -g graph.json reach sorted 5 --map
  graphreach -q -g graph.json reach sorted 5"""
)
@click.argument("start")
@click.option(
    "--map",
    "use_map",
    is_flag=True,
    help="Walk the adjacency map (integer ids) instead of the vertex graph.",
)
@click.pass_obj
def sorted_values(app: AppContext, start: str, use_map: bool) -> None:
    """List every value reachable from START in ascending order."""
    if not use_map:
        app.emit(app.reachability("sorted_reachable").sorted_reachable(start))
        return
    try:
        start_id = int(start)
    except ValueError:
        raise click.BadParameter("must be an integer with --map", param_hint="START") from None
    app.emit(app.reachability("sorted_reachable_map").sorted_reachable_in_map(start_id))


@reach.command("two-way")
@examples_option(
    """\
  graphreach -g graph.json reach two-way 4 7
  graphreach -q -g graph.json reach two-way a b"""
)
@click.argument("first")
@click.argument("second")
@click.pass_obj
def two_way(app: AppContext, first: str, second: str) -> None:
    """Check that FIRST and SECOND can each reach the other."""
    app.emit(app.reachability("two_way").two_way(first, second))


@reach.command("positive-path")
@examples_option(
    """\
  graphreach -g graph.json reach positive-path 1 3
  graphreach -g graph.json reach positive-path -- -1 3"""
)
@click.argument("start", type=int)
@click.argument("end", type=int)
@click.pass_obj
def positive_path(app: AppContext, start: int, end: int) -> None:
    """Check for a strictly increasing path of positive ids from START to END."""
    app.emit(app.reachability("positive_path").positive_path(start, end))


@reach.command("network-search")
@examples_option(
    """\
  graphreach -g people.json reach network-search alice Initech
  graphreach --json -g people.json reach network-search 1 Acme"""
)
@click.argument("start")
@click.argument("company")
@click.pass_obj
def network_search(app: AppContext, start: str, company: str) -> None:
    """Check whether anyone in START's extended network works at COMPANY."""
    app.emit(app.reachability("network_search").network_search(start, company))
