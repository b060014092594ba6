"""
foldkit Command Line Interface.

Runs reductions over values given on the command line.
"""

import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from foldkit.config import ConfigurationError, FoldkitConfig, LoggingConfig
from foldkit.core import Cont, FoldError, Halt, reduce, reduce_while, scan, trace_reduce
from foldkit.models import Move, Position
from foldkit.models.position import advance
from foldkit.reducers import ReducerSpec, get_registry
from foldkit.version import __version__

console = Console()

# Values such as "-2" or "-1,0" are arguments, not options
VALUE_ARGS = {"ignore_unknown_options": True}

logger = logging.getLogger(__name__)


def configure_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Configure the foldkit logger from configuration."""
    level = logging.DEBUG if verbose else getattr(logging, config.level.value)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    package_logger = logging.getLogger("foldkit")
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
        old.close()
    formatter = logging.Formatter(config.format)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def parse_value(token: str) -> Any:
    """Coerce a command line token to int or float where possible."""
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        return token


def _print_value(value: Any) -> None:
    console.print(repr(value), markup=False, highlight=False, soft_wrap=True)


def _fail(error: Exception | str) -> None:
    # KeyError quotes its message in str()
    if isinstance(error, KeyError) and error.args:
        message = str(error.args[0])
    else:
        message = str(error)
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(1)


def _resolve(ctx: click.Context, reducer: str | None, initial: str | None) -> tuple[ReducerSpec, Any]:
    """Pick the reducer and starting accumulator for a command."""
    config: FoldkitConfig = ctx.obj["config"]
    spec = get_registry().get(reducer or config.reducers.default)
    start = parse_value(initial) if initial is not None else spec.default_initial()
    logger.debug("Using reducer %s with initial %r", spec.name, start)
    return spec, start


@click.group()
@click.version_option(version=__version__, prog_name="foldkit")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """foldkit: reduce sequences to a single value.

    Values are given as arguments; numeric values are parsed as numbers.
    """
    from foldkit.config import load_config, load_config_from_env

    ctx.ensure_object(dict)
    try:
        config = load_config(config_path) if config_path else load_config_from_env()
    except (ConfigurationError, FileNotFoundError) as e:
        _fail(e)
        return

    verbose = verbose or config.debug
    configure_logging(config.logging, verbose)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


@main.command(name="reduce", context_settings=VALUE_ARGS)
@click.argument("values", nargs=-1)
@click.option("--reducer", "-r", type=str, default=None, help="Reducer name (see 'reducers')")
@click.option("--initial", "-i", type=str, default=None, help="Initial accumulator")
@click.option("--trace/--no-trace", default=None, help="Show every reduction step")
@click.pass_context
def reduce_command(
    ctx: click.Context,
    values: tuple[str, ...],
    reducer: str | None,
    initial: str | None,
    trace: bool | None,
) -> None:
    """Reduce VALUES to a single result."""
    config: FoldkitConfig = ctx.obj["config"]
    if trace is None:
        trace = config.trace.enabled

    try:
        spec, start = _resolve(ctx, reducer, initial)
        elements = [parse_value(v) for v in values]
        if not trace:
            _print_value(reduce(elements, start, spec.func))
            return

        result = trace_reduce(elements, start, spec.func, max_steps=config.trace.max_steps)
    except (FoldError, KeyError, ValueError, TypeError) as e:
        _fail(e)
        return

    table = Table(title=f"reduce ({spec.name})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Element", style="cyan")
    table.add_column("Accumulator", style="green")
    for row in result.to_rows():
        table.add_row(*row)
    console.print(table)
    if result.truncated:
        console.print(
            f"[yellow]Showing {result.recorded} of {result.step_count} steps[/yellow]"
        )
    console.print(f"[bold]Result:[/bold] {escape(repr(result.result))}", soft_wrap=True)


@main.command(name="scan", context_settings=VALUE_ARGS)
@click.argument("values", nargs=-1)
@click.option("--reducer", "-r", type=str, default=None, help="Reducer name (see 'reducers')")
@click.option("--initial", "-i", type=str, default=None, help="Initial accumulator")
@click.pass_context
def scan_command(
    ctx: click.Context,
    values: tuple[str, ...],
    reducer: str | None,
    initial: str | None,
) -> None:
    """Print every intermediate accumulator of reducing VALUES."""
    try:
        spec, start = _resolve(ctx, reducer, initial)
        accumulators = scan([parse_value(v) for v in values], start, spec.func)
    except (FoldError, KeyError, ValueError, TypeError) as e:
        _fail(e)
        return

    for acc in accumulators:
        _print_value(acc)


@main.command(name="reduce-while", context_settings=VALUE_ARGS)
@click.argument("values", nargs=-1)
@click.option("--limit", "-l", type=float, required=True, help="Stop before the accumulator exceeds this")
@click.option("--reducer", "-r", type=str, default=None, help="Reducer name (see 'reducers')")
@click.option("--initial", "-i", type=str, default=None, help="Initial accumulator")
@click.pass_context
def reduce_while_command(
    ctx: click.Context,
    values: tuple[str, ...],
    limit: float,
    reducer: str | None,
    initial: str | None,
) -> None:
    """Reduce VALUES until the next accumulator would exceed LIMIT."""
    consumed = 0

    try:
        spec, start = _resolve(ctx, reducer, initial)

        def bounded(element: Any, acc: Any):
            nonlocal consumed
            candidate = spec.func(element, acc)
            if candidate > limit:
                return Halt(acc)
            consumed += 1
            return Cont(candidate)

        result = reduce_while([parse_value(v) for v in values], start, bounded)
    except (FoldError, KeyError, ValueError, TypeError) as e:
        _fail(e)
        return

    _print_value(result)
    if ctx.obj.get("verbose"):
        console.print(f"[dim]Consumed {consumed} of {len(values)} values[/dim]")


def _read_moves(move_file: str | None, moves: tuple[str, ...]) -> list[Move]:
    texts = list(moves)
    if move_file:
        for line in Path(move_file).read_text().splitlines():
            line = line.split("#", 1)[0].strip()
            if line:
                texts.append(line)
    return [Move.parse(text) for text in texts]


@main.command(context_settings=VALUE_ARGS)
@click.argument("moves", nargs=-1)
@click.option(
    "--file",
    "-f",
    "move_file",
    type=click.Path(exists=True),
    help="File with one move per line",
)
@click.option("--trail", is_flag=True, help="Show the position after every move")
def walk(moves: tuple[str, ...], move_file: str | None, trail: bool) -> None:
    """Walk a grid from the origin and print the final position.

    MOVES are 'dx,dy' deltas or '<direction> [steps]' with directions
    up, down, left and right.
    """
    try:
        parsed = _read_moves(move_file, moves)
    except ValueError as e:
        _fail(e)
        return

    if trail:
        positions = scan(parsed, Position(), advance)
        table = Table(title="Walk")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Move", style="cyan")
        table.add_column("Position", style="green")
        for index, (step, position) in enumerate(zip(parsed, positions, strict=True)):
            table.add_row(str(index), f"{step.dx:+d},{step.dy:+d}", str(position))
        console.print(table)

    final = reduce(parsed, Position(), advance)
    console.print(f"[bold]Final position:[/bold] {final}")


@main.command()
def reducers() -> None:
    """List the available reducers."""
    table = Table(title="Reducers")
    table.add_column("Name", style="cyan")
    table.add_column("Initial", style="green")
    table.add_column("Description")
    for spec in get_registry().specs():
        table.add_row(spec.name, repr(spec.default_initial()), spec.description)
    console.print(table)


@main.command(name="config")
@click.pass_context
def config_command(ctx: click.Context) -> None:
    """Show the effective configuration."""
    from foldkit.config import get_loader

    config: FoldkitConfig = ctx.obj["config"]
    loader = get_loader()
    source = loader.loaded_from_path if loader and loader.loaded_from_path else "defaults"
    console.print(
        Panel(
            yaml.safe_dump(config.to_yaml_dict(), default_flow_style=False, sort_keys=False).rstrip(),
            title=f"foldkit configuration ({source})",
        )
    )


if __name__ == "__main__":
    main()
