#!filepath: funclab/cli.py
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from funclab import __version__
from funclab.accumulator import make_accumulators
from funclab.callbacks import fetch_with_callback
from funclab.config.app_config import AppConfig
from funclab.operations.factory import make_multiplier
from funclab.operations.registry import apply_via_higher_order, build_default_registry
from funclab.utils.errors import OperationNotFoundError
from funclab.utils.intmath import OverflowPolicy
from funclab.utils.logger import init_logging

app = typer.Typer(help="funclab: closures, accumulators and operation dispatch")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML config (defaults to the packaged base.yml)"
    ),
):
    cfg = AppConfig.load(config)
    init_logging(cfg.log)
    ctx.obj = cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def accumulate(
    ctx: typer.Context,
    initial: Optional[int] = typer.Option(None, help="initial state of every accumulator"),
    times: int = typer.Option(2, min=0, help="invocations per accumulator"),
    instances: int = typer.Option(2, min=0, help="number of independent accumulators"),
    policy: Optional[OverflowPolicy] = typer.Option(None, help="integer overflow policy"),
):
    """
    Build independent accumulators and invoke each one several times
    """
    acc_cfg = ctx.obj.accumulator
    start = acc_cfg.initial_state if initial is None else initial

    accumulators = make_accumulators(
        instances,
        start,
        constants=acc_cfg.shared_constants(),
        policy=policy or acc_cfg.policy,
    )

    for idx, acc in enumerate(accumulators, start=1):
        for _ in range(times):
            print(f"[green]accumulator#{idx}[/green] {acc()}")


@app.command()
def ops():
    """
    List registered operation names (insertion order)
    """
    for name in build_default_registry().names():
        print(name)


@app.command()
def dispatch(name: str, a: int, b: int):
    """
    Call an operation by name
    """
    registry = build_default_registry()
    try:
        result = registry.dispatch(name, a, b)
    except OperationNotFoundError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    print(f"{name}({a}, {b}) = {result}")


@app.command()
def apply(name: str, a: int, b: int):
    """
    Look an operation up, then pass it to the higher-order applier
    """
    registry = build_default_registry()
    try:
        operation = registry.get(name)
    except OperationNotFoundError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    print(f"apply({a}, {b}, {name}) = {apply_via_higher_order(a, b, operation)}")


@app.command()
def multiplier(factor: int, value: int):
    print(f"{value} * {factor} = {make_multiplier(factor)(value)}")


@app.command()
def fetch(item_id: int):
    """
    Fetch with a callback that prints what it receives
    """
    fetch_with_callback(item_id, lambda data: print(f"[yellow]Received:[/yellow] {data}"))


if __name__ == "__main__":
    app()

# python -m funclab.cli dispatch add 5 3
