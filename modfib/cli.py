from __future__ import annotations

import logging
import sys

import typer

from .fibonacci import MOD
from .types import Variant
from .variants import default_registry, solve

app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.command("solve")
def cmd_solve(
    variant: Variant = typer.Option(Variant.MATRIX, "-v", "--variant", help="Implementation to run."),
    modulus: int = typer.Option(
        MOD, "-m", "--modulus", min=2, envvar="MODFIB_MODULUS", help="Modulus for the result."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """
    Read n from stdin and print Fib(n) mod the modulus.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        out = solve(sys.stdin.read(), variant, modulus=modulus)
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(out, nl=False)


@app.command("variants")
def cmd_variants() -> None:
    """List the implementations with their time and memory classes."""
    reg = default_registry()
    for name in reg.list():
        c = reg.complexity(name)
        typer.echo(f"{name:<8}{c.time:<10}{c.memory}")
