"""CLI for the pocketcalc calculator.

Usage:
    python -m pocketcalc repl                    # Interactive session, 'q' quits
    python -m pocketcalc repl --keep             # Keep state between lines
    python -m pocketcalc eval "2+(3x4)"          # One-shot expression
    python -m pocketcalc eval "2+3x4" --verbose  # Show strategy and tokens
    python -m pocketcalc keys 6 + 3 =            # Replay key presses
"""

from __future__ import annotations

import json
from typing import List

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pocketcalc.calculator import Calculator
from pocketcalc.config import Settings
from pocketcalc.evaluator import CalculatorError, select_strategy, tokenize

app = typer.Typer(
    name="pocketcalc",
    help="Pocket calculator with a text expression evaluator",
    no_args_is_help=True,
)
console = Console(stderr=True)

_QUIT = ("q", "Q")


def render_history(history: tuple[str, ...], console: Console) -> None:
    """Render the session history as a Rich table."""
    if not history:
        console.print("[dim]No calculations this session.[/dim]")
        return

    table = Table(title="History", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Display", justify="right", style="green")
    for i, entry in enumerate(history, start=1):
        table.add_row(str(i), entry)
    console.print(table)


@app.command("repl")
def cmd_repl(
    keep: bool = typer.Option(False, "--keep", "-k", help="Don't clear the calculator between lines"),
    show_history: bool = typer.Option(True, "--history/--no-history", help="Print the history table on exit"),
) -> None:
    """Read expressions line by line until 'q'."""
    settings = Settings.from_env()
    calc = Calculator(settings)

    while True:
        try:
            line = typer.prompt(settings.prompt, default="", show_default=False, prompt_suffix=": ")
        except (EOFError, typer.Abort):
            break
        if line.strip() in _QUIT:
            break
        if not line.strip():
            continue

        try:
            calc.parse_and_calculate(line)
            typer.echo(f"Result: {calc.read_screen()}")
        except CalculatorError as e:
            console.print(f"[red]Invalid expression:[/red] {escape(str(e))}")

        if not keep:
            calc.press_clear_key()

    console.print("Session ended.")
    if show_history:
        render_history(calc.history, console)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression, e.g. '2+(3x4)'"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show strategy and tokens"),
    as_json: bool = typer.Option(False, "--json", help="Print the evaluation as JSON"),
) -> None:
    """Evaluate a single expression."""
    calc = Calculator(Settings.from_env())

    if verbose:
        text = expression.replace(" ", "")
        console.print(f"[dim]strategy: {select_strategy(text).value}[/dim]")
        try:
            console.print(f"[dim]tokens: {' '.join(str(t) for t in tokenize(text))}[/dim]")
        except CalculatorError:
            console.print("[dim]tokens: (unparsable)[/dim]")

    try:
        evaluation = calc.parse_and_calculate(expression)
    except CalculatorError as e:
        console.print(f"[red]Invalid expression:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(evaluation.to_dict(), indent=2))
    else:
        typer.echo(evaluation.display)


@app.command("keys")
def cmd_keys(
    keys: List[str] = typer.Argument(help="Key labels: 0-9 . +/- + - x / √ % 1/x = C"),
) -> None:
    """Press keys on a fresh calculator and print the display."""
    calc = Calculator(Settings.from_env())
    for key in keys:
        try:
            calc.press_key(key)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(1)
    typer.echo(calc.read_screen())


if __name__ == "__main__":
    app()
