"""CLI principal (Typer).

Comandos finos: parsean argumentos, delegan en `core.services` / `adapters`
y pintan con Rich. Nada de lógica de negocio aquí.
"""

from __future__ import annotations

import asyncio
from enum import Enum
from pathlib import Path

import httpx
import typer
from rich.console import Console

from adapters.fake_http import StaticGetter
from adapters.json_exporter import export_users_json, users_to_json
from adapters.users_api import Users
from cli import doctor
from cli.ui_components import bool_badge, build_stats_table, build_users_table, print_banner
from core.config import AppSettings
from core.errors import FixtureKitError
from core.logging import configure_logging
from core.resources_loader import load_sample_users
from core.services import arithmetic, stats, text_relations
from core.services.arithmetic import Number

app = typer.Typer(
    no_args_is_help=True,
    help="Pure fixture modules and a mockable users API client.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


class Operation(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


_OPERATIONS = {
    Operation.ADD: arithmetic.add,
    Operation.SUB: arithmetic.sub,
    Operation.MUL: arithmetic.mul,
    Operation.DIV: arithmetic.div,
}


def parse_number(text: str) -> Number:
    """`"3"` -> 3, `"2.5"` -> 2.5; anything else is a bad parameter."""

    value = text.strip()
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        raise typer.BadParameter(f"not a number: {text!r}") from None


def _parse_numbers(raw: list[str]) -> list[Number]:
    # Acepta "1 2 3" y también "1,2,3".
    out: list[Number] = []
    for chunk in raw:
        for part in chunk.split(","):
            if part.strip():
                out.append(parse_number(part))
    return out


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Verbose logging with source paths."),
    banner: bool = typer.Option(False, "--banner", help="Print the welcome banner."),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level, debug=debug)
    if banner:
        print_banner(_console)


@app.command()
def calc(
    operation: Operation = typer.Argument(..., help="add | sub | mul | div"),
    a: str = typer.Argument(..., help="Left operand."),
    b: str = typer.Argument(..., help="Right operand."),
) -> None:
    """Apply an arithmetic operation to two numbers."""

    result = _OPERATIONS[operation](parse_number(a), parse_number(b))
    _console.print(str(result))


@app.command(name="stats")
def stats_cmd(
    values: list[str] = typer.Argument(..., help="Numbers (use `--` before negatives)."),
) -> None:
    """Total, positive and negative elements of a list of numbers."""

    numbers = _parse_numbers(values)
    table = build_stats_table(
        numbers,
        total=stats.total(numbers),
        positive=stats.positive(numbers),
        negative=stats.negative(numbers),
    )
    _console.print(table)


@app.command()
def palindrome(text: str = typer.Argument(..., help="Text to check.")) -> None:
    """Check whether TEXT reads the same in both directions (case-sensitive)."""

    _console.print(bool_badge(text_relations.is_palindrome(text)))


@app.command()
def anagram(
    first: str = typer.Argument(...),
    second: str = typer.Argument(...),
) -> None:
    """Check whether FIRST and SECOND use the same characters (case-sensitive)."""

    _console.print(bool_badge(text_relations.is_anagram(first, second)))


@app.command()
def users(
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    offline: bool = typer.Option(False, "--offline", help="Use the bundled sample users."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write JSON to this file."),
) -> None:
    """Fetch every user from the REST endpoint."""

    settings = AppSettings()
    getter = StaticGetter(load_sample_users()) if offline else None
    client = Users(getter, settings=settings)

    try:
        response = asyncio.run(client.all())
    except httpx.HTTPStatusError as exc:
        _err_console.print(f"[red]HTTP {exc.response.status_code}[/red] from {client.url}")
        raise typer.Exit(code=1) from exc
    except (httpx.HTTPError, FixtureKitError) as exc:
        _err_console.print(f"[red]Request failed:[/red] {exc or type(exc).__name__}")
        raise typer.Exit(code=1) from exc

    if output is not None:
        export_users_json(response=response, output_path=output)
        _err_console.print(f"[green]Saved:[/green] {output}")

    if as_json:
        typer.echo(users_to_json(response), nl=False)
    else:
        _console.print(build_users_table(response))


def run() -> None:
    app()
