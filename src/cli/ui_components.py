"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import UsersResponse
from core.services.arithmetic import Number


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("fixture-kit", style="bold cyan")
    subtitle = Text("Fixtures puros • Accessor HTTP • Mocks", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_users_table(response: UsersResponse) -> Table:
    table = Table(title=f"Users ({len(response.data)})")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("First name", style="white")
    table.add_column("Last name", style="white")
    table.add_column("Email", style="magenta")
    for user in response.data:
        table.add_row(str(user.id), user.first_name, user.last_name, user.email)
    return table


def build_stats_table(
    values: Sequence[Number],
    *,
    total: Number,
    positive: Sequence[Number],
    negative: Sequence[Number],
) -> Table:
    """Tabla resumen para el comando `stats`."""

    def _fmt(items: Sequence[Number]) -> str:
        return "[" + ", ".join(str(v) for v in items) + "]"

    table = Table(title="Summary")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("input", _fmt(values))
    table.add_row("total", str(total))
    table.add_row("positive", _fmt(positive))
    table.add_row("negative", _fmt(negative))
    return table


def bool_badge(value: bool) -> Text:
    return Text("true", style="bold green") if value else Text("false", style="bold red")
