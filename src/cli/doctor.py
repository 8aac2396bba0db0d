"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.users_api import Users
from core.config import AppSettings, write_user_env_vars
from core.errors import FixtureKitError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_users(settings: AppSettings) -> tuple[bool, str]:
    try:
        response = await Users(settings=settings).all()
    except httpx.HTTPStatusError as exc:
        return False, f"HTTP {exc.response.status_code}"
    except (httpx.HTTPError, FixtureKitError) as exc:
        return False, str(exc) or type(exc).__name__
    return True, f"HTTP {response.status_code}, {len(response.data)} users"


@app.command()
def run() -> None:
    """Show the effective configuration and probe the users endpoint."""

    settings = AppSettings()

    table = Table(title="fixture-kit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Users URL", "OK", settings.users_url)
    timeout = settings.http_timeout_seconds
    table.add_row("HTTP timeout", "OK", "none" if timeout is None else f"{timeout:g}s")
    table.add_row("Log level", "OK", settings.log_level)

    # Connectivity (best-effort)
    ok_users, detail_users = asyncio.run(_check_users(settings))
    table.add_row("Users endpoint", "OK" if ok_users else "FAIL", detail_users)

    _console.print(table)

    if not ok_users:
        _console.print(
            "\n[yellow]Note:[/yellow] start a mock REST server on the URL above "
            "or use `fixture-kit users --offline`."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-api")
def setup_api() -> None:
    """Interactive API setup (stores config in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.api_base_url, show_default=True).strip()
    users_path = typer.prompt("Users path", default=settings.users_path, show_default=True).strip()

    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("base URL must start with http:// or https://")

    env_path = write_user_env_vars(
        {
            "FIXTURE_KIT_API_BASE_URL": base_url,
            "FIXTURE_KIT_USERS_PATH": users_path or "/users",
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
