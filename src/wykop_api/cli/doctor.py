"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from wykop_api.adapters.http_client import build_http_client
from wykop_api.core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    url = f"{settings.scheme}://{settings.host}/"
    try:
        with build_http_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="wykop-api Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.app_key:
        table.add_row("App key", "OK", "WYKOP_APP_KEY set")
    else:
        table.add_row("App key", "MISSING", "Run `wykop doctor setup` or set WYKOP_APP_KEY")
    if settings.user_key:
        table.add_row("User key", "OK", "Authenticated methods enabled")
    else:
        table.add_row("User key", "OPTIONAL", "No key set -> `wykop link` will be rejected by the API")
    table.add_row("Base URL", "OK", f"{settings.scheme}://{settings.host}")
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not settings.app_key:
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive key setup (stores config in the user config .env)."""

    app_key = typer.prompt("App key").strip()
    user_key = typer.prompt("User key (optional)", default="", show_default=False, hide_input=True).strip()

    if not app_key:
        raise typer.BadParameter("app key is required")

    env_path = write_user_env_vars(
        {
            "WYKOP_APP_KEY": app_key,
            "WYKOP_USER_KEY": user_key or None,
        }
    )

    _console.print(f"[green]Saved keys to:[/green] {env_path}")
