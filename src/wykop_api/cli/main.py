"""CLI `wykop` (Typer + Rich).

Por qué una CLI fina:
- Toda la lógica vive en `Client` y los accesores; aquí solo se parsean
  opciones y se presenta el resultado.
- `--json` permite usarla en pipelines sin tablas Rich.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wykop_api.adapters.client import Client
from wykop_api.adapters.json_exporter import dump_json
from wykop_api.cli import doctor
from wykop_api.cli.ui_components import build_digs_table, build_link_panel, build_links_table
from wykop_api.core.config import AppSettings
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort
from wykop_api.core.errors import WykopError

app = typer.Typer(no_args_is_help=True, help="Client for the a.wykop.pl API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def build_client(settings: AppSettings) -> Client:
    return Client.from_settings(settings)


def _fail(exc: Exception) -> typer.Exit:
    _console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(code=1)


@contextmanager
def _open_client(ctx: typer.Context) -> Iterator[Client]:
    """Client for one command; API failures end the command with exit code 1."""

    settings: AppSettings = ctx.obj
    try:
        client = build_client(settings)
    except WykopError as exc:
        raise _fail(exc) from exc
    try:
        with client:
            yield client
    except (httpx.HTTPError, ValidationError) as exc:
        raise _fail(exc) from exc


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _fail(exc) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def promoted(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number."),
    sort: PromotedSort = typer.Option(PromotedSort.DAY, "--sort", "-s", help="Ordering."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List links from the main page."""

    with _open_client(ctx) as client:
        links = client.links().promoted(page, sort)
    if as_json:
        typer.echo(dump_json(links))
    else:
        _console.print(build_links_table(links, title=f"Promoted ({sort.value}, page {page})"))


@app.command()
def upcoming(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number."),
    sort: UpcomingSort = typer.Option(UpcomingSort.DATE, "--sort", "-s", help="Ordering."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List upcoming links."""

    with _open_client(ctx) as client:
        links = client.links().upcoming(page, sort)
    if as_json:
        typer.echo(dump_json(links))
    else:
        _console.print(build_links_table(links, title=f"Upcoming ({sort.value}, page {page})"))


@app.command()
def link(
    ctx: typer.Context,
    link_id: int = typer.Argument(..., metavar="ID", help="Link identifier."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """Show a single link (requires a user key)."""

    with _open_client(ctx) as client:
        result = client.link().index(link_id)
    if as_json:
        typer.echo(dump_json(result))
    else:
        _console.print(build_link_panel(result))


@app.command()
def digs(
    ctx: typer.Context,
    link_id: int = typer.Argument(..., metavar="ID", help="Link identifier."),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON."),
) -> None:
    """List users who dug a link."""

    with _open_client(ctx) as client:
        result = client.link().digs(link_id)
    if as_json:
        typer.echo(dump_json(result))
    else:
        _console.print(build_digs_table(result))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
