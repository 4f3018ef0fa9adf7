"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from wykop_api.core.domain.models import AuthorInfo, Dig, Link


def _author_text(info: AuthorInfo) -> Text:
    name = info.author or "-"
    group = info.user_group
    if group is None:
        return Text(name)
    return Text(name, style=group.color)


def build_links_table(links: Iterable[Link], *, title: str = "Links") -> Table:
    """Crea una tabla Rich para un listado de enlaces."""

    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Votes", style="green", justify="right")
    table.add_column("Comments", style="yellow", justify="right")
    table.add_column("Author")
    table.add_column("URL", style="magenta")
    for link in links:
        table.add_row(
            str(link.id) if link.id is not None else "-",
            link.title or "",
            str(link.vote_count),
            str(link.comment_count),
            _author_text(link),
            link.url or "",
        )
    return table


def build_link_panel(link: Link) -> Panel:
    """Panel con el detalle de un enlace (`link/index`)."""

    body = Text()
    body.append((link.title or "").strip() + "\n\n", style="bold")
    if link.description:
        body.append(link.description.strip() + "\n\n")
    body.append(f"Votes: {link.vote_count}  Comments: {link.comment_count}  Reports: {link.report_count}\n")
    if link.tags:
        body.append(f"Tags: {link.tags}\n", style="dim")
    if link.source_url:
        body.append(f"Source: {link.source_url}\n", style="magenta")
    body.append("Author: ")
    body.append_text(_author_text(link))
    return Panel(body, title=Text(f"#{link.id}", style="bold cyan"), border_style="cyan")


def build_digs_table(digs: Iterable[Dig]) -> Table:
    table = Table(title="Digs")
    table.add_column("Author")
    table.add_column("Group", style="dim")
    for dig in digs:
        group = dig.user_group
        table.add_row(_author_text(dig), group.display_name if group else "")
    return table
