"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Repository, SearchResult


def build_repositories_table(result: SearchResult[Repository], *, page: int | None = None) -> Table:
    """Tabla con una fila por repositorio (equivalente a la vista maestra)."""

    title = f"Repositories ({result.total_count} total"
    if page is not None:
        title += f", page {page}"
    title += ")"

    table = Table(title=title)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Repository", style="cyan", no_wrap=True)
    table.add_column("Stars", style="yellow", justify="right")
    table.add_column("Language", style="white")
    table.add_column("Updated", style="green")
    table.add_column("URL", style="magenta")

    for index, repo in enumerate(result.items, start=1):
        table.add_row(
            str(index),
            repo.full_name,
            str(repo.stargazers_count),
            repo.language or "-",
            repo.updated_at.strftime("%Y-%m-%d"),
            str(repo.html_url),
        )
    return table


def build_repository_panel(repo: Repository) -> Panel:
    """Panel de detalle de un repositorio (equivalente a la vista de detalle)."""

    body = Text()
    if repo.description:
        body.append(repo.description.strip() + "\n\n")

    rows = [
        ("Owner", f"{repo.owner.login} ({repo.owner.type})"),
        ("URL", str(repo.html_url)),
        ("Homepage", repo.homepage or "-"),
        ("Language", repo.language or "-"),
        ("Default branch", repo.default_branch),
        ("Stars / Watchers / Forks", f"{repo.stargazers_count} / {repo.watchers_count} / {repo.forks_count}"),
        ("Open issues", str(repo.open_issues_count)),
        ("Size", f"{repo.size} KB"),
        ("Created", repo.created_at.isoformat()),
        ("Updated", repo.updated_at.isoformat()),
        ("Pushed", repo.pushed_at.isoformat() if repo.pushed_at else "-"),
        ("Fork", "yes" if repo.fork else "no"),
        ("Private", "yes" if repo.private else "no"),
        ("Score", f"{repo.score:.2f}"),
    ]
    for label, value in rows:
        body.append(f"{label}: ", style="bold")
        body.append(f"{value}\n")

    title = Text(repo.full_name, style="bold cyan")
    return Panel(body, title=title, border_style="cyan")
