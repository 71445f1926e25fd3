"""CLI principal (Typer).

Comandos:
- `search`: una página de resultados como tabla o JSON.
- `show`: detalle de un repositorio de la página.
- `doctor`: diagnóstico de configuración/conectividad.

La CLI es el único borde que decide qué hacer con los errores: los imprime y
sale con código 1.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_search_result_json
from adapters.log_trace import LoggingTrace
from cli import doctor
from cli.ui_components import build_repositories_table, build_repository_panel
from core.config import AppSettings
from core.domain.models import Repository, SearchResult
from core.errors import GitHubSearchError
from core.services.repository_search import search_repositories

app = typer.Typer(no_args_is_help=True, help="Search GitHub repositories from the terminal.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(settings: AppSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _fetch(query: str, page: int | None, verbose: bool) -> tuple[SearchResult[Repository], int]:
    settings = _load_settings()
    _configure_logging(settings, verbose)
    page = page or settings.default_page
    try:
        result = asyncio.run(
            search_repositories(query, page=page, settings=settings, trace=LoggingTrace())
        )
    except GitHubSearchError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    return result, page


@app.command()
def search(
    query: str = typer.Argument(..., help="GitHub search query (e.g. 'language:python httpx')."),
    page: int | None = typer.Option(None, "--page", "-p", min=1, help="Result page (1-based)."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw decoded result as JSON."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Search repositories and print one page of results."""

    if not query.strip():
        raise typer.BadParameter("query must not be empty")

    result, page = _fetch(query, page, verbose)

    if output is not None:
        path = export_search_result_json(result=result, query=query, page=page, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return

    _console.print(build_repositories_table(result, page=page))
    if result.incomplete_results:
        _console.print("[yellow]Note:[/yellow] GitHub reported incomplete results for this query.")


@app.command()
def show(
    query: str = typer.Argument(..., help="GitHub search query."),
    index: int = typer.Argument(..., min=1, help="Position of the repository in the page (1-based)."),
    page: int | None = typer.Option(None, "--page", "-p", min=1, help="Result page (1-based)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Show the details of one repository from a result page."""

    if not query.strip():
        raise typer.BadParameter("query must not be empty")

    result, _ = _fetch(query, page, verbose)
    if index > len(result.items):
        _console.print(f"[red]Error:[/red] page has only {len(result.items)} repositories")
        raise typer.Exit(code=1)

    _console.print(build_repository_panel(result.items[index - 1]))


def run() -> None:
    app()
