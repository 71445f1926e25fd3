"""Caso de uso: buscar repositorios en GitHub.

Este módulo reúne el flujo completo (config -> endpoint -> request ->
decodificación) para que la CLI, los tests o futuros entry-points lo
reutilicen sin conocer httpx. Los efectos de UI (tablas, prints) quedan fuera.
"""

from __future__ import annotations

import httpx

from adapters.api_client import send
from adapters.github import SearchRepositories
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Repository, SearchResult
from core.interfaces.trace import NullTrace, TraceSink


def build_search_endpoint(query: str, page: int, settings: AppSettings) -> SearchRepositories:
    """Crea el descriptor aplicando origen y `Accept` de la configuración."""

    return SearchRepositories(
        query,
        page,
        base_url=settings.api_base_url,
        accept=settings.accept_header,
    )


async def search_repositories(
    query: str,
    *,
    page: int | None = None,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
    trace: TraceSink | None = None,
) -> SearchResult[Repository]:
    """Devuelve una página de resultados de `search/repositories`.

    - Si no se pasa `client`, se crea uno propio y se cierra al terminar.
    - Los errores (`APIError`, `JSONDecodeError`) se propagan sin cambios.
    """

    if not query.strip():
        raise ValueError("search query must not be empty")

    settings = settings or AppSettings()
    trace = trace or NullTrace()
    endpoint = build_search_endpoint(query, page or settings.default_page, settings)
    trace.trace("search_repositories", query=query, page=endpoint.page)

    if client is not None:
        result = await send(endpoint, client, trace=trace)
    else:
        async with build_async_client(settings) as owned_client:
            result = await send(endpoint, owned_client, trace=trace)

    trace.debug("search done", total_count=result.total_count, items=len(result.items))
    return result
