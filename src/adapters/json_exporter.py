"""Exportación JSON de páginas de búsqueda.

Por qué un sobre (`query`, `page`, `exported_at`, `result`):
- Una página suelta no dice de qué búsqueda salió; sin la query no se puede
  repetir ni comparar con otra exportación.
- `result` conserva la forma de la API (`total_count`, `items`...), así que
  otras herramientas pueden leerlo sin conocer el sobre.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from core.decoding import GITHUB_TIMESTAMP_FORMAT
from core.domain.models import Repository, SearchResult

EXPORT_FORMAT_VERSION = 1


def build_search_export(
    *,
    result: SearchResult[Repository],
    query: str,
    page: int,
    exported_at: datetime | None = None,
) -> dict[str, Any]:
    exported_at = exported_at or datetime.now(timezone.utc)
    return {
        "format_version": EXPORT_FORMAT_VERSION,
        "query": query,
        "page": page,
        "exported_at": exported_at.astimezone(timezone.utc).strftime(GITHUB_TIMESTAMP_FORMAT),
        "result": result.model_dump(mode="json"),
    }


def export_search_result_json(
    *,
    result: SearchResult[Repository],
    query: str,
    page: int,
    output_path: Path,
    exported_at: datetime | None = None,
) -> Path:
    """Escribe el sobre de exportación como JSON UTF-8 con claves ordenadas."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = build_search_export(result=result, query=query, page=page, exported_at=exported_at)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
