"""Descriptores de endpoints de la API v3 de GitHub.

Cada endpoint es un valor inmutable: se crea por request y se descarta.
Implementan `core.interfaces.endpoint.APIEndpoint`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import urljoin

from core.domain.models import Repository, SearchResult
from core.interfaces.endpoint import HTTPMethod

ResponseT = TypeVar("ResponseT")

GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT_HEADER = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class GitHubEndpoint(Generic[ResponseT]):
    """Base de endpoints de GitHub.

    - `path` se resuelve contra `base_url` (por defecto `https://api.github.com`).
    - Todos envían `Accept: application/vnd.github.v3+json` salvo que
      `extra_headers` lo sobrescriba.
    """

    path: ClassVar[str] = ""
    method: ClassVar[HTTPMethod] = HTTPMethod.GET
    response_type: ClassVar[type[Any]]

    base_url: str = field(default=GITHUB_API_URL, kw_only=True)
    accept: str = field(default=GITHUB_ACCEPT_HEADER, kw_only=True)
    extra_headers: Mapping[str, str] | None = field(default=None, kw_only=True)

    @property
    def url(self) -> str:
        return urljoin(self.base_url.rstrip("/") + "/", self.path)

    @property
    def query(self) -> Mapping[str, str] | None:
        return None

    @property
    def headers(self) -> Mapping[str, str] | None:
        headers = {"Accept": self.accept}
        for name, value in (self.extra_headers or {}).items():
            # Los nombres de header no distinguen mayúsculas.
            for existing in [k for k in headers if k.lower() == name.lower()]:
                del headers[existing]
            headers[name] = value
        return headers


@dataclass(frozen=True)
class SearchRepositories(GitHubEndpoint[SearchResult[Repository]]):
    """`GET /search/repositories?q=<query>&page=<page>`."""

    path: ClassVar[str] = "search/repositories"
    response_type: ClassVar[type[Any]] = SearchResult[Repository]

    search_query: str
    page: int = 1

    @property
    def query(self) -> Mapping[str, str] | None:
        return {"q": self.search_query, "page": str(self.page)}
