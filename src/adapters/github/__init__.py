"""Endpoints de la API de GitHub.

Por qué un paquete:
- Agrupa los descriptores declarativos de la API v3 (uno por recurso).
- El pipeline HTTP genérico vive en `adapters.api_client`.
"""

from adapters.github.endpoints import (
    GITHUB_ACCEPT_HEADER,
    GITHUB_API_URL,
    GitHubEndpoint,
    SearchRepositories,
)

__all__ = [
    "GITHUB_ACCEPT_HEADER",
    "GITHUB_API_URL",
    "GitHubEndpoint",
    "SearchRepositories",
]
