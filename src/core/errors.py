"""Jerarquía de errores tipados.

Por qué una jerarquía propia:
- Los errores son valores recuperables: la CLI (o cualquier otro borde) decide
  cómo presentarlos sin tener que conocer httpx ni el parser JSON.
- Cada capa falla en el primer error y lo propaga sin modificarlo.

Familias:
- `JSONDecodeError`: fallos al decodificar un objeto JSON en una entidad.
- `APIError`: fallos del pipeline request/response.
"""

from __future__ import annotations

from typing import Any


class GitHubSearchError(Exception):
    """Base de todos los errores de la aplicación."""


class JSONDecodeError(GitHubSearchError):
    """Un campo del JSON no pudo convertirse al tipo pedido."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class MissingRequiredKey(JSONDecodeError):
    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing required key '{key}'")


class UnexpectedType(JSONDecodeError):
    """El valor existe pero su representación JSON no es la esperada."""

    def __init__(self, key: str, expected: str, actual: str) -> None:
        super().__init__(key, f"Unexpected type for '{key}': expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class UnexpectedValue(JSONDecodeError):
    """El valor tiene el tipo correcto pero es semánticamente inválido."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        super().__init__(key, f"Unexpected value for '{key}' ({value!r}): {reason}")
        self.value = value
        self.reason = reason


class APIError(GitHubSearchError):
    """Fallo del pipeline HTTP (antes de llegar a decodificar)."""


class EmptyBody(APIError):
    def __init__(self) -> None:
        super().__init__("Response has no body")


class UnexpectedResponseType(APIError):
    """El body no es JSON, o es JSON pero no un objeto."""

    def __init__(self, actual: str) -> None:
        super().__init__(f"Unexpected response type: expected object, got {actual}")
        self.actual = actual


class UnexpectedStatus(APIError):
    def __init__(self, status_code: int, message: str | None = None) -> None:
        detail = f": {message}" if message else ""
        super().__init__(f"Unexpected HTTP status {status_code}{detail}")
        self.status_code = status_code
        self.message = message


class TransportError(APIError):
    """Envuelve el error reportado por el transporte (DNS, TLS, timeout...)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Transport error: {cause}")
        self.cause = cause
