"""Ejecutor de requests: endpoint declarativo -> entidad tipada.

Pipeline (falla en el primer error, sin reintentos):
1) error del request en httpx (red, redirects, decoding) -> `TransportError`, el body no se toca
2) status no 2xx -> `UnexpectedStatus`
3) body vacío -> `EmptyBody`
4) body que no es un objeto JSON -> `UnexpectedResponseType`
5) `response_type.from_json(...)`; los errores de decodificación se propagan tal cual

`send` es la forma awaitable (lanza excepciones); `dispatch` es la forma
fire-and-forget: agenda una tarea y entrega exactamente un `APIResult` al
callback. Una tarea cancelada nunca invoca el callback.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from core.decoding import JSONObject, json_type_name
from core.errors import (
    EmptyBody,
    GitHubSearchError,
    TransportError,
    UnexpectedResponseType,
    UnexpectedStatus,
)
from core.interfaces.endpoint import APIEndpoint
from core.interfaces.trace import NullTrace, TraceSink

T = TypeVar("T")


@dataclass(frozen=True)
class APIResult(Generic[T]):
    """Éxito (`value`) xor fallo (`error`)."""

    value: T | None = None
    error: GitHubSearchError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("APIResult needs exactly one of value/error")

    @classmethod
    def success(cls, value: T) -> APIResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: GitHubSearchError) -> APIResult[T]:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def build_request(endpoint: APIEndpoint[Any], client: httpx.AsyncClient) -> httpx.Request:
    """Traduce el descriptor a un `httpx.Request` (URL + query + headers + método)."""

    query = dict(endpoint.query) if endpoint.query else None
    headers = dict(endpoint.headers) if endpoint.headers else None
    return client.build_request(
        endpoint.method.value,
        endpoint.url,
        params=query,
        headers=headers,
    )


def parse_body(content: bytes) -> dict[str, Any]:
    """Parsea el body como objeto JSON."""

    if not content:
        raise EmptyBody()
    try:
        payload = json.loads(content)
    except ValueError as exc:
        raise UnexpectedResponseType("invalid JSON") from exc
    if not isinstance(payload, dict):
        raise UnexpectedResponseType(json_type_name(payload))
    return payload


def _error_message(response: httpx.Response) -> str | None:
    # GitHub devuelve {"message": "...", "documentation_url": "..."} en errores.
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


async def send(
    endpoint: APIEndpoint[T],
    client: httpx.AsyncClient,
    *,
    trace: TraceSink | None = None,
) -> T:
    """Ejecuta el endpoint y devuelve la respuesta decodificada."""

    trace = trace or NullTrace()
    request = build_request(endpoint, client)
    trace.trace("api.send", method=request.method, url=str(request.url))

    try:
        response = await client.send(request)
    except httpx.RequestError as exc:
        # Incluye redirects infinitos y Content-Encoding inválido, no solo red.
        trace.debug("transport error", error=repr(exc))
        raise TransportError(exc) from exc

    trace.debug("response received", status_code=response.status_code, size=len(response.content))
    if not response.is_success:
        raise UnexpectedStatus(response.status_code, _error_message(response))

    payload = parse_body(response.content)
    result = endpoint.response_type.from_json(JSONObject(payload))
    trace.trace("api.send done", response_type=getattr(endpoint.response_type, "__name__", "?"))
    return result


def dispatch(
    endpoint: APIEndpoint[T],
    client: httpx.AsyncClient,
    callback: Callable[[APIResult[T]], None],
    *,
    trace: TraceSink | None = None,
) -> asyncio.Task[None]:
    """Agenda `send` en el loop actual y entrega un único `APIResult` a `callback`.

    Requiere un event loop en ejecución. Errores fuera de la jerarquía
    `GitHubSearchError` (bugs) no se convierten: quedan en la tarea.
    """

    async def run() -> None:
        try:
            value = await send(endpoint, client, trace=trace)
        except GitHubSearchError as exc:
            callback(APIResult.failure(exc))
            return
        callback(APIResult.success(value))

    return asyncio.create_task(run())
