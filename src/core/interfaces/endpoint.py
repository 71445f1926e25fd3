"""Contrato de endpoint declarativo.

Un endpoint describe *qué* pedir (URL, método, query, headers) y *qué* forma
tiene la respuesta (`response_type`). El *cómo* (httpx) vive en
`adapters.api_client`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

ResponseT = TypeVar("ResponseT")


class HTTPMethod(str, Enum):
    OPTIONS = "OPTIONS"
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


@runtime_checkable
class APIEndpoint(Protocol[ResponseT]):
    """Descriptor inmutable de un recurso HTTP.

    - `url`: URL absoluta sin query string.
    - `query` / `headers`: `None` significa "sin valores".
    - `response_type`: tipo `JSONDecodable` de la respuesta.
    """

    @property
    def url(self) -> str:
        ...

    @property
    def method(self) -> HTTPMethod:
        ...

    @property
    def query(self) -> Mapping[str, str] | None:
        ...

    @property
    def headers(self) -> Mapping[str, str] | None:
        ...

    @property
    def response_type(self) -> type[ResponseT]:
        ...
