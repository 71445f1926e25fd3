"""Estrategias de conversión (valor JSON crudo -> valor tipado).

Por qué objetos y no funciones sueltas:
- Cada conversor declara la representación JSON que acepta (`source_types`),
  así el accesor puede distinguir "tipo incorrecto" de "valor inválido".
- Algunos llevan parámetros (p.ej. el patrón de fecha) y se componen de forma
  explícita: `ListConverter(ObjectConverter(Repository))`.

Formato canónico de timestamps: string `YYYY-MM-DDTHH:MM:SSZ` (UTC), el mismo
que devuelve la API v3 de GitHub. Los epoch numéricos no se aceptan.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, get_args, get_origin

from pydantic import AnyUrl, TypeAdapter, ValidationError

from core.errors import UnexpectedType, UnexpectedValue
from core.interfaces.decodable import JSONConvertible, JSONDecodable, JSONValueConverter

GITHUB_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

_PRIMITIVE_SOURCES: Mapping[type, tuple[tuple[type, ...], str]] = MappingProxyType(
    {
        str: ((str,), "string"),
        int: ((int,), "integer"),
        # JSON no distingue 1 de 1.0: un entero es un número válido.
        float: ((int, float), "number"),
        bool: ((bool,), "boolean"),
    }
)


def json_type_name(value: Any) -> str:
    """Nombre JSON de la representación de `value` (para mensajes de error)."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def matches_source(value: Any, source_types: tuple[type, ...]) -> bool:
    # bool es subclase de int en Python, pero no en JSON.
    if isinstance(value, bool):
        return bool in source_types
    return isinstance(value, source_types)


@dataclass(frozen=True)
class IdentityConverter:
    """Primitivos (string/integer/number/boolean): devuelve el valor tal cual."""

    target: type

    @property
    def source_types(self) -> tuple[type, ...]:
        return _PRIMITIVE_SOURCES[self.target][0]

    @property
    def source_name(self) -> str:
        return _PRIMITIVE_SOURCES[self.target][1]

    def convert(self, key: str, value: Any) -> Any:
        if self.target is float:
            try:
                return float(value)
            except OverflowError as exc:
                raise UnexpectedValue(key, value, "number out of range") from exc
        return value


@dataclass(frozen=True)
class ObjectConverter:
    """Objeto JSON -> entidad `JSONDecodable` (recursivo)."""

    target: type

    source_types = (dict,)
    source_name = "object"

    def convert(self, key: str, value: Any) -> Any:
        from core.decoding.json_object import JSONObject

        return self.target.from_json(JSONObject(value))


@dataclass(frozen=True)
class ListConverter:
    """Array JSON -> lista, aplicando `element` a cada item en orden.

    Todo o nada: el primer elemento que falla aborta la lista completa.
    """

    element: JSONValueConverter[Any]

    source_types = (list,)
    source_name = "array"

    def convert(self, key: str, value: Any) -> list[Any]:
        out: list[Any] = []
        for item in value:
            if not matches_source(item, self.element.source_types):
                raise UnexpectedType(key, self.element.source_name, json_type_name(item))
            out.append(self.element.convert(key, item))
        return out


@dataclass(frozen=True)
class URLConverter:
    """String -> `AnyUrl`. Solo URLs absolutas (con esquema)."""

    source_types = (str,)
    source_name = "string"

    def convert(self, key: str, value: Any) -> AnyUrl:
        try:
            return _URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise UnexpectedValue(key, value, f"Invalid URL: {exc.errors()[0]['msg']}") from exc


@dataclass(frozen=True)
class TimestampConverter:
    """String formateado -> `datetime` UTC (calendario gregoriano)."""

    pattern: str = GITHUB_TIMESTAMP_FORMAT

    source_types = (str,)
    source_name = "string"

    def convert(self, key: str, value: Any) -> datetime:
        try:
            parsed = datetime.strptime(value, self.pattern)
        except ValueError as exc:
            raise UnexpectedValue(key, value, f"Invalid date format for '{self.pattern}'") from exc
        return parsed.replace(tzinfo=timezone.utc)


# Tipos ajenos (stdlib/pydantic) que no pueden implementar `JSONConvertible`.
_FOREIGN_CONVERTERS: Mapping[type, JSONValueConverter[Any]] = MappingProxyType(
    {
        datetime: TimestampConverter(),
        AnyUrl: URLConverter(),
    }
)


def default_converter(target: Any) -> JSONValueConverter[Any]:
    """Conversor por defecto según el tipo pedido.

    Orden:
    1) primitivos -> `IdentityConverter`
    2) `list[T]` -> `ListConverter(default_converter(T))`
    3) `JSONConvertible` -> su `json_converter()`
    4) tipos ajenos conocidos (`datetime`, `AnyUrl`)
    5) `JSONDecodable` -> `ObjectConverter`
    """

    if target in _PRIMITIVE_SOURCES:
        return IdentityConverter(target)

    if get_origin(target) is list:
        args = get_args(target)
        if len(args) != 1:
            raise TypeError(f"list target needs exactly one item type, got {target!r}")
        return ListConverter(default_converter(args[0]))

    if isinstance(target, type):
        if isinstance(target, JSONConvertible):
            return target.json_converter()
        if target in _FOREIGN_CONVERTERS:
            return _FOREIGN_CONVERTERS[target]
        if isinstance(target, JSONDecodable):
            return ObjectConverter(target)

    raise TypeError(f"No default JSON converter for {target!r}")
