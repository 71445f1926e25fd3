"""Accesor tipado sobre un objeto JSON.

Reglas de acceso (ver `get` / `get_optional`):

| situación            | requerido             | opcional          |
|----------------------|-----------------------|-------------------|
| clave ausente        | `MissingRequiredKey`  | `None`            |
| `null`               | `UnexpectedType`      | `None`            |
| tipo JSON incorrecto | `UnexpectedType`      | `UnexpectedType`  |
| valor rechazado      | `UnexpectedValue`     | `UnexpectedValue` |
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from core.decoding.converters import default_converter, json_type_name, matches_source
from core.errors import MissingRequiredKey, UnexpectedType
from core.interfaces.decodable import JSONValueConverter

T = TypeVar("T")


@dataclass(frozen=True)
class JSONObject:
    """Envuelve exactamente un objeto JSON (`dict` de `json.loads`). Inmutable."""

    raw: Mapping[str, Any]

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def keys(self) -> Iterator[str]:
        return iter(self.raw)

    @overload
    def get(self, key: str, target: type[T]) -> T: ...

    @overload
    def get(self, key: str, target: Any = None, *, converter: JSONValueConverter[T]) -> T: ...

    def get(self, key: str, target: Any = None, *, converter: JSONValueConverter[Any] | None = None) -> Any:
        """Campo requerido: `target` elige el conversor por defecto, `converter` lo fuerza."""

        if key not in self.raw:
            raise MissingRequiredKey(key)
        return self._convert(key, self.raw[key], target, converter)

    @overload
    def get_optional(self, key: str, target: type[T]) -> T | None: ...

    @overload
    def get_optional(
        self, key: str, target: Any = None, *, converter: JSONValueConverter[T]
    ) -> T | None: ...

    def get_optional(
        self, key: str, target: Any = None, *, converter: JSONValueConverter[Any] | None = None
    ) -> Any:
        """Campo opcional: clave ausente o `null` -> `None`."""

        value = self.raw.get(key)
        if value is None:
            return None
        return self._convert(key, value, target, converter)

    @staticmethod
    def _convert(
        key: str,
        value: Any,
        target: Any,
        converter: JSONValueConverter[Any] | None,
    ) -> Any:
        if converter is None:
            if target is None:
                raise TypeError("JSONObject access needs a target type or an explicit converter")
            converter = default_converter(target)

        if not matches_source(value, converter.source_types):
            raise UnexpectedType(key, converter.source_name, json_type_name(value))
        return converter.convert(key, value)
