"""Capacidades de decodificación (Decodable / Convertible).

Por qué Protocol:
- Cada entidad del dominio declara *cómo* se construye desde JSON sin heredar
  de una clase base concreta.
- La selección del conversor se resuelve por el tipo pedido al acceder a un
  campo (`JSONObject.get(key, Repository)`), no inspeccionando el valor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from core.decoding.json_object import JSONObject

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class JSONValueConverter(Protocol[T_co]):
    """Estrategia de conversión de un valor JSON crudo a un valor tipado.

    Reglas:
    - `source_types` son las representaciones Python (salida de `json.loads`)
      aceptadas. El accesor las valida *antes* de llamar a `convert`.
    - `convert` solo falla con `UnexpectedValue` (o con el error de un
      conversor anidado).
    """

    source_types: tuple[type, ...]
    source_name: str

    def convert(self, key: str, value: Any) -> T_co:
        ...


@runtime_checkable
class JSONDecodable(Protocol):
    """Entidad construible de forma atómica a partir de un `JSONObject`."""

    @classmethod
    def from_json(cls, json: JSONObject) -> Any:
        ...


@runtime_checkable
class JSONConvertible(Protocol):
    """Tipo que declara su conversor por defecto."""

    @classmethod
    def json_converter(cls) -> JSONValueConverter[Any]:
        ...
