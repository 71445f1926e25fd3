"""Decodificación tipada de JSON.

Piezas:
- `JSONObject`: accesor por clave sobre un objeto JSON ya parseado.
- `converters`: estrategias de conversión valor crudo -> valor tipado.
"""

from core.decoding.converters import (
    GITHUB_TIMESTAMP_FORMAT,
    IdentityConverter,
    ListConverter,
    ObjectConverter,
    TimestampConverter,
    URLConverter,
    default_converter,
    json_type_name,
)
from core.decoding.json_object import JSONObject

__all__ = [
    "GITHUB_TIMESTAMP_FORMAT",
    "IdentityConverter",
    "JSONObject",
    "ListConverter",
    "ObjectConverter",
    "TimestampConverter",
    "URLConverter",
    "default_converter",
    "json_type_name",
]
