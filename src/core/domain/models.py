"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Modelos inmutables (`frozen`) con documentación autocontenida (Field).
- Serialización gratuita (`model_dump(mode="json")`) para exportar resultados.

Por qué `from_json` y no `model_validate`:
- La decodificación campo a campo (vía `JSONObject`) da errores precisos por
  clave (`MissingRequiredKey`, `UnexpectedType`, `UnexpectedValue`).
- Los campos se extraen en orden fijo y el modelo se construye una sola vez al
  final: nunca existe una entidad a medio construir.

Nota:
- Las claves son las de la API v3 de GitHub (`private`, `avatar_url`...).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import AnyUrl, BaseModel, Field
from pydantic.config import ConfigDict

from core.decoding.json_object import JSONObject

ItemT = TypeVar("ItemT")


class Owner(BaseModel):
    """Propietario (usuario u organización) de un repositorio."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="Handle público del propietario.")
    id: int = Field(..., description="Identificador numérico en GitHub.")
    avatar_url: AnyUrl = Field(..., description="URL del avatar.")
    gravatar_id: str = Field(..., description="ID de Gravatar (suele ser vacío).")
    url: AnyUrl = Field(..., description="URL del recurso en la API.")
    received_events_url: AnyUrl = Field(..., description="URL de eventos recibidos (API).")
    type: str = Field(..., description="Tipo de cuenta ('User', 'Organization', ...).")

    @classmethod
    def from_json(cls, json: JSONObject) -> Owner:
        login = json.get("login", str)
        owner_id = json.get("id", int)
        avatar_url = json.get("avatar_url", AnyUrl)
        gravatar_id = json.get("gravatar_id", str)
        url = json.get("url", AnyUrl)
        received_events_url = json.get("received_events_url", AnyUrl)
        account_type = json.get("type", str)
        return cls(
            login=login,
            id=owner_id,
            avatar_url=avatar_url,
            gravatar_id=gravatar_id,
            url=url,
            received_events_url=received_events_url,
            type=account_type,
        )


class Repository(BaseModel):
    """Repositorio tal como lo devuelve la búsqueda de GitHub."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Identificador numérico en GitHub.")
    name: str = Field(..., description="Nombre corto (sin owner).")
    full_name: str = Field(..., description="Nombre completo `owner/name`.")
    owner: Owner = Field(..., description="Propietario del repositorio.")
    private: bool = Field(..., description="Indica si el repositorio es privado.")
    html_url: AnyUrl = Field(..., description="URL canónica pública.")
    description: str | None = Field(default=None, description="Descripción (opcional).")
    fork: bool = Field(..., description="Indica si es un fork.")
    url: AnyUrl = Field(..., description="URL del recurso en la API.")
    created_at: datetime = Field(..., description="Creación (UTC).")
    updated_at: datetime = Field(..., description="Última actualización (UTC).")
    pushed_at: datetime | None = Field(default=None, description="Último push (UTC), si hubo.")
    homepage: str | None = Field(default=None, description="Homepage declarada (texto libre).")
    size: int = Field(..., description="Tamaño en KB.")
    stargazers_count: int = Field(..., description="Estrellas.")
    watchers_count: int = Field(..., description="Watchers.")
    language: str | None = Field(default=None, description="Lenguaje principal.")
    forks_count: int = Field(..., description="Forks.")
    open_issues_count: int = Field(..., description="Issues abiertos.")
    default_branch: str = Field(..., description="Rama por defecto.")
    score: float = Field(..., description="Relevancia calculada por la búsqueda.")

    @classmethod
    def from_json(cls, json: JSONObject) -> Repository:
        fields: dict[str, Any] = {
            "id": json.get("id", int),
            "name": json.get("name", str),
            "full_name": json.get("full_name", str),
            "owner": json.get("owner", Owner),
            "private": json.get("private", bool),
            "html_url": json.get("html_url", AnyUrl),
            "description": json.get_optional("description", str),
            "fork": json.get("fork", bool),
            "url": json.get("url", AnyUrl),
            "created_at": json.get("created_at", datetime),
            "updated_at": json.get("updated_at", datetime),
            "pushed_at": json.get_optional("pushed_at", datetime),
            "homepage": json.get_optional("homepage", str),
            "size": json.get("size", int),
            "stargazers_count": json.get("stargazers_count", int),
            "watchers_count": json.get("watchers_count", int),
            "language": json.get_optional("language", str),
            "forks_count": json.get("forks_count", int),
            "open_issues_count": json.get("open_issues_count", int),
            "default_branch": json.get("default_branch", str),
            "score": json.get("score", float),
        }
        return cls(**fields)


class SearchResult(BaseModel, Generic[ItemT]):
    """Página de resultados de una búsqueda (`SearchResult[Repository]`).

    El tipo de los items se toma de la parametrización; decodificar un
    `SearchResult` sin parametrizar es un error de programación.
    """

    model_config = ConfigDict(frozen=True)

    total_count: int = Field(..., description="Total de coincidencias (todas las páginas).")
    incomplete_results: bool = Field(..., description="GitHub cortó la búsqueda por timeout.")
    items: list[ItemT] = Field(default_factory=list, description="Items de esta página, en orden.")

    @classmethod
    def item_type(cls) -> type:
        args = cls.__pydantic_generic_metadata__["args"]
        if len(args) != 1 or isinstance(args[0], TypeVar):
            raise TypeError(f"{cls.__name__} must be parametrized, e.g. SearchResult[Repository]")
        return args[0]

    @classmethod
    def from_json(cls, json: JSONObject) -> SearchResult[ItemT]:
        item_type = cls.item_type()
        total_count = json.get("total_count", int)
        incomplete_results = json.get("incomplete_results", bool)
        items = json.get("items", list[item_type])
        return cls(
            total_count=total_count,
            incomplete_results=incomplete_results,
            items=items,
        )
