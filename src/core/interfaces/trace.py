"""Colaborador de trazas.

Por qué un Protocol inyectable:
- Evita estado global de logging en el Core.
- En tests se usa `NullTrace` (o un recolector) sin tocar `logging`.

Regla: una traza nunca altera el flujo ni la propagación de errores.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TraceSink(Protocol):
    def trace(self, event: str, **params: Any) -> None:
        """Marca la entrada/salida de una operación."""

        ...

    def debug(self, message: str, **params: Any) -> None:
        ...


class NullTrace:
    """Implementación no-op (default cuando no se inyecta nada)."""

    def trace(self, event: str, **params: Any) -> None:
        return None

    def debug(self, message: str, **params: Any) -> None:
        return None
