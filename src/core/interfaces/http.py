"""Contrato del punto de sustitución HTTP.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El accessor de usuarios recibe un `HttpGetter` por constructor; en tests se
  pasa un fake y no hace falta parchear nada a nivel de módulo.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ResponseEnvelope


@runtime_checkable
class HttpGetter(Protocol):
    """Contrato mínimo para un GET HTTP.

    Reglas de diseño:
    - `get` es asíncrono: es el único punto de suspensión del sistema.
    - Devuelve siempre un `ResponseEnvelope`, venga de la red o de un fake.
    - Un fallo (transporte o status no exitoso) se propaga como excepción.
    """

    async def get(self, url: str) -> ResponseEnvelope:
        """Hace GET sobre `url` y devuelve el envelope con el JSON decodificado."""

        ...
