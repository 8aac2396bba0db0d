"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo envelope lo produce la red real o un fake de test; quien lo consume
  no distingue el origen.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class UserRecord(BaseModel):
    """Usuario tal como lo expone el endpoint `/users`."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(
        ...,
        gt=0,
        description="Identificador positivo, único dentro de una respuesta.",
    )
    first_name: str = Field(
        ...,
        description="Nombre.",
    )
    last_name: str = Field(
        ...,
        description="Apellido.",
    )
    email: str = Field(
        ...,
        description="Correo electrónico (no se valida el formato).",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class ResponseEnvelope(BaseModel):
    """Envoltorio de una respuesta HTTP (similar al `response` de un cliente HTTP).

    Por qué existe:
    - Es el contrato del punto de sustitución (`HttpGetter`): tanto el getter
      real (httpx) como los fakes devuelven esta misma forma.
    - `data` lleva el payload JSON ya decodificado.
    """

    model_config = ConfigDict(frozen=True)

    data: Any = Field(
        default=None,
        description="Payload JSON decodificado.",
    )
    status_code: int = Field(
        default=200,
        ge=100,
        le=599,
        description="Código HTTP de la respuesta.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Cabeceras de la respuesta.",
    )
    url: str = Field(
        default="",
        description="URL final consultada.",
    )


class UsersResponse(ResponseEnvelope):
    """Envelope de `Users.all()`: `data` es la lista de usuarios validada."""

    data: list[UserRecord] = Field(
        default_factory=list,
        description="Usuarios devueltos por el endpoint.",
    )

    @field_validator("data")
    @classmethod
    def _unique_ids(cls, value: list[UserRecord]) -> list[UserRecord]:
        seen: set[int] = set()
        for user in value:
            if user.id in seen:
                raise ValueError(f"duplicated user id: {user.id}")
            seen.add(user.id)
        return value
