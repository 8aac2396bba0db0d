"""Accessor remoto: usuarios del servidor REST.

Fase única:
- `Users.all()` hace un GET a `AppSettings.users_url` y valida el payload.
- El GET lo ejecuta un `HttpGetter` inyectado; por defecto `HttpxGetter`.

Sin reintentos ni caché: una llamada por invocación.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from adapters.http_client import HttpxGetter
from core.config import AppSettings
from core.domain.models import UserRecord, UsersResponse
from core.errors import PayloadError
from core.interfaces.http import HttpGetter

logger = logging.getLogger(__name__)


class Users:
    """Acceso a la colección `/users`."""

    def __init__(
        self,
        getter: HttpGetter | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._getter = getter if getter is not None else HttpxGetter(self._settings)

    @property
    def url(self) -> str:
        return self._settings.users_url

    async def all(self) -> UsersResponse:
        """Devuelve el envelope con todos los usuarios.

        Errores de transporte/status los propaga el getter tal cual; un cuerpo
        que no sea una lista de usuarios se reporta como `PayloadError`.
        """

        url = self.url
        envelope = await self._getter.get(url)

        if not isinstance(envelope.data, list):
            raise PayloadError(
                f"expected a JSON array from {url}, got {type(envelope.data).__name__}",
                url=url,
            )
        try:
            response = UsersResponse(
                data=envelope.data,
                status_code=envelope.status_code,
                headers=envelope.headers,
                url=envelope.url or url,
            )
        except ValidationError as exc:
            raise PayloadError(f"invalid user records from {url}: {exc}", url=url) from exc

        logger.info("Fetched %d users from %s", len(response.data), url)
        return response

    async def find(self, user_id: int) -> UserRecord | None:
        response = await self.all()
        for user in response.data:
            if user.id == user_id:
                return user
        return None
