"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y logging de las peticiones.
- Facilita testeo: `HttpxGetter` implementa `HttpGetter` y se puede sustituir
  por un fake (ver `adapters.fake_http`).
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.models import ResponseEnvelope
from core.errors import PayloadError
from core.interfaces.http import HttpGetter

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults comunes.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite inyectar un `httpx.MockTransport` sin red.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxGetter(HttpGetter):
    """`HttpGetter` real: un GET por llamada con un cliente httpx efímero."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def get(self, url: str) -> ResponseEnvelope:
        logger.debug("GET %s", url)
        async with build_async_client(self._settings, transport=self._transport) as client:
            response = await client.get(url)
        # Status no exitoso => httpx.HTTPStatusError hacia el caller.
        response.raise_for_status()

        payload = None
        if response.content:
            try:
                payload = response.json()
            except ValueError as exc:
                raise PayloadError(f"response from {url} is not valid JSON", url=url) from exc
        return ResponseEnvelope(
            data=payload,
            status_code=response.status_code,
            headers=dict(response.headers),
            url=str(response.url),
        )
