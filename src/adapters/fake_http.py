"""Fakes deterministas de `HttpGetter`.

Por qué aquí (y no en tests/):
- El CLI usa `StaticGetter` en modo `--offline` con el dataset de ejemplo.
- Son dobles de test de primera clase: misma forma de llamada que el getter
  real, sin I/O de red.
"""

from __future__ import annotations

import logging
from typing import Any

from core.domain.models import ResponseEnvelope
from core.interfaces.http import HttpGetter

logger = logging.getLogger(__name__)


class StaticGetter(HttpGetter):
    """Resuelve siempre con el mismo envelope y registra las URLs pedidas.

    Acepta un `ResponseEnvelope` ya construido o el payload crudo, que se
    envuelve con status 200.
    """

    def __init__(self, response: ResponseEnvelope | Any) -> None:
        if not isinstance(response, ResponseEnvelope):
            response = ResponseEnvelope(data=response, status_code=200)
        self._response = response
        self.calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def get(self, url: str) -> ResponseEnvelope:
        logger.debug("stub GET %s", url)
        self.calls.append(url)
        if self._response.url:
            return self._response
        return self._response.model_copy(update={"url": url})


class FailingGetter(HttpGetter):
    """Rechaza cada llamada con la excepción dada (simula fallo de transporte)."""

    def __init__(self, error: BaseException) -> None:
        self._error = error
        self.calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def get(self, url: str) -> ResponseEnvelope:
        logger.debug("failing GET %s -> %s", url, type(self._error).__name__)
        self.calls.append(url)
        raise self._error
