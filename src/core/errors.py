"""Errores propios del proyecto.

Los fallos de transporte y de status HTTP no se envuelven: llegan al caller
como excepciones de httpx. Aquí solo vive lo que httpx no cubre.
"""

from __future__ import annotations


class FixtureKitError(Exception):
    """Base de los errores de fixture-kit."""


class PayloadError(FixtureKitError):
    """El servidor respondió 2xx pero el cuerpo no tiene la forma esperada."""

    def __init__(self, message: str, *, url: str = "") -> None:
        super().__init__(message)
        self.url = url
