"""Cargador de recursos/datasets.

Este módulo vive en `core/` porque:
- centraliza el *qué* datos de ejemplo usamos (usuarios del modo offline)
- evita duplicar lógica de paths en CLI y tests.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from core.config import get_user_config_dir

SAMPLE_USERS_FILENAME = "users.json"


def _bundled_resources_dir() -> Path:
    # core/resources_loader.py -> core/resources
    return Path(__file__).resolve().parent / "resources"


def get_sample_users_path(filename: str = SAMPLE_USERS_FILENAME) -> Path:
    """Busca el dataset de usuarios de ejemplo.

    Orden:
    1) $FIXTURE_KIT_DATA_DIR/<filename> si la variable está definida
    2) <user config dir>/data/<filename>
    3) el dataset incluido en el paquete
    """

    override = (os.environ.get("FIXTURE_KIT_DATA_DIR") or "").strip()
    candidates: list[Path] = []
    if override:
        candidates.append(Path(override) / filename)
    candidates.append(get_user_config_dir() / "data" / filename)

    for p in candidates:
        if p.exists() and p.is_file():
            return p
    return _bundled_resources_dir() / filename


def load_sample_users(path: Path | None = None) -> list[dict[str, Any]]:
    """Carga el JSON de usuarios (array de objetos) tal cual, sin validar."""

    path = path or get_sample_users_path()
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of users")
    return data
