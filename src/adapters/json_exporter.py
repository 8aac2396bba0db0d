"""Exportación JSON de la respuesta de usuarios.

Por qué JSON:
- Interoperabilidad: el archivo resultante sirve como `db.json` de un mock
  server o como fixture para otros tests.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import UsersResponse


def users_to_json(response: UsersResponse) -> str:
    """Serializa solo `data` (la lista de usuarios) con formato estable."""

    payload = [user.model_dump(mode="json") for user in response.data]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_users_json(*, response: UsersResponse, output_path: Path) -> Path:
    """Escribe la lista de usuarios a `output_path` (UTF-8)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(users_to_json(response), encoding="utf-8")
    return output_path
