"""Exportación JSON de perfiles.

Por qué JSON:
- Interoperabilidad: se escribe con la misma forma que entrega la API
  (`by_alias=True`), así que el archivo vuelve a decodificar como `User`.
- El `postcode` se exporta siempre como string (forma normalizada).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import User


def export_users_json(*, users: Sequence[User], output_path: Path) -> Path:
    """Exporta perfiles a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"results": [user.model_dump(mode="json", by_alias=True) for user in users]}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
