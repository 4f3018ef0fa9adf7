"""Exportación JSON de resultados del API.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (`wykop ... --json`).
- Formato estable: claves ordenadas, UTF-8 sin escapar.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from pydantic import BaseModel


def dump_json(payload: BaseModel | Sequence[BaseModel]) -> str:
    """Serializa un modelo o lista de modelos a JSON con formato estable."""

    if isinstance(payload, BaseModel):
        data = payload.model_dump(mode="json")
    else:
        data = [item.model_dump(mode="json") for item in payload]
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)

