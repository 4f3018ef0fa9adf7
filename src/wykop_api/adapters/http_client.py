"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers para todas las llamadas al API.
- Facilita testeo: se puede inyectar un transporte stub (`httpx.MockTransport`).

Sin reintentos ni caché: los errores de transporte llegan tal cual a quien llama.
"""

from __future__ import annotations

import httpx

from wykop_api.core.config import AppSettings


def build_http_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los recursos se comporten igual.
    - El transporte es el punto de extensión (tests, proxies).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
