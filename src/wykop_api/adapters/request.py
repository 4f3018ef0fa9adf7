"""Construcción de peticiones al API.

El API no usa query string: todos los parámetros viajan como segmentos de
ruta, con la forma

    <resource>/<method>/<param1>/<param2>/.../<name,value,name,value,...>

- `method_params` son posicionales: solo se emite el valor.
- `api_params` se aplanan en un único segmento, nombre y valor separados
  por comas (no `name=value`). El formato se conserva tal cual lo acepta
  el servicio.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

import httpx

from wykop_api.core.config import DEFAULT_HOST, DEFAULT_SCHEME
from wykop_api.core.errors import MalformedRequestError


@dataclass(frozen=True)
class Param:
    name: str
    value: str


@dataclass
class Request:
    """Una llamada al API, antes de autenticar y enviar.

    `post_params` queda reservado para operaciones de escritura; ninguna
    operación actual lo usa.
    """

    http_method: str = ""
    resource: str = ""
    method: str = ""
    requires_user_auth: bool = False

    method_params: list[Param] = field(default_factory=list)
    api_params: list[Param] = field(default_factory=list)
    post_params: list[Param] = field(default_factory=list)

    def with_api_params(self, *params: Param) -> Request:
        """Copia de la petición con `params` añadidos al final de `api_params`."""

        return replace(
            self,
            method_params=list(self.method_params),
            api_params=[*self.api_params, *params],
            post_params=list(self.post_params),
        )

    def build_path(self) -> str:
        flat: list[str] = []
        for param in self.api_params:
            flat.extend((param.name, param.value))
        api_segment = ",".join(flat)

        parts = [self.resource, self.method]
        parts.extend(param.value for param in self.method_params)
        if api_segment:
            parts.append(api_segment)
        return "/".join(parts)

    def build_url(self, scheme: str = DEFAULT_SCHEME, host: str = DEFAULT_HOST) -> str:
        return f"{scheme}://{host}/{self.build_path()}"

    def build(
        self,
        scheme: str = DEFAULT_SCHEME,
        host: str = DEFAULT_HOST,
        *,
        http_client: httpx.Client | None = None,
    ) -> httpx.Request:
        """Valida la petición y la convierte en un `httpx.Request` sin cuerpo.

        Lanza `MalformedRequestError` antes de cualquier I/O si falta
        `resource`, `method` o el verbo HTTP. Con `http_client`, la petición
        hereda sus headers y timeout.
        """

        if not self.resource or not self.http_method or not self.method:
            raise MalformedRequestError()
        url = self.build_url(scheme, host)
        if http_client is not None:
            return http_client.build_request(self.http_method, url)
        return httpx.Request(self.http_method, url)
