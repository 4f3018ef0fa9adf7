"""Cliente del API: autenticación, ejecución y decodificación.

Responsabilidad:
- Añadir `appkey` (y `userkey` cuando la operación lo exige) a una copia de
  la petición; la petición de quien llama no se modifica.
- Enviar la petición con httpx y decodificar el JSON al tipo destino.
- Cerrar la respuesta en todos los caminos de salida.

No se inspecciona el status code, no se reintenta y no se envuelven errores:
`MalformedRequestError`, `httpx.HTTPError` y `pydantic.ValidationError`
llegan tal cual a quien llama.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter

from wykop_api.adapters.http_client import build_http_client
from wykop_api.adapters.request import Param, Request
from wykop_api.adapters.resources import LinksAccessor
from wykop_api.core.config import AppSettings
from wykop_api.core.errors import WykopError

if TYPE_CHECKING:
    from wykop_api.core.interfaces.resources import LinkResource, LinksResource

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(destination: Any) -> TypeAdapter[Any]:
    return TypeAdapter(destination)


class Client:
    """Cliente para un par de credenciales (app key / user key).

    `transport` se pasa al `httpx.Client` interno; alternativamente se puede
    inyectar un `http_client` ya construido (en ese caso no se cierra aquí).
    """

    def __init__(
        self,
        app_key: str,
        user_key: str,
        transport: httpx.BaseTransport | None = None,
        *,
        settings: AppSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._app_key = app_key
        self._user_key = user_key
        self._settings = settings or AppSettings()
        self._owns_http = http_client is None
        self._http = http_client or build_http_client(self._settings, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> Client:
        """Crea un cliente con las claves de `AppSettings` (env / .env)."""

        settings = settings or AppSettings()
        if not settings.app_key:
            raise WykopError("app key is not configured (WYKOP_APP_KEY)")
        return cls(settings.app_key, settings.user_key or "", transport, settings=settings)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def authenticate(self, request: Request) -> Request:
        """Copia de `request` con los parámetros de autenticación añadidos."""

        params = [Param("appkey", self._app_key)]
        if request.requires_user_auth:
            params.append(Param("userkey", self._user_key))
        return request.with_api_params(*params)

    def do(self, request: Request, destination: Any = None) -> Any:
        """Ejecuta `request` y decodifica el cuerpo JSON en `destination`.

        `destination` es cualquier tipo aceptado por `pydantic.TypeAdapter`
        (p.ej. `Link` o `list[Dig]`). Con `None` el cuerpo se descarta y se
        devuelve `None`.
        """

        authed = self.authenticate(request)
        http_request = authed.build(
            self._settings.scheme,
            self._settings.host,
            http_client=self._http,
        )

        logger.debug("%s %s/%s", authed.http_method, authed.resource, authed.method)
        response = self._http.send(http_request, stream=True)
        try:
            body = response.read()
            logger.debug(
                "%s/%s -> HTTP %s (%d bytes)",
                authed.resource,
                authed.method,
                response.status_code,
                len(body),
            )
            if destination is None:
                return None
            return _adapter(destination).validate_json(body)
        finally:
            response.close()

    do_and_parse = do

    def links(self) -> LinksResource:
        return LinksAccessor(self)

    def link(self) -> LinkResource:
        return LinksAccessor(self)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
