"""Accesores tipados de los recursos `links` y `link`.

Cada método construye exactamente una `Request` (resource/method fijos) y
la delega a `Client.do` con el tipo destino que corresponde al JSON.

Los valores de `sort` se envían tal cual: un valor fuera de
`PromotedSort`/`UpcomingSort` no se rechaza aquí.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wykop_api.adapters.request import Param, Request
from wykop_api.core.domain.models import Bury, Comment, Dig, Link, RelatedLink
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort
from wykop_api.core.errors import OperationNotImplementedError

if TYPE_CHECKING:
    from wykop_api.adapters.client import Client

GET = "GET"


def _listing(method: str, page: int, sort: str) -> Request:
    return Request(
        http_method=GET,
        resource="links",
        method=method,
        api_params=[Param("page", str(page)), Param("sort", str(sort))],
    )


def _single(method: str, id: int, *, requires_user_auth: bool = False) -> Request:
    return Request(
        http_method=GET,
        resource="link",
        method=method,
        requires_user_auth=requires_user_auth,
        method_params=[Param("param1", str(id))],
    )


class LinksAccessor:
    """Implementa `LinksResource` y `LinkResource` sobre un `Client`."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def promoted(self, page: int, sort: PromotedSort | str) -> list[Link]:
        return self._client.do(_listing("promoted", page, sort), list[Link])

    def upcoming(self, page: int, sort: UpcomingSort | str) -> list[Link]:
        return self._client.do(_listing("upcoming", page, sort), list[Link])

    def index(self, id: int) -> Link:
        return self._client.do(_single("index", id, requires_user_auth=True), Link)

    def digs(self, id: int) -> list[Dig]:
        return self._client.do(_single("digs", id), list[Dig])

    def comments(self, id: int) -> list[Comment]:
        raise OperationNotImplementedError("link/comments")

    def reports(self, id: int) -> list[Bury]:
        raise OperationNotImplementedError("link/reports")

    def related(self, id: int) -> list[RelatedLink]:
        raise OperationNotImplementedError("link/related")

    def bury_reasons(self) -> None:
        raise OperationNotImplementedError("link/buryreasons")
