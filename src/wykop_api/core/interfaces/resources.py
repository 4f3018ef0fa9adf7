"""Contratos de los recursos del API.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI depende de estos contratos; los tests pueden sustituir el accesor
  concreto por un doble sin tocar HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from wykop_api.core.domain.models import Bury, Comment, Dig, Link, RelatedLink
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort


@runtime_checkable
class LinksResource(Protocol):
    """Listados de enlaces (`links/*`)."""

    def promoted(self, page: int, sort: PromotedSort | str) -> list[Link]:
        """Enlaces de la portada."""

        ...

    def upcoming(self, page: int, sort: UpcomingSort | str) -> list[Link]:
        """Enlaces en espera ("wykopalisko")."""

        ...


@runtime_checkable
class LinkResource(Protocol):
    """Operaciones sobre un enlace concreto (`link/*`).

    Reglas de diseño:
    - Las operaciones sin implementar lanzan `OperationNotImplementedError`,
      nunca devuelven una lista vacía.
    """

    def index(self, id: int) -> Link:
        ...

    def comments(self, id: int) -> list[Comment]:
        ...

    def reports(self, id: int) -> list[Bury]:
        ...

    def digs(self, id: int) -> list[Dig]:
        ...

    def related(self, id: int) -> list[RelatedLink]:
        ...

    def bury_reasons(self) -> None:
        ...
