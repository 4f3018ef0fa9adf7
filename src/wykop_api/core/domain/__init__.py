"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2) y tablas de consulta.
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos de la API.
"""

from wykop_api.core.domain.groups import UserGroup
from wykop_api.core.domain.models import (
    AuthorInfo,
    Bury,
    Comment,
    Dig,
    Error,
    Link,
    RelatedLink,
    WrappedError,
)
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort

__all__ = [
    "AuthorInfo",
    "Bury",
    "Comment",
    "Dig",
    "Error",
    "Link",
    "PromotedSort",
    "RelatedLink",
    "UpcomingSort",
    "UserGroup",
    "WrappedError",
]
