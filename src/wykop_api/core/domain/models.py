"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- La respuesta JSON se valida directamente contra el tipo destino
  (`TypeAdapter`), sea un objeto o una lista.
- Todos los campos son opcionales: la API omite campos según el método y
  según si la petición lleva `userkey`.

Nota:
- Estos modelos describen *qué* devuelve la API, no *cómo* se obtiene.
- `link` en `Comment`/`RelatedLink` es un marcador de texto, no un grafo.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from wykop_api.core.domain.groups import UserGroup


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AuthorInfo(_ApiModel):
    """Atributos de presentación del autor, compartidos por varios registros."""

    author: str | None = Field(default=None, description="Login del autor.")
    author_avatar: str | None = None
    author_avatar_big: str | None = None
    author_avatar_med: str | None = None
    author_avatar_lo: str | None = None
    author_group: int | None = Field(
        default=None,
        description="Código de grupo del autor (ver `UserGroup`).",
    )
    author_sex: str | None = None

    @property
    def user_group(self) -> UserGroup | None:
        """`UserGroup` del autor; un código desconocido lanza `ValueError`."""

        if self.author_group is None:
            return None
        return UserGroup(self.author_group)


class Link(AuthorInfo):
    """Enlace publicado en el servicio."""

    id: int | None = Field(default=None, description="Identificador del enlace.")
    title: str | None = None
    description: str | None = None
    tags: str | None = None
    url: str | None = Field(default=None, description="URL dentro de wykop.pl.")
    source_url: str | None = Field(default=None, description="URL de origen.")
    vote_count: int = 0
    comment_count: int = 0
    report_count: int = 0
    date: str | None = None

    type: str | None = None
    group: str | None = None
    preview: str | None = None
    user_lists: list[int] = Field(default_factory=list)
    plus18: bool = False
    status: str | None = None
    can_vote: bool = False
    is_hot: bool = False
    has_own_content: bool = False
    category: str | None = None
    category_name: str | None = None

    # Solo presentes si la petición lleva userkey.
    user_vote: str | bool | None = Field(
        default=None,
        description="'dig' si el usuario lo votó, 'bury' si lo enterró; `false` si no votó.",
    )
    user_observe: bool = False
    user_favorite: bool = False

    violation_url: str | None = None
    info: str | None = None
    app: str | None = None
    own_content: str | None = None


class Comment(AuthorInfo):
    id: int | None = None
    date: str | None = None
    vote_count: int = 0
    body: str | None = None
    parent_id: int | None = None
    status: str | None = Field(default=None, description="own/new/readed")
    embed: str | None = None
    link: str | None = None


class Dig(AuthorInfo):
    """Voto positivo ("wykop") de un usuario."""


class Bury(AuthorInfo):
    """Voto negativo ("zakop"), con el identificador del motivo."""

    reason: int | None = None


class RelatedLink(AuthorInfo):
    id: int | None = None
    url: str | None = None
    title: str | None = None
    plus18: bool = False
    vote_count: int = 0
    entry_count: int = 0
    user_vote: int | None = Field(
        default=None,
        description="+1 / -1 / None según el voto del usuario.",
    )
    link: str | None = None


class Error(_ApiModel):
    code: int | None = None
    message: str | None = None


class WrappedError(_ApiModel):
    """Sobre `{"error": {...}}` devuelto por la API ante fallos.

    El pipeline no lo interpreta: quien llama lo decodifica explícitamente.
    """

    error: Error = Field(default_factory=Error)
