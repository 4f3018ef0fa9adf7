"""Errores del cliente.

Solo se definen los errores propios de esta capa. Los fallos de transporte
(`httpx.HTTPError`) y de decodificación (`pydantic.ValidationError`) se
propagan tal cual, sin envolver.
"""

from __future__ import annotations


class WykopError(Exception):
    """Base de los errores propios del cliente."""


class MalformedRequestError(WykopError, ValueError):
    """La petición no tiene `resource`, `method` o verbo HTTP."""

    def __init__(self, message: str = "wrong request") -> None:
        super().__init__(message)


class OperationNotImplementedError(WykopError, NotImplementedError):
    """Operación del API declarada pero todavía no construida.

    Distinta de un fallo: permite distinguir "no existe aún" de "falló".
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} is not implemented")
