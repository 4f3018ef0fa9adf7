"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los accesores concretos.
- Permite que la CLI y los tests dependan de abstracciones.
"""

from wykop_api.core.interfaces.resources import LinkResource, LinksResource

__all__ = ["LinkResource", "LinksResource"]
