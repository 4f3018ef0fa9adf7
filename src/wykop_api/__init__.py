"""Cliente para la API HTTP/JSON de wykop.pl (`a.wykop.pl`)."""

from __future__ import annotations

from wykop_api.adapters.client import Client
from wykop_api.adapters.request import Param, Request
from wykop_api.core.config import AppSettings
from wykop_api.core.domain.sorting import PromotedSort, UpcomingSort
from wykop_api.core.errors import (
    MalformedRequestError,
    OperationNotImplementedError,
    WykopError,
)

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "Client",
    "MalformedRequestError",
    "OperationNotImplementedError",
    "Param",
    "PromotedSort",
    "Request",
    "UpcomingSort",
    "WykopError",
]
