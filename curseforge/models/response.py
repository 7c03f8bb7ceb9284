"""Response envelopes wrapping every payload returned by the remote API."""

from typing import Generic, TypeVar

from .base import CurseForgeModel
from .core import Pagination

T = TypeVar("T")


class DataResponse(CurseForgeModel, Generic[T]):
    """Envelope with the single field ``data``.

    Endpoints returning this are unwrapped by the client, which hands out
    the value of ``data`` directly.
    """

    data: T


class PaginatedDataResponse(CurseForgeModel, Generic[T]):
    """Envelope with the fields ``data`` and ``pagination``."""

    data: list[T]
    pagination: Pagination
