"""Response decoder applying a compatibility mode to raw response bytes.

The decoder is the only place where bytes turn into records. It validates
with pydantic under a validation context that carries the configured
``CompatibilityMode`` and converts the first validation failure into a
``DecodeError`` whose ``field_path`` points at the exact offending field.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ...config import DEFAULT_COMPATIBILITY_MODE
from ...core.enums import CompatibilityMode
from ...core.exceptions import DecodeError
from ...models.base import UNKNOWN_FIELD_ERROR, decode_context
from ...models.response import DataResponse, PaginatedDataResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


def _error_location(error: dict[str, Any]) -> tuple[str | int, ...]:
    loc = tuple(error.get("loc", ()))
    if error.get("type") == UNKNOWN_FIELD_ERROR:
        # Raised at model level; the key itself lives in the error context
        loc = loc + (error["ctx"]["field"],)
    return loc


class ResponseDecoder:
    """Decode response payloads into typed records.

    Args:
        mode: Compatibility mode applied to every shape this decoder handles
    """

    def __init__(self, mode: CompatibilityMode | str = DEFAULT_COMPATIBILITY_MODE) -> None:
        self.mode = CompatibilityMode(mode)
        self._context = decode_context(self.mode)

    def decode(self, raw: bytes, shape: type[M]) -> M:
        """Decode ``raw`` into ``shape``.

        Raises:
            DecodeError: If the payload is not valid JSON or does not match
                ``shape`` under the configured mode
        """
        try:
            return shape.model_validate_json(raw, context=self._context)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            first = errors[0] if errors else {"loc": (), "msg": str(e)}
            error = DecodeError(
                raw_bytes=raw,
                field_path=_error_location(first),
                underlying_cause=first.get("msg", str(e)),
            )
            logger.debug(
                "decode_failed",
                extra={
                    "shape": shape.__name__,
                    "mode": self.mode.value,
                    "field_path": error.path,
                    "error_count": len(errors),
                },
            )
            raise error from e

    def decode_data(self, raw: bytes, item_type: Any) -> Any:
        """Decode a ``{"data": <T>}`` envelope and return the unwrapped value."""
        return self.decode(raw, DataResponse[item_type]).data

    def decode_page(self, raw: bytes, item_type: type[T]) -> PaginatedDataResponse[T]:
        """Decode a ``{"data": [...], "pagination": {...}}`` envelope."""
        return self.decode(raw, PaginatedDataResponse[item_type])
