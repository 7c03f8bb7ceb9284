"""Base model and field types for schema-tolerant decoding.

Architecture:
    Every record mirrored from the remote schema derives from
    ``CurseForgeModel``. The active ``CompatibilityMode`` is not baked into the
    classes; it travels in the pydantic validation context (see
    ``decode_context``) so one process can decode the same shapes under
    different modes side by side.

Design Decisions:
    - ``extra="allow"`` at class level: pydantic always collects unknown keys,
      then the model wrap validator rejects, keeps or discards them per mode
    - Unknown-field errors carry the field name in ``ctx["field"]`` so the
      decoder can extend the error location down to the offending key
    - Response-side enums are wrapped with ``tolerant_enum`` to fall back to
      ``UNKNOWN`` only when decoding leniently
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import IntEnum
from typing import Annotated, Any, Optional, Self, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    ModelWrapValidatorHandler,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..config import DEFAULT_COMPATIBILITY_MODE, NULL_DATETIME_SENTINEL
from ..core.enums import UNKNOWN_VARIANT, CompatibilityMode

COMPATIBILITY_CONTEXT_KEY = "compatibility"
UNKNOWN_FIELD_ERROR = "unknown_field"

E = TypeVar("E", bound=IntEnum)


def decode_context(mode: CompatibilityMode | str) -> dict[str, CompatibilityMode]:
    """Build the validation context carrying a compatibility mode."""
    return {COMPATIBILITY_CONTEXT_KEY: CompatibilityMode(mode)}


def compatibility_of(info: ValidationInfo) -> CompatibilityMode:
    """Resolve the compatibility mode of the validation in progress."""
    context = info.context if isinstance(info.context, Mapping) else {}
    return CompatibilityMode(context.get(COMPATIBILITY_CONTEXT_KEY, DEFAULT_COMPATIBILITY_MODE))


class CurseForgeModel(BaseModel):
    """Immutable record decoded from the remote API.

    Field names are snake_case locally and camelCase on the wire. Fields the
    local schema does not know are handled according to the compatibility
    mode found in the validation context; under LENIENT they stay available
    through ``other_fields`` and are written back by ``model_dump``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    @model_validator(mode="wrap")
    @classmethod
    def _apply_compatibility(
        cls,
        data: Any,
        handler: ModelWrapValidatorHandler[Self],
        info: ValidationInfo,
    ) -> Self:
        model = handler(data)
        extra = model.__pydantic_extra__
        if not extra:
            return model

        mode = compatibility_of(info)
        if mode == CompatibilityMode.STRICT:
            name = next(iter(extra))
            raise PydanticCustomError(
                UNKNOWN_FIELD_ERROR,
                "unknown field `{field}` on {model}",
                {"field": name, "model": cls.__name__},
            )
        if mode == CompatibilityMode.IGNORE:
            object.__setattr__(model, "__pydantic_extra__", {})
        return model

    @property
    def other_fields(self) -> dict[str, Any]:
        """Residual bag of fields captured under LENIENT decoding."""
        return dict(self.__pydantic_extra__ or {})


def tolerant_enum(enum_type: type[E]) -> Any:
    """Annotate an integer enum so unknown variants map to ``UNKNOWN`` when lenient.

    Outside LENIENT mode an unknown variant stays a validation error, and the
    reserved ``UNKNOWN`` value itself is refused as a wire value.
    """

    def validate(value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo) -> E:
        lenient = compatibility_of(info) == CompatibilityMode.LENIENT
        try:
            result = handler(value)
        except ValidationError:
            if lenient and isinstance(value, int) and not isinstance(value, bool):
                return enum_type(UNKNOWN_VARIANT)
            raise
        if result == UNKNOWN_VARIANT and not lenient:
            raise PydanticCustomError(
                "enum",
                "{value} is not a known {enum} variant",
                {"value": value, "enum": enum_type.__name__},
            )
        return result

    return Annotated[enum_type, WrapValidator(validate)]


def _null_datetime(value: Any) -> Any:
    if isinstance(value, str) and value.rstrip("Z") == NULL_DATETIME_SENTINEL:
        return None
    return value


def _null_string(value: Any) -> Any:
    if value == "":
        return None
    return value


# Timestamp where the remote writes 0001-01-01T00:00:00 instead of null
NullableDateTime = Annotated[Optional[datetime], BeforeValidator(_null_datetime)]

# String where the remote writes "" instead of null
NullableString = Annotated[Optional[str], BeforeValidator(_null_string)]
