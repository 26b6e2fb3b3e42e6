"""Entity Base — strict pydantic model that turns a raw payload into an immutable value.

Invariants:
    - parse() either returns a frozen instance or raises EntityError (never pydantic's error)
    - Missing key, None, or "" → NOT_CONTAIN_NEEDED_PROPERTY
    - Wrong primitive type → NOT_MEET_DATA_TYPE_SPECIFICATION (strict: no coercion)
    - Missing-property errors win over type errors, type errors win over custom rules
    - Unknown keys are dropped; to_dict() exposes exactly the declared fields

Design Decisions:
    - camelCase aliases with populate_by_name: wire payloads use camelCase,
      use cases build payloads with snake_case keys, both validate
"""

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from forum.core.errors import EntityError, EntityErrorKind

RequiredStr = Annotated[str, Field(min_length=1)]

_MISSING_TYPES = {"missing", "string_too_short"}
_CUSTOM_KINDS = {kind.value: kind for kind in EntityErrorKind}


class Entity(BaseModel):
    """Base class for all forum entities."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    entity_code: ClassVar[str] = "ENTITY"

    @classmethod
    def parse(cls, payload: Mapping[str, Any] | None) -> Self:
        """Validate a raw payload, raising EntityError naming the offending field."""
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise EntityError(
                cls.entity_code,
                EntityErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION,
                "payload",
            )
        try:
            return cls.model_validate(dict(payload))
        except PydanticValidationError as e:
            raise _to_entity_error(cls.entity_code, e) from None

    def to_dict(self) -> dict:
        """JSON-ready view with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


def _to_entity_error(entity_code: str, exc: PydanticValidationError) -> EntityError:
    """Pick the most significant pydantic error and map it to an EntityError."""
    errors = exc.errors()
    missing = [e for e in errors if _is_missing(e)]
    if missing:
        return EntityError(
            entity_code, EntityErrorKind.NOT_CONTAIN_NEEDED_PROPERTY,
            _field_name(missing[0]),
        )
    type_errors = [e for e in errors if e["type"] not in _CUSTOM_KINDS]
    if type_errors:
        return EntityError(
            entity_code, EntityErrorKind.NOT_MEET_DATA_TYPE_SPECIFICATION,
            _field_name(type_errors[0]),
        )
    first = errors[0]
    return EntityError(entity_code, _CUSTOM_KINDS[first["type"]], _field_name(first))


def _is_missing(error: dict) -> bool:
    return error["type"] in _MISSING_TYPES or (
        "input" in error and error["input"] is None
    )


def _field_name(error: dict) -> str:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else "payload"
