"""Base models for domain entities."""

from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from forum.domain.error import ValidationError, ValidationReason


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


E = TypeVar("E", bound="Entity")


class Entity(DomainModel):
    """Validated shape built from a raw payload.

    Payload keys may use the camelCase wire names (``threadId``) or the
    snake_case attribute names (``thread_id``). Blank values (``None`` or
    ``""``) are treated as absent, so a required field holding one is
    reported as missing rather than mistyped.
    """

    entity_code: ClassVar[str] = "ENTITY"

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_payload(cls, data: Any) -> Any:
        """Drop blank values, then apply the entity specific preparation."""
        if not isinstance(data, Mapping):
            return data
        present = {k: v for k, v in data.items() if v is not None and v != ""}
        return cls.prepare_payload(present)

    @classmethod
    def prepare_payload(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Normalize a payload before field validation. Override as needed."""
        return data

    @classmethod
    def from_payload(cls: type[E], payload: Mapping[str, Any]) -> E:
        """Validate a payload and build the entity.

        Required-field presence is checked before type conformance: if any
        field is missing the error reports only the missing fields.

        Args:
            payload: Mapping of field name to value

        Returns:
            The validated entity

        Raises:
            ValidationError: With reason MISSING_PROPERTY or TYPE_MISMATCH
        """
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            errors = e.errors()
            missing = [_error_path(err) for err in errors if err["type"] == "missing"]
            if missing:
                raise ValidationError(
                    cls.entity_code, ValidationReason.MISSING_PROPERTY, missing
                ) from e
            raise ValidationError(
                cls.entity_code,
                ValidationReason.TYPE_MISMATCH,
                [_error_path(err) for err in errors],
            ) from e

    def to_payload(self) -> dict[str, Any]:
        """Serialize using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True)


def _error_path(error: Mapping[str, Any]) -> str:
    return ".".join(str(part) for part in error["loc"])
