from typing import Any, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from nexus_cms.core.exceptions import BadRequestException

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def null_means_default(*fields: str):
    """Validator for ``fields``: an explicit null behaves like an omitted field."""

    def fall_back(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    return field_validator(*fields, mode="before")(fall_back)


def describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "body"
    if error["type"] in ("missing", "string_too_short"):
        return f"{field} is required"
    return f"Invalid value for {field}"


def validate_payload(schema: Type[SchemaT], body: Any) -> SchemaT:
    """Parse a request body into ``schema``; any violation is a 400."""
    try:
        return schema.model_validate(body if body is not None else {})
    except ValidationError as exc:
        raise BadRequestException(describe_validation_error(exc))
