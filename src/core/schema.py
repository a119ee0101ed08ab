from enum import Enum

from pydantic import BaseModel, ConfigDict, field_serializer


class BaseSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    @field_serializer("*", mode="wrap", when_used="unless-none")
    def serialize_enum(self, value, handler, info):
        """Serialize enums by value"""
        result = handler(value)
        if isinstance(result, Enum):
            return result.value
        return result


class FrozenSchema(BaseSchema):
    """Immutable value object; instances are hashable and reject assignment."""

    model_config = ConfigDict(frozen=True)


class ErrorResponse(BaseModel):
    type: str
    error: str
