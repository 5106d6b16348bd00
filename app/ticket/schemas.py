# app/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

STATUS_STRINGS = {"true": True, "false": False}


def _not_blank(value):
    if value is None:
        raise PydanticCustomError("missing_value", "Field may not be null")
    if isinstance(value, str) and not value.strip():
        raise PydanticCustomError("blank_string", "Field may not be empty")
    return value


class TicketCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)

    @field_validator("name", "description", mode="before")
    @classmethod
    def not_blank(cls, value):
        return _not_blank(value)


class TicketUpdate(BaseModel):
    """Partial update payload. Only these fields are mutable."""

    name: str | None = None
    description: str | None = None
    status: bool | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "description", mode="before")
    @classmethod
    def not_blank(cls, value):
        # validators only run on supplied keys, so an explicit null is rejected
        return _not_blank(value)

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, value):
        # bool literal or its JSON string encoding, nothing else
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value in STATUS_STRINGS:
            return STATUS_STRINGS[value]
        raise PydanticCustomError("status_format", "Status must be true or false")


class TicketShort(BaseModel):
    id: str
    name: str
    created_at: datetime
    status: bool

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
