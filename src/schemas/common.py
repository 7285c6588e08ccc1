"""Response envelopes shared by all endpoints."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DataResponse(BaseModel, Generic[T]):
    """Successful response carrying a payload."""

    success: bool = True
    data: T


class MessageResponse(BaseModel):
    """Successful response with a message and no payload."""

    success: bool = True
    message: str


class MessageDataResponse(BaseModel, Generic[T]):
    """Successful response with a message and a payload."""

    success: bool = True
    message: str
    data: T
