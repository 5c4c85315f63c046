"""Message Schemas: request/response contracts for /api/messages."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sender_id: UUID = Field(alias="idEmisor")
    receiver_id: UUID = Field(alias="idReceptor")
    content: str = Field(min_length=1, max_length=2000)

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content cannot be empty or whitespace")
        return v


class MessageResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    sender_id: UUID = Field(alias="idEmisor")
    receiver_id: UUID = Field(alias="idReceptor")
    content: str
    viewed: bool
    created_at: datetime = Field(alias="date")


class UnviewedMessages(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_not_viewed_messages: bool = Field(alias="hasNotViewedMessages")
