"""
Pydantic data models for API requests and responses.
"""
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    """Chat request model."""
    message: Optional[str] = ""

    @field_validator("message", mode="before")
    @classmethod
    def null_message_is_empty(cls, value):
        """A null message is forwarded as an empty one."""
        return "" if value is None else value


class ChatResponse(BaseModel):
    """Answer text with the reference lines split off the end."""
    response: str
    references: List[str] = Field(default_factory=list)
