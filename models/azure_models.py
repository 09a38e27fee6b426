"""
Pydantic models for the Azure OpenAI chat completions response.
Only the fields the proxy reads are declared; everything else is ignored.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class ChoiceMessage(BaseModel):
    """Assistant message inside a choice."""
    content: Optional[str] = None


class ChatChoice(BaseModel):
    """One completion choice."""
    message: ChoiceMessage = Field(default_factory=ChoiceMessage)
    index: int = 0
    finish_reason: Optional[str] = None


class AzureResponse(BaseModel):
    """Chat completions response body."""
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatChoice] = Field(default_factory=list)
