"""Data models used by the chat pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """A single conversation turn. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    content: str = Field(min_length=1)

    def as_provider_message(self) -> dict:
        return {"role": self.role, "content": self.content}


ConversationHistory = List[ChatMessage]


@dataclass(frozen=True)
class ClassificationResult:
    """Per-request classifier output; never persisted."""

    consultation_intent: bool
    off_topic: bool
    repeated: bool


@dataclass(frozen=True)
class ValidatedChatRequest:
    message: str
    history: ConversationHistory


@dataclass(frozen=True)
class ChatReply:
    """Final text returned to the widget."""

    response: str
    consultation_intent: bool
    short_circuited: bool = False

    def to_payload(self) -> dict:
        return {"response": self.response, "consultationIntent": self.consultation_intent}
