"""Input validation and sanitization for incoming chat requests."""
from __future__ import annotations

from typing import Any, List

from .errors import ValidationError
from .models import ChatMessage, ConversationHistory, ValidatedChatRequest

MAX_MESSAGE_LENGTH = 2000
SANITIZED_LENGTH = 250
HISTORY_LIMIT = 10
HISTORY_ROLES = ("user", "assistant")

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)


def escape_text(value: str) -> str:
    return value.translate(_ESCAPE_TABLE)


def sanitize_text(value: str, max_length: int = SANITIZED_LENGTH) -> str:
    """Drop null bytes and hard-truncate.

    Truncation applies even to input that passed the 2000 character check,
    so a long valid message is silently shortened to ``max_length``.
    """
    return value.replace("\x00", "")[:max_length]


def _clean(value: str) -> str:
    return sanitize_text(escape_text(value.strip()))


def validate_history(raw: Any, limit: int = HISTORY_LIMIT) -> ConversationHistory:
    """Keep the most recent well-formed user/assistant entries.

    Filtering happens before the cap so the result always holds up to
    ``limit`` valid entries.
    """
    if not isinstance(raw, list):
        return []

    history: List[ChatMessage] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        role = entry.get("role")
        content = entry.get("content")
        if role not in HISTORY_ROLES or not isinstance(content, str):
            continue
        if not content or len(content) > MAX_MESSAGE_LENGTH:
            continue
        cleaned = _clean(content)
        if not cleaned:
            continue
        history.append(ChatMessage(role=role, content=cleaned))

    return history[-limit:] if limit > 0 else []


def validate_chat_request(payload: Any, history_limit: int = HISTORY_LIMIT) -> ValidatedChatRequest:
    if not isinstance(payload, dict):
        raise ValidationError(["Request body must be a JSON object"])

    details: List[str] = []
    message = payload.get("message")

    if not isinstance(message, str):
        details.append("message must be a string")
    else:
        message = escape_text(message.strip())
        if not message:
            details.append("message must not be empty")
        elif len(message) > MAX_MESSAGE_LENGTH:
            details.append(f"message must be between 1 and {MAX_MESSAGE_LENGTH} characters")

    if details:
        raise ValidationError(details)

    message = sanitize_text(message)
    if not message:
        raise ValidationError(["message must not be empty"])

    history = validate_history(payload.get("conversationHistory"), limit=history_limit)
    return ValidatedChatRequest(message=message, history=history)
