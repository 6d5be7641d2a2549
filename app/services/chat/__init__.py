"""Chat service package exports."""

from .errors import ProviderError, ProviderTimeoutError, ValidationError
from .gating import GatingDecision, evaluate_gating
from .models import ChatMessage, ChatReply
from .service import ChatService, get_chat_service
from .validation import validate_chat_request

__all__ = [
    "ChatMessage",
    "ChatReply",
    "ChatService",
    "GatingDecision",
    "ProviderError",
    "ProviderTimeoutError",
    "ValidationError",
    "evaluate_gating",
    "get_chat_service",
    "validate_chat_request",
]
