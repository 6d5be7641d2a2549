"""Rule-based classifiers run against the current message and recent history."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from .keywords import DEFAULT_KEYWORDS, KeywordTables
from .models import ChatMessage, ClassificationResult

RECENT_USER_TURNS = 3


def _recent_user_contents(history: Sequence[ChatMessage], limit: int = RECENT_USER_TURNS) -> List[str]:
    user_turns = [msg.content for msg in history if msg.role == "user"]
    return user_turns[-limit:] if limit > 0 else []


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    lower = text.lower()
    return any(keyword in lower for keyword in keywords)


def _normalize(text: str) -> str:
    return text.lower().strip()


def detect_consultation_intent(
    message: str,
    history: Sequence[ChatMessage],
    keywords: KeywordTables = DEFAULT_KEYWORDS,
) -> bool:
    """True when the message or one of the last user turns asks for sales contact."""
    if _contains_any(message, keywords.consultation):
        return True
    return any(_contains_any(content, keywords.consultation) for content in _recent_user_contents(history))


def has_domain_context(history: Sequence[ChatMessage], keywords: KeywordTables = DEFAULT_KEYWORDS) -> bool:
    return any(_contains_any(content, keywords.domain) for content in _recent_user_contents(history))


def is_off_topic(
    message: str,
    history: Sequence[ChatMessage],
    keywords: KeywordTables = DEFAULT_KEYWORDS,
) -> bool:
    """Decide whether a message is unrelated to the product domain.

    Greetings are always allowed. Meta requests ("list", "summarize", ...)
    are allowed when recent turns established domain context. A message
    containing a domain keyword is on-topic; otherwise it is on-topic only
    if recent user turns carry domain context.
    """
    lower = _normalize(message)

    if keywords.greeting.search(lower):
        return False

    if keywords.meta_request.search(lower) and has_domain_context(history, keywords):
        return False

    if _contains_any(lower, keywords.domain):
        return False

    return not has_domain_context(history, keywords)


def is_repeated(message: str, history: Sequence[ChatMessage]) -> bool:
    recent = _recent_user_contents(history)
    if len(recent) < RECENT_USER_TURNS:
        return False
    norm = _normalize(message)
    return all(_normalize(content) == norm for content in recent)


def classify(
    message: str,
    history: Sequence[ChatMessage],
    keywords: KeywordTables = DEFAULT_KEYWORDS,
) -> ClassificationResult:
    return ClassificationResult(
        consultation_intent=detect_consultation_intent(message, history, keywords),
        off_topic=is_off_topic(message, history, keywords),
        repeated=is_repeated(message, history),
    )
