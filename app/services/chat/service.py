"""Chat service orchestrating gating, completion, and post-processing."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Sequence

from app.core.config import settings

from .completion import CompletionAdapter
from .gating import evaluate_gating
from .keywords import DEFAULT_KEYWORDS, KeywordTables
from .models import ChatMessage, ChatReply
from .postprocess import post_process
from .provider import ChatCompletionProvider, LocalChatProvider, OpenAIChatProvider

logger = logging.getLogger(__name__)


class ChatService:
    """High level facade for a single chat turn."""

    def __init__(
        self,
        adapter: CompletionAdapter,
        *,
        keywords: KeywordTables = DEFAULT_KEYWORDS,
    ) -> None:
        self.adapter = adapter
        self.keywords = keywords

    async def reply(self, message: str, history: Sequence[ChatMessage]) -> ChatReply:
        """Answer one validated message.

        Short-circuit replies never touch the provider. Provider failures
        propagate as ``ProviderError`` for the route to translate.
        """
        outcome = evaluate_gating(message, history, self.keywords)
        if outcome.short_circuited:
            return ChatReply(
                response=outcome.reply or "",
                consultation_intent=False,
                short_circuited=True,
            )

        raw = await self.adapter.complete(message, history)
        response = post_process(raw, outcome.consultation_intent)
        return ChatReply(response=response, consultation_intent=outcome.consultation_intent)


def _build_provider() -> ChatCompletionProvider:
    if settings.CHAT_PROVIDER == "openai" and settings.OPENAI_API_KEY:
        logger.info(f"Using OpenAI provider with model {settings.OPENAI_MODEL}")
        return OpenAIChatProvider(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            api_base=settings.OPENAI_API_BASE,
            timeout=settings.CHAT_TIMEOUT_SECONDS,
        )

    logger.info("Using local rule-based chat provider")
    return LocalChatProvider()


@lru_cache(maxsize=1)
def get_chat_service() -> ChatService:
    adapter = CompletionAdapter(
        _build_provider(),
        settings.CHAT_SYSTEM_PROMPT,
        history_limit=settings.CHAT_HISTORY_LIMIT,
        temperature=settings.CHAT_TEMPERATURE,
        max_tokens=settings.CHAT_MAX_TOKENS,
        short_max_tokens=settings.CHAT_SHORT_MAX_TOKENS,
        timeout=settings.CHAT_TIMEOUT_SECONDS,
    )
    return ChatService(adapter)
