"""Prompt assembly and the guarded call into the completion provider."""
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from .errors import ProviderError, ProviderTimeoutError
from .models import ChatMessage
from .provider import ChatCompletionProvider, ProviderMessages

logger = logging.getLogger(__name__)

LONG_QUERY_TOKENS = 6


class CompletionAdapter:
    """Wraps a provider with the persona prompt, budgets, and failure mapping."""

    def __init__(
        self,
        provider: ChatCompletionProvider,
        system_prompt: str,
        *,
        history_limit: int = 10,
        temperature: float = 0.7,
        max_tokens: int = 500,
        short_max_tokens: int = 300,
        timeout: float = 20.0,
    ) -> None:
        self.provider = provider
        self.system_prompt = system_prompt
        self.history_limit = history_limit
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.short_max_tokens = short_max_tokens
        self.timeout = timeout

    def build_messages(self, message: str, history: Sequence[ChatMessage]) -> ProviderMessages:
        recent = list(history)[-self.history_limit :] if self.history_limit > 0 else []
        payload = [{"role": "system", "content": self.system_prompt}]
        payload.extend(msg.as_provider_message() for msg in recent)
        payload.append({"role": "user", "content": message})
        return payload

    def token_budget(self, message: str) -> int:
        if len(message.split()) > LONG_QUERY_TOKENS:
            return self.max_tokens
        return self.short_max_tokens

    async def complete(self, message: str, history: Sequence[ChatMessage]) -> str:
        messages = self.build_messages(message, history)
        try:
            return await asyncio.wait_for(
                self.provider.complete(
                    messages,
                    max_tokens=self.token_budget(message),
                    temperature=self.temperature,
                ),
                timeout=self.timeout,
            )
        except ProviderError:
            raise
        except asyncio.TimeoutError as exc:
            logger.warning(f"Completion call exceeded {self.timeout:g}s, aborting")
            raise ProviderTimeoutError(self.timeout) from exc
        except Exception as exc:
            raise ProviderError(f"Completion provider failed: {exc}") from exc
